"""Admin router -- moderation audit trail, dashboard stats and lexicon management.

Prefix: ``/api/admin``.  Every endpoint requires ``X-Admin-Token``.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fluxmod import config
from fluxmod.audit.log import ModerationAuditLog
from fluxmod.lexicon.models import LexiconConfigError, LexiconSnapshot
from fluxmod.lexicon.store import LexiconStore
from fluxmod.sentiment.models import SentimentLabel
from web.backend.app.dependencies import get_audit_log, get_lexicon_store
from web.backend.app.middleware.auth import require_admin
from web.backend.app.models.api import (
    AuditEntryResponse,
    AuditExportResponse,
    LexiconCategoryResponse,
    LexiconResponse,
    ModerationStatsResponse,
    ReloadLexiconRequest,
)

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _parse_sentiment(value: Optional[str]) -> Optional[SentimentLabel]:
    if not value or value == "All":
        return None
    try:
        return SentimentLabel.parse(value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _lexicon_to_response(snapshot: LexiconSnapshot) -> LexiconResponse:
    return LexiconResponse(
        version=snapshot.version,
        source=snapshot.source,
        loaded_at=snapshot.loaded_at,
        banned=[
            LexiconCategoryResponse(name=c.name, terms=list(c.terms))
            for c in snapshot.banned.categories
        ],
        positive=list(snapshot.positive.terms()),
        negative=list(snapshot.negative.terms()),
    )


# =========================================================================
# Audit endpoints
# =========================================================================


@router.get("/audit", response_model=list[AuditEntryResponse])
async def list_audit_entries(
    flagged: Optional[bool] = Query(None),
    sentiment: Optional[str] = Query(None, description="Positive, Neutral, Negative or All"),
    search: str = Query("", description="Matches actor or content"),
    limit: int = Query(200, ge=1, le=10000),
    audit: ModerationAuditLog = Depends(get_audit_log),
):
    """List recorded classifications, newest first."""
    entries = audit.get_entries(
        flagged=flagged,
        sentiment=_parse_sentiment(sentiment),
        search=search,
        limit=limit,
    )
    return [AuditEntryResponse(**asdict(e)) for e in entries]


@router.get("/audit/export", response_model=AuditExportResponse)
async def export_audit_entries(
    format: str = Query("json", pattern="^(json|csv)$"),
    flagged: Optional[bool] = Query(None),
    sentiment: Optional[str] = Query(None),
    audit: ModerationAuditLog = Depends(get_audit_log),
):
    """Export the audit trail as JSON or CSV."""
    entries = audit.get_entries(
        flagged=flagged, sentiment=_parse_sentiment(sentiment), limit=10000
    )
    return AuditExportResponse(
        format=format,
        content=audit.format_entries(entries, format),
        record_count=len(entries),
    )


@router.get("/stats", response_model=ModerationStatsResponse)
async def moderation_stats(audit: ModerationAuditLog = Depends(get_audit_log)):
    """Flagged and per-sentiment counts for the dashboard."""
    return ModerationStatsResponse(**asdict(audit.stats()))


# =========================================================================
# Lexicon endpoints
# =========================================================================


@router.get("/lexicon", response_model=LexiconResponse)
async def get_lexicon(store: LexiconStore = Depends(get_lexicon_store)):
    """Return the active lexicon snapshot."""
    return _lexicon_to_response(store.snapshot())


@router.post("/lexicon/reload", response_model=LexiconResponse)
async def reload_lexicon(
    request: ReloadLexiconRequest,
    store: LexiconStore = Depends(get_lexicon_store),
):
    """Load a lexicon file and swap it in atomically.

    On a bad file the current lexicon stays active and ``422`` is returned.
    """
    path = request.path or config.LEXICON_PATH
    if not path:
        raise HTTPException(
            status_code=400,
            detail="No lexicon path given and FLUXMOD_LEXICON_PATH is not set.",
        )
    try:
        snapshot = store.reload(path)
    except LexiconConfigError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _lexicon_to_response(snapshot)
