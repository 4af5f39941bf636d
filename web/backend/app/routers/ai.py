"""AI router -- moderation, sentiment and caption endpoints.

Prefix: ``/api/ai``

Classification here never rejects a post; it returns the verdict and the
post workflow decides what to do with flagged content.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fluxmod.audit.log import ModerationAuditLog
from fluxmod.captions.suggester import generate_captions
from fluxmod.lexicon.store import LexiconStore
from fluxmod.moderation.models import ModerationVerdict
from fluxmod.moderation.moderator import ContentModerator
from fluxmod.pipeline import ModerationPipeline
from fluxmod.sentiment.analyzer import analyze_sentiment
from fluxmod.sentiment.models import SentimentResult
from web.backend.app.dependencies import get_audit_log, get_lexicon_store
from web.backend.app.models.api import (
    AnalyzeSentimentResponse,
    EvaluateRequest,
    EvaluateResponse,
    GenerateCaptionsRequest,
    GenerateCaptionsResponse,
    ModerateContentResponse,
    TextRequest,
)

router = APIRouter(prefix="/api/ai", tags=["ai"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _verdict_to_response(verdict: ModerationVerdict) -> ModerateContentResponse:
    return ModerateContentResponse(**verdict.to_dict())


def _sentiment_to_response(result: SentimentResult) -> AnalyzeSentimentResponse:
    return AnalyzeSentimentResponse(
        sentiment=result.label.value,
        positive_hits=result.positive_hits,
        negative_hits=result.negative_hits,
        positive_terms=list(result.positive_terms),
        negative_terms=list(result.negative_terms),
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/moderate", response_model=ModerateContentResponse)
async def moderate_content(
    request: TextRequest,
    store: LexiconStore = Depends(get_lexicon_store),
):
    """Check text against the banned-term lexicon."""
    return _verdict_to_response(ContentModerator(store).check(request.text))


@router.get("/sentiment")
async def sentiment_status():
    """Liveness message for the sentiment endpoint."""
    return {"message": "Sentiment endpoint is active."}


@router.post("/sentiment", response_model=AnalyzeSentimentResponse)
async def analyze_text_sentiment(
    request: TextRequest,
    store: LexiconStore = Depends(get_lexicon_store),
):
    """Classify text as Positive, Neutral or Negative."""
    snapshot = store.snapshot()
    return _sentiment_to_response(
        analyze_sentiment(request.text, snapshot.positive, snapshot.negative)
    )


@router.post("/captions", response_model=GenerateCaptionsResponse)
async def suggest_captions(request: GenerateCaptionsRequest):
    """Suggest 3-5 captions, tailored to the optional context."""
    return GenerateCaptionsResponse(
        suggestions=generate_captions(request.context, count=request.count)
    )


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_submission(
    request: EvaluateRequest,
    store: LexiconStore = Depends(get_lexicon_store),
    audit: ModerationAuditLog = Depends(get_audit_log),
):
    """Moderate and score a submission, recording the result for admins."""
    result = ModerationPipeline(store).evaluate(request.text)
    entry = audit.record(
        result,
        content=request.text,
        actor=request.actor,
        resource_id=request.resource_id,
    )
    return EvaluateResponse(
        moderation=_verdict_to_response(result.moderation),
        sentiment=_sentiment_to_response(result.sentiment),
        audit_id=entry.id,
    )
