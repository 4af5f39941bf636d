"""Pydantic models for API request/response serialization.

These models mirror the fluxmod dataclasses and provide proper JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from fluxmod import config

# ---------------------------------------------------------------------------
# Classification models
# ---------------------------------------------------------------------------


class TextRequest(BaseModel):
    """Body for endpoints that classify a piece of user text."""

    text: str = Field("", max_length=config.MAX_CONTENT_CHARS)


class ModerateContentResponse(BaseModel):
    """Mirrors fluxmod.moderation.models.ModerationVerdict."""

    flagged: bool
    reason: Optional[str] = None
    matched_terms: list[str] = Field(default_factory=list)
    matched_categories: list[str] = Field(default_factory=list)


class AnalyzeSentimentResponse(BaseModel):
    """Mirrors fluxmod.sentiment.models.SentimentResult."""

    sentiment: str
    positive_hits: int = 0
    negative_hits: int = 0
    positive_terms: list[str] = Field(default_factory=list)
    negative_terms: list[str] = Field(default_factory=list)


class EvaluateRequest(TextRequest):
    """Classify a submission and record it in the audit log."""

    actor: str = "anonymous"
    resource_id: str = ""


class EvaluateResponse(BaseModel):
    """Mirrors fluxmod.pipeline.PipelineResult."""

    moderation: ModerateContentResponse
    sentiment: AnalyzeSentimentResponse
    audit_id: str = ""


class GenerateCaptionsRequest(BaseModel):
    context: Optional[str] = Field(None, max_length=config.MAX_CONTENT_CHARS)
    count: Optional[int] = Field(None, ge=1, le=10)


class GenerateCaptionsResponse(BaseModel):
    suggestions: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Admin models
# ---------------------------------------------------------------------------


class AuditEntryResponse(BaseModel):
    """Mirrors fluxmod.audit.log.AuditEntry."""

    id: str
    timestamp: str
    actor: str
    resource_id: str = ""
    content_snippet: str = ""
    flagged: bool = False
    reason: Optional[str] = None
    matched_terms: list[str] = Field(default_factory=list)
    sentiment: str


class AuditExportResponse(BaseModel):
    """Exported audit log content."""

    format: str
    content: str
    record_count: int = 0


class ModerationStatsResponse(BaseModel):
    """Mirrors fluxmod.audit.log.ModerationStats."""

    total: int = 0
    flagged: int = 0
    positive: int = 0
    neutral: int = 0
    negative: int = 0


class LexiconCategoryResponse(BaseModel):
    name: str
    terms: list[str] = Field(default_factory=list)


class LexiconResponse(BaseModel):
    """Summary of the active lexicon snapshot."""

    version: str
    source: str
    loaded_at: str = ""
    banned: list[LexiconCategoryResponse] = Field(default_factory=list)
    positive: list[str] = Field(default_factory=list)
    negative: list[str] = Field(default_factory=list)


class ReloadLexiconRequest(BaseModel):
    """Path to a YAML lexicon; defaults to ``FLUXMOD_LEXICON_PATH``."""

    path: str = ""
