"""Moderation pipeline — moderation and sentiment for one submission.

Both engines always run, including on flagged text, so admin tooling can
see the tone of content that was flagged.  The pipeline only classifies;
whether to publish, hold or reject is the caller's decision.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fluxmod.lexicon.store import LexiconStore, get_store
from fluxmod.moderation.models import ModerationVerdict
from fluxmod.moderation.moderator import ContentModerator
from fluxmod.sentiment.analyzer import analyze_sentiment
from fluxmod.sentiment.models import SentimentResult


@dataclass(frozen=True)
class PipelineResult:
    """Combined classification of one text."""

    moderation: ModerationVerdict
    sentiment: SentimentResult

    def to_dict(self) -> dict:
        return {
            "moderation": self.moderation.to_dict(),
            "sentiment": self.sentiment.to_dict(),
        }


class ModerationPipeline:
    """Runs every engine against a single lexicon snapshot per call."""

    def __init__(self, store: LexiconStore | None = None) -> None:
        self._store = store
        self._moderator = ContentModerator(store)

    def evaluate(self, text: Optional[str]) -> PipelineResult:
        snapshot = (self._store or get_store()).snapshot()
        return PipelineResult(
            moderation=self._moderator.check(text, snapshot.banned),
            sentiment=analyze_sentiment(text, snapshot.positive, snapshot.negative),
        )


_default_pipeline = ModerationPipeline()


def evaluate(text: Optional[str]) -> PipelineResult:
    """Classify *text* with the process-wide lexicon."""
    return _default_pipeline.evaluate(text)
