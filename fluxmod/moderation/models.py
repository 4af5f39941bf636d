"""Data models for the content moderation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

FLAG_REASON = "Contains inappropriate content"


@dataclass(frozen=True)
class ModerationVerdict:
    """Result of checking one text against the banned lexicon.

    ``flagged`` is derived from ``matched_terms`` so the two can never
    disagree; ``reason`` is set only on flagged verdicts.
    """

    matched_terms: tuple[str, ...] = ()
    reason: Optional[str] = None
    matched_categories: tuple[str, ...] = ()

    @property
    def flagged(self) -> bool:
        return bool(self.matched_terms)

    @classmethod
    def clean(cls) -> ModerationVerdict:
        return cls()

    @classmethod
    def from_matches(
        cls, matched_terms: list[str], matched_categories: list[str] | None = None
    ) -> ModerationVerdict:
        if not matched_terms:
            return cls.clean()
        return cls(
            matched_terms=tuple(matched_terms),
            reason=FLAG_REASON,
            matched_categories=tuple(matched_categories or ()),
        )

    def to_dict(self) -> dict:
        return {
            "flagged": self.flagged,
            "reason": self.reason,
            "matched_terms": list(self.matched_terms),
            "matched_categories": list(self.matched_categories),
        }
