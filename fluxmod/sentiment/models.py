"""Data models for sentiment classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SentimentLabel(Enum):
    """The three tones a text can be classified as."""

    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"

    @classmethod
    def parse(cls, value: str) -> SentimentLabel:
        """Accept ``"positive"``, ``"Positive"`` etc.; reject anything else."""
        for label in cls:
            if label.value.lower() == str(value).strip().lower():
                return label
        raise ValueError(
            f"Sentiment must be Positive, Neutral, or Negative (got {value!r})"
        )


@dataclass(frozen=True)
class SentimentResult:
    """Label plus the per-lexicon hit counts used to choose it."""

    label: SentimentLabel
    positive_hits: int = 0
    negative_hits: int = 0
    positive_terms: tuple[str, ...] = ()
    negative_terms: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "label": self.label.value,
            "positive_hits": self.positive_hits,
            "negative_hits": self.negative_hits,
            "positive_terms": list(self.positive_terms),
            "negative_terms": list(self.negative_terms),
        }
