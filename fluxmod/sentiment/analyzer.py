"""Word-frequency sentiment scoring against the positive/negative lexicons.

Each lexicon term counts at most once per text: the score measures how many
distinct polarity words appear, not how often one of them is repeated.
Terms match as casefolded substrings, like the moderation engine.
"""

from __future__ import annotations

from typing import Optional

from fluxmod.lexicon.models import Lexicon
from fluxmod.lexicon.store import get_store
from fluxmod.sentiment.models import SentimentLabel, SentimentResult


def analyze_sentiment(
    text: Optional[str],
    positive: Lexicon | None = None,
    negative: Lexicon | None = None,
) -> SentimentResult:
    """Classify *text* as Positive, Neutral or Negative.

    Args:
        text: Text to score; ``None`` is treated as empty.
        positive: Positive lexicon; defaults to the active snapshot's.
        negative: Negative lexicon; defaults to the active snapshot's.
    """
    if positive is None or negative is None:
        snapshot = get_store().snapshot()
        positive = positive if positive is not None else snapshot.positive
        negative = negative if negative is not None else snapshot.negative

    normalized = (text or "").casefold()
    positive_terms = _present_terms(normalized, positive)
    negative_terms = _present_terms(normalized, negative)

    return SentimentResult(
        label=choose_label(len(positive_terms), len(negative_terms)),
        positive_hits=len(positive_terms),
        negative_hits=len(negative_terms),
        positive_terms=positive_terms,
        negative_terms=negative_terms,
    )


def choose_label(positive_hits: int, negative_hits: int) -> SentimentLabel:
    """Pick a label from hit counts.  Ties, including 0-0, are Neutral."""
    if positive_hits > negative_hits:
        return SentimentLabel.POSITIVE
    if negative_hits > positive_hits:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def _present_terms(normalized: str, lexicon: Lexicon) -> tuple[str, ...]:
    if not normalized:
        return ()
    return tuple(term for term in lexicon.terms() if term in normalized)
