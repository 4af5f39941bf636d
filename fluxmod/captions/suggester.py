"""Keyword-triggered caption suggestions.

Without context the first templates of the catalog are returned.  With
context, templates whose triggers appear in it come first (catalog order)
and the catalog pads the list when fewer than three match.
"""

from __future__ import annotations

from typing import Optional, Sequence

from fluxmod.captions.templates import DEFAULT_CATALOG, CaptionTemplate

MIN_SUGGESTIONS = 3
MAX_SUGGESTIONS = 5


def generate_captions(
    context: Optional[str] = None,
    count: Optional[int] = None,
    catalog: Optional[Sequence[CaptionTemplate]] = None,
) -> list[str]:
    """Return 3-5 distinct caption suggestions for *context*.

    When *count* is given it is clamped into [3, 5] and the result is filled
    to exactly that size.  A catalog smaller than three templates yields all
    of its captions.  *catalog* defaults to the built-in catalog.
    """
    if catalog is None:
        catalog = DEFAULT_CATALOG

    target = None
    if count is not None:
        target = max(MIN_SUGGESTIONS, min(MAX_SUGGESTIONS, count))

    normalized = (context or "").strip().casefold()
    if not normalized:
        return _fill([], catalog, target or MIN_SUGGESTIONS)

    matched = _dedupe(t.text for t in catalog if t.matches(normalized))
    if target is None:
        target = min(len(matched), MAX_SUGGESTIONS) if len(matched) >= MIN_SUGGESTIONS else MIN_SUGGESTIONS
    return _fill(matched[:target], catalog, target)


def _fill(captions: list[str], catalog: Sequence[CaptionTemplate], target: int) -> list[str]:
    """Pad *captions* from the catalog, in order, up to *target* entries."""
    result = list(captions)
    for template in catalog:
        if len(result) >= target:
            break
        if template.text not in result:
            result.append(template.text)
    return result


def _dedupe(texts) -> list[str]:
    seen: list[str] = []
    for text in texts:
        if text not in seen:
            seen.append(text)
    return seen
