"""Immutable lexicon types shared by the classification engines."""

from __future__ import annotations

from dataclasses import dataclass, field


class LexiconConfigError(ValueError):
    """Raised when lexicon configuration is missing, malformed or contradictory."""


@dataclass(frozen=True)
class TermCategory:
    """A named, ordered group of normalized terms (e.g. ``profanity``)."""

    name: str
    terms: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.terms)


@dataclass(frozen=True)
class Lexicon:
    """An ordered collection of term categories.

    Iteration order is declaration order: categories first, then terms
    within each category.  Matching engines rely on this order to produce
    stable output.
    """

    name: str
    categories: tuple[TermCategory, ...] = ()

    @classmethod
    def from_terms(cls, name: str, terms: list[str] | tuple[str, ...]) -> Lexicon:
        """Single-category lexicon; terms are trimmed, casefolded and deduplicated."""
        normalized: list[str] = []
        for term in terms:
            term = term.strip().casefold()
            if term and term not in normalized:
                normalized.append(term)
        return cls(name=name, categories=(TermCategory(name=name, terms=tuple(normalized)),))

    def terms(self) -> tuple[str, ...]:
        """Return every term once, in declaration order."""
        seen: set[str] = set()
        ordered: list[str] = []
        for category in self.categories:
            for term in category.terms:
                if term not in seen:
                    seen.add(term)
                    ordered.append(term)
        return tuple(ordered)

    def as_set(self) -> frozenset[str]:
        return frozenset(self.terms())

    def category(self, name: str) -> TermCategory | None:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def categories_for(self, term: str) -> tuple[str, ...]:
        """Names of the categories that declare *term*."""
        return tuple(c.name for c in self.categories if term in c.terms)

    @property
    def category_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.categories)

    def __contains__(self, term: object) -> bool:
        return any(term in c.terms for c in self.categories)

    def __len__(self) -> int:
        return len(self.terms())


@dataclass(frozen=True)
class LexiconSnapshot:
    """Everything the engines read, captured as one immutable value.

    The store swaps whole snapshots; a snapshot is never mutated after
    construction.
    """

    banned: Lexicon
    positive: Lexicon
    negative: Lexicon
    version: str = "1.0.0"
    source: str = "builtin"
    loaded_at: str = field(default="", compare=False)

    def banned_terms(self) -> frozenset[str]:
        return self.banned.as_set()

    def positive_terms(self) -> frozenset[str]:
        return self.positive.as_set()

    def negative_terms(self) -> frozenset[str]:
        return self.negative.as_set()

    def summary(self) -> str:
        return (
            f"lexicon {self.version} ({self.source}): "
            f"{len(self.banned)} banned term(s) in {len(self.banned.categories)} "
            f"categor{'y' if len(self.banned.categories) == 1 else 'ies'}, "
            f"{len(self.positive)} positive, {len(self.negative)} negative"
        )
