"""Banned-term moderation engine.

Text is casefolded and checked for every banned term as a plain substring.
There is no word-boundary test: a term embedded inside a longer word still
matches (``"scam"`` flags ``"scampi"``).  Matches are reported in lexicon
declaration order.
"""

from __future__ import annotations

import logging
from typing import Optional

from fluxmod.lexicon.models import Lexicon
from fluxmod.lexicon.store import LexiconStore, get_store
from fluxmod.moderation.models import ModerationVerdict

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Moderator
# ---------------------------------------------------------------------------


class ContentModerator:
    """Stateless moderator bound to a lexicon store.

    Each call reads the store's current snapshot once, so a concurrent
    lexicon reload never splits a single check across two lexicons.
    """

    def __init__(self, store: LexiconStore | None = None) -> None:
        self._store = store

    @property
    def store(self) -> LexiconStore:
        return self._store or get_store()

    # -- checks --------------------------------------------------------------

    @staticmethod
    def _find_matches(normalized: str, lexicon: Lexicon) -> tuple[list[str], list[str]]:
        terms: list[str] = []
        categories: list[str] = []
        for category in lexicon.categories:
            hit = False
            for term in category.terms:
                if term in normalized:
                    hit = True
                    if term not in terms:
                        terms.append(term)
            if hit:
                categories.append(category.name)
        return terms, categories

    # -- public API ----------------------------------------------------------

    def check(self, text: Optional[str], lexicon: Lexicon | None = None) -> ModerationVerdict:
        """Check *text* against the banned lexicon.  Never raises on string input."""
        normalized = (text or "").casefold()
        if not normalized:
            return ModerationVerdict.clean()

        banned = lexicon if lexicon is not None else self.store.snapshot().banned
        terms, categories = self._find_matches(normalized, banned)
        verdict = ModerationVerdict.from_matches(terms, categories)
        if verdict.flagged:
            logger.debug("Flagged text: terms=%s categories=%s", terms, categories)
        return verdict


_default_moderator = ContentModerator()


def moderate(text: Optional[str], lexicon: Lexicon | None = None) -> ModerationVerdict:
    """Moderate *text* with the active lexicon (or an explicit *lexicon*)."""
    return _default_moderator.check(text, lexicon)
