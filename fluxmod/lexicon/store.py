"""Process-wide holder for the active lexicon snapshot."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from fluxmod import config
from fluxmod.lexicon.loader import default_snapshot, load_lexicon
from fluxmod.lexicon.models import LexiconSnapshot

logger = logging.getLogger(__name__)


class LexiconStore:
    """Holds one immutable :class:`LexiconSnapshot` at a time.

    Readers take the current snapshot with a single attribute read.  Writers
    build a complete new snapshot first and then swap the reference, so a
    concurrent reader sees either the old lexicon or the new one, never a
    mix.  If loading fails the previous snapshot stays active.
    """

    def __init__(self, snapshot: LexiconSnapshot | None = None) -> None:
        self._snapshot = snapshot or default_snapshot()
        self._write_lock = threading.Lock()

    def snapshot(self) -> LexiconSnapshot:
        return self._snapshot

    def banned_terms(self) -> frozenset[str]:
        return self._snapshot.banned_terms()

    def positive_terms(self) -> frozenset[str]:
        return self._snapshot.positive_terms()

    def negative_terms(self) -> frozenset[str]:
        return self._snapshot.negative_terms()

    def replace(self, snapshot: LexiconSnapshot) -> LexiconSnapshot:
        """Swap in *snapshot* and return the one it replaced."""
        with self._write_lock:
            previous = self._snapshot
            self._snapshot = snapshot
        logger.info("Lexicon swapped: %s -> %s", previous.source, snapshot.summary())
        return previous

    def reload(self, path: str | Path) -> LexiconSnapshot:
        """Load *path* and make it the active snapshot.

        Raises ``LexiconConfigError`` without touching the active snapshot
        when the file is invalid.
        """
        snapshot = load_lexicon(path)
        self.replace(snapshot)
        return snapshot


_store: LexiconStore | None = None
_store_lock = threading.Lock()


def get_store() -> LexiconStore:
    """Return the process-wide store, building it on first use."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                if config.LEXICON_PATH:
                    _store = LexiconStore(load_lexicon(config.LEXICON_PATH))
                else:
                    _store = LexiconStore()
    return _store
