"""Lexicon store — the static term lists every engine matches against.

- Models: immutable categories, lexicons and whole-lexicon snapshots
- Loader: YAML / mapping validation and normalization
- Store: the process-wide snapshot holder with atomic replacement
"""

from fluxmod.lexicon.loader import build_snapshot, default_snapshot, dump_lexicon, load_lexicon
from fluxmod.lexicon.models import Lexicon, LexiconConfigError, LexiconSnapshot, TermCategory
from fluxmod.lexicon.store import LexiconStore, get_store

__all__ = [
    "Lexicon",
    "LexiconConfigError",
    "LexiconSnapshot",
    "LexiconStore",
    "TermCategory",
    "build_snapshot",
    "default_snapshot",
    "dump_lexicon",
    "get_store",
    "load_lexicon",
]
