"""Build lexicon snapshots from YAML files or in-memory mappings.

The expected shape::

    version: "1.0.0"
    moderation:
      spam: [spam, scam]
      profanity: [...]
    sentiment:
      positive: [great, love]
      negative: [bad, hate]

Terms are trimmed and casefolded; blank terms are dropped and duplicates
inside a category collapse to their first occurrence.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import yaml

from fluxmod.lexicon.defaults import DEFAULT_LEXICON_DATA
from fluxmod.lexicon.models import Lexicon, LexiconConfigError, LexiconSnapshot, TermCategory

logger = logging.getLogger(__name__)


def load_lexicon(path: str | Path, *, allow_empty_banned: bool = False) -> LexiconSnapshot:
    """Load a lexicon snapshot from a YAML file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise LexiconConfigError(f"Cannot read lexicon file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LexiconConfigError(f"Invalid YAML in lexicon file {path}: {e}") from e

    return build_snapshot(data, source=str(path), allow_empty_banned=allow_empty_banned)


def default_snapshot() -> LexiconSnapshot:
    return build_snapshot(DEFAULT_LEXICON_DATA, source="builtin")


def build_snapshot(
    data: object,
    source: str = "builtin",
    *,
    allow_empty_banned: bool = False,
) -> LexiconSnapshot:
    """Validate a lexicon mapping and freeze it into a snapshot."""
    if not isinstance(data, dict):
        raise LexiconConfigError(f"{source}: lexicon must be a mapping, got {type(data).__name__}")

    moderation = data.get("moderation") or {}
    if not isinstance(moderation, dict):
        raise LexiconConfigError(f"{source}: 'moderation' must map category names to term lists")

    banned = Lexicon(
        name="banned",
        categories=tuple(
            _build_category(str(name), terms, source, "moderation")
            for name, terms in moderation.items()
        ),
    )

    sentiment = data.get("sentiment") or {}
    if not isinstance(sentiment, dict):
        raise LexiconConfigError(f"{source}: 'sentiment' must be a mapping with 'positive' and 'negative'")

    positive = Lexicon(
        name="positive",
        categories=(_build_category("positive", sentiment.get("positive") or [], source, "sentiment"),),
    )
    negative = Lexicon(
        name="negative",
        categories=(_build_category("negative", sentiment.get("negative") or [], source, "sentiment"),),
    )

    if not len(banned) and not allow_empty_banned:
        raise LexiconConfigError(
            f"{source}: banned lexicon is empty; refusing to run with moderation disabled"
        )

    overlap = sorted(positive.as_set() & negative.as_set())
    if overlap:
        raise LexiconConfigError(
            f"{source}: terms listed as both positive and negative: {', '.join(overlap)}"
        )

    for lexicon in (positive, negative):
        if not len(lexicon):
            logger.warning("%s: %s sentiment lexicon is empty", source, lexicon.name)

    snapshot = LexiconSnapshot(
        banned=banned,
        positive=positive,
        negative=negative,
        version=str(data.get("version", "1.0.0")),
        source=source,
        loaded_at=datetime.now(timezone.utc).isoformat(),
    )
    logger.info("Built %s", snapshot.summary())
    return snapshot


def dump_lexicon(snapshot: LexiconSnapshot) -> str:
    """Render a snapshot back into the YAML file shape."""
    data = {
        "version": snapshot.version,
        "moderation": {c.name: list(c.terms) for c in snapshot.banned.categories},
        "sentiment": {
            "positive": list(snapshot.positive.terms()),
            "negative": list(snapshot.negative.terms()),
        },
    }
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def _build_category(name: str, raw_terms: object, source: str, section: str) -> TermCategory:
    if not isinstance(raw_terms, list):
        raise LexiconConfigError(f"{source}: {section}.{name} must be a list of strings")

    terms: list[str] = []
    for raw in raw_terms:
        if not isinstance(raw, str):
            raise LexiconConfigError(
                f"{source}: {section}.{name} contains a non-string term: {raw!r}"
            )
        term = raw.strip().casefold()
        if not term:
            logger.debug("%s: dropping blank term in %s.%s", source, section, name)
            continue
        if term in terms:
            logger.debug("%s: dropping duplicate term %r in %s.%s", source, term, section, name)
            continue
        terms.append(term)

    return TermCategory(name=name, terms=tuple(terms))
