"""Moderation audit log.

Every evaluated submission a caller chooses to record is stored as one JSON
line in a daily file under ``~/.fluxmod/audit_logs/`` (or
``FLUXMOD_AUDIT_DIR``).  The admin surface filters, counts and exports these
entries; it never re-runs classification.
"""

from __future__ import annotations

import csv
import io
import json
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fluxmod import config
from fluxmod.pipeline import PipelineResult
from fluxmod.sentiment.models import SentimentLabel

_SNIPPET_CHARS = 100


@dataclass
class AuditEntry:
    """One recorded classification."""

    id: str
    timestamp: str
    actor: str
    resource_id: str
    content_snippet: str
    flagged: bool
    reason: Optional[str] = None
    matched_terms: list[str] = field(default_factory=list)
    sentiment: str = SentimentLabel.NEUTRAL.value


@dataclass
class ModerationStats:
    """Counts shown on the admin dashboard."""

    total: int = 0
    flagged: int = 0
    positive: int = 0
    neutral: int = 0
    negative: int = 0


class ModerationAuditLog:
    """File-based JSON-lines audit log of moderation results."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir else config.AUDIT_DIR
        self._base_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _current_log_file(self) -> Path:
        return self._base_dir / f"{datetime.now(timezone.utc).strftime('%Y-%m-%d')}.jsonl"

    def _read_all_entries(self) -> list[AuditEntry]:
        entries: list[AuditEntry] = []
        for path in sorted(self._base_dir.glob("*.jsonl")):
            for line in path.read_text(encoding="utf-8").splitlines():
                if line.strip():
                    entries.append(AuditEntry(**json.loads(line)))
        return entries

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def record(
        self,
        result: PipelineResult,
        content: str,
        actor: str = "anonymous",
        resource_id: str = "",
    ) -> AuditEntry:
        """Append *result* for *content* and return the stored entry."""
        snippet = content[:_SNIPPET_CHARS] + ("..." if len(content) > _SNIPPET_CHARS else "")
        entry = AuditEntry(
            id=uuid.uuid4().hex[:16],
            timestamp=datetime.now(timezone.utc).isoformat(),
            actor=actor,
            resource_id=resource_id,
            content_snippet=snippet,
            flagged=result.moderation.flagged,
            reason=result.moderation.reason,
            matched_terms=list(result.moderation.matched_terms),
            sentiment=result.sentiment.label.value,
        )
        with self._current_log_file().open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(entry)) + "\n")
        return entry

    def get_entries(
        self,
        *,
        flagged: Optional[bool] = None,
        sentiment: Optional[SentimentLabel] = None,
        search: str = "",
        limit: int = 200,
    ) -> list[AuditEntry]:
        """Return matching entries, newest first."""
        entries = self._read_all_entries()

        if flagged is not None:
            entries = [e for e in entries if e.flagged == flagged]
        if sentiment is not None:
            entries = [e for e in entries if e.sentiment == sentiment.value]
        if search:
            needle = search.lower()
            entries = [
                e
                for e in entries
                if needle in e.actor.lower() or needle in e.content_snippet.lower()
            ]

        entries.sort(key=lambda e: e.timestamp, reverse=True)
        return entries[:limit]

    def stats(self) -> ModerationStats:
        stats = ModerationStats()
        for entry in self._read_all_entries():
            stats.total += 1
            if entry.flagged:
                stats.flagged += 1
            label = SentimentLabel.parse(entry.sentiment)
            if label is SentimentLabel.POSITIVE:
                stats.positive += 1
            elif label is SentimentLabel.NEGATIVE:
                stats.negative += 1
            elif label is SentimentLabel.NEUTRAL:
                stats.neutral += 1
        return stats

    def export(self, fmt: str = "json", **filters) -> str:
        """Export filtered entries as ``json`` or ``csv``."""
        entries = self.get_entries(limit=filters.pop("limit", 10000), **filters)
        return self.format_entries(entries, fmt)

    @staticmethod
    def format_entries(entries: list[AuditEntry], fmt: str = "json") -> str:
        """Render already-filtered *entries* as ``json`` or ``csv``."""
        if fmt == "csv":
            buf = io.StringIO()
            writer = csv.writer(buf, lineterminator="\n")
            writer.writerow(
                ["id", "timestamp", "actor", "resource_id", "flagged", "reason", "matched_terms", "sentiment"]
            )
            for e in entries:
                writer.writerow(
                    [
                        e.id,
                        e.timestamp,
                        e.actor,
                        e.resource_id,
                        e.flagged,
                        e.reason or "",
                        ";".join(e.matched_terms),
                        e.sentiment,
                    ]
                )
            return buf.getvalue()

        return json.dumps([asdict(e) for e in entries], indent=2)
