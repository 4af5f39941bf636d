"""Shared FastAPI dependencies (process-wide singletons)."""

from __future__ import annotations

from typing import Optional

from fluxmod.audit.log import ModerationAuditLog
from fluxmod.lexicon.store import LexiconStore, get_store

_audit_log: Optional[ModerationAuditLog] = None


def get_audit_log() -> ModerationAuditLog:
    """Return the singleton ModerationAuditLog instance."""
    global _audit_log
    if _audit_log is None:
        _audit_log = ModerationAuditLog()
    return _audit_log


def get_lexicon_store() -> LexiconStore:
    return get_store()
