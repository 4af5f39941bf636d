"""Process configuration read from the environment."""

from __future__ import annotations

import os
from pathlib import Path

# Optional YAML lexicon; the built-in defaults are used when unset.
LEXICON_PATH = os.environ.get("FLUXMOD_LEXICON_PATH", "")

AUDIT_DIR = Path(
    os.environ.get("FLUXMOD_AUDIT_DIR", str(Path.home() / ".fluxmod" / "audit_logs"))
)

# Admin endpoints are disabled while this is empty.
ADMIN_TOKEN = os.environ.get("FLUXMOD_ADMIN_TOKEN", "")

MAX_CONTENT_CHARS = int(os.environ.get("FLUXMOD_MAX_CONTENT_CHARS", "2000"))

LOG_LEVEL = os.environ.get("FLUXMOD_LOG_LEVEL", "WARNING").upper()
