"""Auth middleware -- FastAPI dependency guarding the admin endpoints.

Admin requests carry ``X-Admin-Token: <token>``; the value is compared in
constant time against ``FLUXMOD_ADMIN_TOKEN``.  With no token configured
every admin request is refused.
"""

from __future__ import annotations

import hmac
from typing import Optional

from fastapi import Header, HTTPException, status

from fluxmod import config


async def require_admin(
    x_admin_token: Optional[str] = Header(None, alias="X-Admin-Token"),
) -> None:
    """FastAPI dependency that rejects non-admin callers with ``403``."""
    expected = config.ADMIN_TOKEN
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access is not configured.",
        )
    if not x_admin_token or not hmac.compare_digest(x_admin_token, expected):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required.",
        )
