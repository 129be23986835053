"""Bearer-token guard for the admin appointment API.

The key and debug flag come from the Settings the app was built with
(``app.state.settings``), so ``create_app(settings=...)`` fully decides
who may use the admin routes:

  key set,   token matches     allow
  key set,   token wrong/none  401
  key empty, debug             allow
  key empty, not debug         403

The outbound-call and webhook endpoints are not guarded.
"""

from __future__ import annotations

import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from outreach.config import Settings

log = logging.getLogger("outreach.auth")

_bearer_scheme = HTTPBearer(auto_error=False)


def check_admin_token(
    cfg: Settings, credentials: Optional[HTTPAuthorizationCredentials]
) -> None:
    """Raise HTTPException unless ``credentials`` may use the admin API."""
    if not cfg.admin_api_key:
        if cfg.debug:
            return
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin API key not configured. Set ADMIN_API_KEY in .env.",
        )

    token = credentials.credentials if credentials is not None else ""
    if not secrets.compare_digest(token.encode(), cfg.admin_api_key.encode()):
        log.warning("Rejected admin request with invalid or missing token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing admin token.",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_admin_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> None:
    """FastAPI dependency wrapping :func:`check_admin_token` with the app's settings."""
    check_admin_token(request.app.state.settings, credentials)
