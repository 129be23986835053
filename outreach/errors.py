"""Error taxonomy and the FastAPI handlers that render it.

  ValidationError     400  required input missing (phone number)
  ConfigurationError  500  provider credentials absent
  ProviderError       500  voice provider refused or could not be reached
  PersistenceError    500  appointment store write/read failed
  InternalError       500  webhook body could not be parsed
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

log = logging.getLogger("outreach.errors")


class OutreachError(Exception):
    """Base class for every error this service reports over HTTP."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(OutreachError):
    status_code = 400


class ConfigurationError(OutreachError):
    status_code = 500


class ProviderError(OutreachError):
    """Non-2xx (or no) response from the voice-call provider.

    The provider's status code and raw body are kept verbatim for
    diagnostics. ``provider_status`` is None when the request never got a
    response (connection refused, timeout).
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        provider_status: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.provider_status = provider_status
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "details": self.body,
            "status": self.provider_status,
        }


class PersistenceError(OutreachError):
    status_code = 500


class InternalError(OutreachError):
    status_code = 500


async def outreach_exception_handler(request: Request, exc: OutreachError) -> JSONResponse:
    """4xx: logged as a warning, 5xx: logged as an error. Body is exc.to_dict()."""
    if exc.status_code >= 500:
        log.error(
            "%s on %s %s: %s",
            type(exc).__name__, request.method, request.url.path, exc.message,
        )
    else:
        log.warning(
            "%s on %s %s: %s",
            type(exc).__name__, request.method, request.url.path, exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OutreachError, outreach_exception_handler)
