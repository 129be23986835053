"""FastAPI application: outbound call initiation, provider webhook, admin API.

Endpoints:

  POST   /calls/outbound           Place an AI call to a customer (browser client)
  POST   /webhooks/vapi            Vapi call events (tool-calls, end-of-call-report)
  GET    /api/appointments         List appointments            (admin token)
  PATCH  /api/appointments/{id}    Change an appointment status (admin token)
  DELETE /api/appointments/{id}    Delete an appointment        (admin token)
  GET    /health                   Health check

The call flow:
  1. Browser posts the inquiry to /calls/outbound
  2. CallInitiator renders the script and asks Vapi to dial
  3. Minutes later Vapi posts events to /webhooks/vapi
  4. CallEventReceiver writes appointment rows for the admin dashboard
"""

from __future__ import annotations

# Load .env into os.environ before settings are read.
from dotenv import load_dotenv
load_dotenv()

import json
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)-20s %(levelname)-7s %(message)s",
)

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from outreach.auth import require_admin_token
from outreach.config import Settings, settings as default_settings
from outreach.errors import (
    InternalError,
    ValidationError,
    register_exception_handlers,
)
from outreach.initiator import CallInitiator
from outreach.models.appointment import AppointmentStatus
from outreach.models.call import CallRequest
from outreach.providers.base import VoiceCallProvider
from outreach.receiver import CallEventReceiver
from outreach.store.base import AppointmentStore

log = logging.getLogger("outreach.app")

_START_TIME = time.time()


class StatusUpdate(BaseModel):
    status: str


def _build_provider(cfg: Settings) -> Optional[VoiceCallProvider]:
    if not cfg.provider_configured:
        return None
    from outreach.providers.vapi import VapiProvider

    return VapiProvider(
        api_key=cfg.vapi_api_key,
        phone_number_id=cfg.vapi_phone_number_id,
        assistant_id=cfg.vapi_assistant_id,
        base_url=cfg.vapi_base_url,
        llm_provider=cfg.llm_provider,
        llm_model=cfg.llm_model,
        timeout=cfg.vapi_timeout_seconds,
    )


def _build_store(cfg: Settings) -> AppointmentStore:
    from outreach.store.sql import SqlAppointmentStore

    return SqlAppointmentStore(cfg.database_url)


async def _json_body(request: Request) -> dict:
    """Decode a JSON object body or raise InternalError."""
    raw = await request.body()
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise InternalError(f"Invalid JSON body: {e}") from e
    if not isinstance(body, dict):
        raise InternalError("JSON body must be an object")
    return body


def _parse_status(value: str) -> AppointmentStatus:
    try:
        return AppointmentStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AppointmentStatus)
        raise ValidationError(f"Unknown status {value!r}. Allowed: {allowed}")


def create_app(
    settings: Settings | None = None,
    provider: VoiceCallProvider | None = None,
    store: AppointmentStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``provider`` and ``store`` default to the Vapi adapter and the SQL
    store built from ``settings``; tests pass fakes instead.
    """
    cfg = settings or default_settings
    for warning in cfg.validate_startup():
        log.warning(warning)

    provider = provider if provider is not None else _build_provider(cfg)
    store = store if store is not None else _build_store(cfg)
    initiator = CallInitiator(provider, cfg)
    receiver = CallEventReceiver(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if provider is not None:
            await provider.aclose()

    app = FastAPI(
        title="Property Outreach Caller",
        description="Outbound AI voice calls and appointment capture",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.store = store
    app.state.initiator = initiator
    app.state.receiver = receiver

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )
    register_exception_handlers(app)

    # ── Health check ───────────────────────────────────────────

    @app.get("/health")
    async def health() -> JSONResponse:
        uptime = round(time.time() - _START_TIME, 1)
        return JSONResponse({"status": "ok", "uptime": uptime})

    # ── Call initiator ─────────────────────────────────────────

    @app.post("/calls/outbound")
    async def outbound_call(request: Request) -> JSONResponse:
        """Place one outbound AI call for a customer inquiry."""
        body = await _json_body(request)
        try:
            call_request = CallRequest.model_validate(body)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid call request: {e.errors()[0]['msg']}") from e

        outcome = await initiator.place_call(call_request)
        return JSONResponse({
            "success": True,
            "message": "Call initiated successfully",
            "callId": outcome.call_id,
            "language": outcome.language.value,
            "data": outcome.data,
        })

    # ── Call event receiver ────────────────────────────────────

    @app.post("/webhooks/vapi")
    async def vapi_webhook(request: Request) -> JSONResponse:
        """Acknowledge every parseable event; store failures stay in the logs."""
        payload = await _json_body(request)
        message = payload.get("message")
        log.info(
            "Webhook received: %s",
            message.get("type") if isinstance(message, dict) else None,
        )
        await run_in_threadpool(receiver.handle, payload)
        return JSONResponse({"success": True})

    # ── Admin appointment API ──────────────────────────────────

    @app.get("/api/appointments", dependencies=[Depends(require_admin_token)])
    def list_appointments(status: Optional[str] = None, limit: int = 500):
        wanted = _parse_status(status) if status else None
        rows = store.list_appointments(status=wanted, limit=max(1, min(limit, 1000)))
        return {
            "appointments": [r.model_dump(mode="json") for r in rows],
            "count": len(rows),
        }

    @app.patch(
        "/api/appointments/{appointment_id}",
        dependencies=[Depends(require_admin_token)],
    )
    def update_appointment(appointment_id: str, update: StatusUpdate):
        row = store.update_status(appointment_id, _parse_status(update.status))
        if row is None:
            return JSONResponse({"error": "Appointment not found"}, status_code=404)
        return row.model_dump(mode="json")

    @app.delete(
        "/api/appointments/{appointment_id}",
        dependencies=[Depends(require_admin_token)],
    )
    def delete_appointment(appointment_id: str):
        if not store.delete(appointment_id):
            return JSONResponse({"error": "Appointment not found"}, status_code=404)
        return {"deleted": True}

    return app


if __name__ == "__main__":
    import uvicorn

    log_config = uvicorn.config.LOGGING_CONFIG
    log_config["formatters"]["default"]["fmt"] = (
        "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"
    )

    uvicorn.run(
        "outreach.app:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_config=log_config,
    )
