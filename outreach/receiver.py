"""Call Event Receiver: turns provider webhook events into appointment rows.

Two event types produce rows:

  tool-calls          one ``scheduled`` row per ``schedule_appointment``
                      invocation, arguments stored as given
  end-of-call-report  at most one ``pending_confirmation`` row, only if the
                      summary or transcript mentions an appointment; date
                      and time are regex-extracted from the summary

Every other type is ignored. Store failures are logged and swallowed: the
event was received and understood, so the provider must not be asked to
redeliver it. There is no deduplication; a redelivered event inserts again.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from outreach.errors import PersistenceError
from outreach.extraction import extract_date, extract_time, mentions_appointment
from outreach.models.appointment import Appointment, AppointmentStatus, NewAppointment
from outreach.models.call import Language
from outreach.models.webhook import (
    END_OF_CALL_REPORT,
    TOOL_CALLS,
    ToolCall,
    WebhookMessage,
    WebhookPayload,
)
from outreach.phone import redact_pii
from outreach.store.base import AppointmentStore
from outreach.tools import SCHEDULE_APPOINTMENT

log = logging.getLogger("outreach.receiver")

DEFAULT_LANGUAGE = Language.HINDI.value


def _text(*candidates: Any) -> str | None:
    """First non-empty candidate as a string, or None."""
    for value in candidates:
        if value is not None and value != "":
            return str(value)
    return None


class CallEventReceiver:
    """Stateless event-to-row translator. One instance serves every call."""

    def __init__(self, store: AppointmentStore) -> None:
        self._store = store

    def handle(self, payload: dict[str, Any]) -> list[Appointment]:
        """Process one webhook body. Returns the rows actually inserted."""
        try:
            parsed = WebhookPayload.model_validate(payload)
        except PydanticValidationError as e:
            log.warning("Ignoring malformed webhook payload: %s", e)
            return []

        message = parsed.message
        if message is None:
            log.debug("Webhook without message, ignoring")
            return []

        if message.type == TOOL_CALLS:
            return self._handle_tool_calls(message)
        if message.type == END_OF_CALL_REPORT:
            return self._handle_end_of_call_report(message)

        log.debug("Ignoring webhook event type %r", message.type)
        return []

    # ── tool-calls ─────────────────────────────────────────────────

    def _handle_tool_calls(self, message: WebhookMessage) -> list[Appointment]:
        call = message.call
        metadata = call.call_metadata
        saved: list[Appointment] = []

        for index, raw in enumerate(message.tool_calls):
            try:
                tool_call = ToolCall.model_validate(raw)
            except PydanticValidationError as e:
                log.warning(
                    "Skipping malformed tool call %d on call %s: %s", index, call.id, e
                )
                continue
            if tool_call.function.name != SCHEDULE_APPOINTMENT:
                continue
            args = tool_call.function.arguments

            appointment = NewAppointment(
                inquiry_id=_text(metadata.get("inquiryId")),
                customer_name=_text(
                    metadata.get("customerName"), args.get("customerName"), "Unknown"
                ),
                customer_phone=call.customer.number,
                appointment_date=_text(args.get("date")),
                appointment_time=_text(args.get("time")),
                property_location=_text(args.get("location"), metadata.get("preferredArea")),
                notes=_text(args.get("notes")),
                call_id=call.id,
                language=_text(metadata.get("language"), DEFAULT_LANGUAGE),
                status=AppointmentStatus.SCHEDULED,
            )
            row = self._save(appointment, source="tool call")
            if row is not None:
                saved.append(row)

        return saved

    # ── end-of-call-report ─────────────────────────────────────────

    def _handle_end_of_call_report(self, message: WebhookMessage) -> list[Appointment]:
        summary = message.summary
        if not mentions_appointment(summary, message.transcript):
            log.info("Call %s ended without an appointment mention", message.call.id)
            return []

        call = message.call
        metadata = call.call_metadata

        appointment = NewAppointment(
            inquiry_id=_text(metadata.get("inquiryId")),
            customer_name=_text(metadata.get("customerName"), "Unknown"),
            customer_phone=call.customer.number,
            appointment_date=extract_date(summary),
            appointment_time=extract_time(summary),
            property_location=_text(metadata.get("preferredArea")),
            notes=f"Call Summary: {summary}",
            call_id=call.id,
            language=_text(metadata.get("language"), DEFAULT_LANGUAGE),
            status=AppointmentStatus.PENDING_CONFIRMATION,
        )
        row = self._save(appointment, source="call report")
        return [row] if row is not None else []

    # ── persistence ────────────────────────────────────────────────

    def _save(self, appointment: NewAppointment, source: str) -> Appointment | None:
        try:
            row = self._store.insert(appointment)
        except PersistenceError as e:
            log.error(
                "Error saving appointment from %s (call=%s, phone=%s): %s",
                source, appointment.call_id, redact_pii(appointment.customer_phone), e,
            )
            return None
        log.info(
            "Appointment %s saved from %s (status=%s)",
            row.id, source, row.status.value,
        )
        return row
