"""Data models for the outreach service."""

from .appointment import Appointment, AppointmentStatus, NewAppointment
from .call import CallRequest, Language
from .webhook import ToolCall, WebhookMessage, WebhookPayload

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "CallRequest",
    "Language",
    "NewAppointment",
    "ToolCall",
    "WebhookMessage",
    "WebhookPayload",
]
