"""Pydantic models for appointment rows."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    PENDING_CONFIRMATION = "pending_confirmation"


class NewAppointment(BaseModel):
    """Insert shape produced by the call event receiver.

    Date and time stay free text: they are whatever the voice agent (or
    the fallback regex) produced, e.g. ``"Saturday 15th January"``.
    """

    inquiry_id: Optional[str] = None
    customer_name: str = "Unknown"
    customer_phone: str = ""
    appointment_date: Optional[str] = None
    appointment_time: Optional[str] = None
    property_location: Optional[str] = None
    notes: Optional[str] = None
    call_id: Optional[str] = None
    language: str = "hindi"
    status: AppointmentStatus = AppointmentStatus.SCHEDULED


class Appointment(NewAppointment):
    """A persisted appointment, as the admin dashboard reads it."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
