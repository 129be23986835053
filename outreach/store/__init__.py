"""Appointment persistence."""

from .base import AppointmentStore
from .sql import SqlAppointmentStore

__all__ = ["AppointmentStore", "SqlAppointmentStore"]
