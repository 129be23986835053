"""Abstract appointment store.

The call event receiver only ever inserts; the admin API lists, re-statuses
and deletes. Implementations wrap backend failures in
:class:`outreach.errors.PersistenceError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from outreach.models.appointment import Appointment, AppointmentStatus, NewAppointment


class AppointmentStore(ABC):
    """Persistent home of appointment rows."""

    @abstractmethod
    def insert(self, appointment: NewAppointment) -> Appointment:
        """Insert one row and return it with its id and creation time.

        No deduplication: inserting the same data twice yields two rows.
        """

    @abstractmethod
    def list_appointments(
        self,
        status: Optional[AppointmentStatus] = None,
        limit: int = 500,
    ) -> list[Appointment]:
        """Return rows newest first, optionally filtered by status."""

    @abstractmethod
    def get(self, appointment_id: str) -> Optional[Appointment]:
        """Return one row, or None if it does not exist."""

    @abstractmethod
    def update_status(
        self, appointment_id: str, status: AppointmentStatus
    ) -> Optional[Appointment]:
        """Set a row's status. Returns the updated row, or None if missing."""

    @abstractmethod
    def delete(self, appointment_id: str) -> bool:
        """Delete a row. Returns True if a row was removed."""
