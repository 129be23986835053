"""SQLAlchemy-backed appointment store (table ``call_appointments``)."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from outreach.errors import PersistenceError
from outreach.models.appointment import Appointment, AppointmentStatus, NewAppointment

from .base import AppointmentStore

log = logging.getLogger("outreach.store")

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AppointmentRow(Base):
    __tablename__ = "call_appointments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    inquiry_id = Column(String, nullable=True, index=True)
    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False, default="")
    appointment_date = Column(String, nullable=True)  # free text
    appointment_time = Column(String, nullable=True)  # free text
    property_location = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    call_id = Column(String, nullable=True, index=True)
    language = Column(String, nullable=False, default="hindi")
    status = Column(String, nullable=False, default=AppointmentStatus.SCHEDULED.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


def _engine_for(database_url: str):
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty DB
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


class SqlAppointmentStore(AppointmentStore):
    """AppointmentStore on any SQLAlchemy-supported database.

    Tables are created on construction.
    """

    def __init__(self, database_url: str) -> None:
        self._engine = _engine_for(database_url)
        self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
        Base.metadata.create_all(bind=self._engine)

    @staticmethod
    def _to_model(row: AppointmentRow) -> Appointment:
        return Appointment.model_validate(row)

    def insert(self, appointment: NewAppointment) -> Appointment:
        values = appointment.model_dump()
        values["status"] = appointment.status.value
        try:
            with self._sessions() as db:
                row = AppointmentRow(**values)
                db.add(row)
                db.commit()
                db.refresh(row)
                return self._to_model(row)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to insert appointment: {e}") from e

    def list_appointments(
        self,
        status: Optional[AppointmentStatus] = None,
        limit: int = 500,
    ) -> list[Appointment]:
        try:
            with self._sessions() as db:
                query = db.query(AppointmentRow)
                if status is not None:
                    query = query.filter(AppointmentRow.status == status.value)
                rows = (
                    query.order_by(AppointmentRow.created_at.desc())
                    .limit(limit)
                    .all()
                )
                return [self._to_model(r) for r in rows]
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to list appointments: {e}") from e

    def get(self, appointment_id: str) -> Optional[Appointment]:
        try:
            with self._sessions() as db:
                row = db.get(AppointmentRow, appointment_id)
                return self._to_model(row) if row else None
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to load appointment: {e}") from e

    def update_status(
        self, appointment_id: str, status: AppointmentStatus
    ) -> Optional[Appointment]:
        try:
            with self._sessions() as db:
                row = db.get(AppointmentRow, appointment_id)
                if row is None:
                    return None
                row.status = status.value
                db.commit()
                db.refresh(row)
                log.info("Appointment %s marked as %s", appointment_id, status.value)
                return self._to_model(row)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to update appointment: {e}") from e

    def delete(self, appointment_id: str) -> bool:
        try:
            with self._sessions() as db:
                row = db.get(AppointmentRow, appointment_id)
                if row is None:
                    return False
                db.delete(row)
                db.commit()
                log.info("Appointment %s deleted", appointment_id)
                return True
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to delete appointment: {e}") from e

    def dispose(self) -> None:
        self._engine.dispose()
