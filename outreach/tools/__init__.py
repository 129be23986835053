"""Tools the voice agent can call mid-conversation."""

from .schedule import TOOL_NAME as SCHEDULE_APPOINTMENT, ScheduleAppointmentTool

__all__ = ["SCHEDULE_APPOINTMENT", "ScheduleAppointmentTool"]
