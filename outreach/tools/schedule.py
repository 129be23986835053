"""Appointment tool registered with the voice agent on every outbound call.

The agent calls ``schedule_appointment`` once the customer agrees to a
site visit. The provider then delivers the call to our webhook as a
``tool-calls`` event, where the receiver turns it into an appointment row.

Parameters accepted from the agent:

* ``date``         -- Appointment date, free text (required).
* ``time``         -- Appointment time, free text (required).
* ``location``     -- Property location for the visit.
* ``customerName`` -- Customer's name as heard on the call.
* ``notes``        -- Anything else worth passing on.
"""

from __future__ import annotations

from typing import Any

TOOL_NAME = "schedule_appointment"


class ScheduleAppointmentTool:
    """Function-tool definition in the OpenAI/Vapi ``{"type": "function"}`` shape."""

    @property
    def name(self) -> str:
        return TOOL_NAME

    @property
    def description(self) -> str:
        return "Schedule a property site visit appointment with the customer"

    @property
    def parameters_schema(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "customerName": {
                    "type": "string",
                    "description": "Customer's name",
                },
                "date": {
                    "type": "string",
                    "description": (
                        "Appointment date (e.g., 'Saturday 15th January', '20/01/2026')"
                    ),
                },
                "time": {
                    "type": "string",
                    "description": "Appointment time (e.g., '10 AM', '2:30 PM')",
                },
                "location": {
                    "type": "string",
                    "description": "Property location for the visit",
                },
                "notes": {
                    "type": "string",
                    "description": "Any additional notes from the conversation",
                },
            },
            "required": ["date", "time"],
        }

    def to_function_tool(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters_schema,
            },
        }
