"""Pydantic models for the voice provider's webhook payloads.

Only the fields the receiver reads are declared; everything else the
provider sends is kept (``extra="allow"``) and ignored. Every field is
optional, and explicit nulls fall back to the field default.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TOOL_CALLS = "tool-calls"
END_OF_CALL_REPORT = "end-of-call-report"


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Customer(_Lenient):
    number: str = ""
    name: Optional[str] = None


class AssistantOverrides(_Lenient):
    metadata: dict[str, Any] = Field(default_factory=dict)


class CallInfo(_Lenient):
    id: Optional[str] = None
    customer: Customer = Field(default_factory=Customer)
    assistant_overrides: AssistantOverrides = Field(
        default_factory=AssistantOverrides, alias="assistantOverrides"
    )
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def call_metadata(self) -> dict[str, Any]:
        """Metadata attached when the call was placed.

        The outbound request puts it under ``assistantOverrides``; calls
        created from a saved assistant carry it at the top level instead.
        """
        return self.assistant_overrides.metadata or self.metadata


class ToolFunction(_Lenient):
    name: str = ""
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _decode_arguments(cls, value):
        # Some provider versions send the arguments as a JSON string.
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return {}
        return value if isinstance(value, dict) else {}


class ToolCall(_Lenient):
    id: Optional[str] = None
    function: ToolFunction = Field(default_factory=ToolFunction)


class WebhookMessage(_Lenient):
    type: str = ""
    # Raw entries; the receiver validates each one as a ToolCall.
    tool_calls: list[Any] = Field(default_factory=list, alias="toolCalls")
    summary: str = ""
    transcript: str = ""
    call: CallInfo = Field(default_factory=CallInfo)

    @field_validator("tool_calls", mode="before")
    @classmethod
    def _tool_calls_list(cls, value):
        return value if isinstance(value, list) else []


class WebhookPayload(_Lenient):
    message: Optional[WebhookMessage] = None
