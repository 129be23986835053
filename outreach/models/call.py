"""Pydantic models for outbound call requests."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    """Conversation languages the voice agent can speak.

    ``HINDI`` is the primary language; anything unrecognized resolves to it.
    """

    HINDI = "hindi"
    ENGLISH = "english"
    MARATHI = "marathi"

    @classmethod
    def resolve(cls, tag: str | None) -> "Language":
        """Map a free-form language tag to a member, defaulting to Hindi."""
        if not tag:
            return cls.HINDI
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return cls.HINDI


class CallRequest(BaseModel):
    """Body of ``POST /calls/outbound``.

    Field names follow the browser client's camelCase JSON. Blank strings
    are treated as absent so the script renderer can substitute its
    placeholders.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    preferred_area: Optional[str] = Field(default=None, alias="preferredArea")
    budget: Optional[str] = Field(default=None, alias="budget")
    inquiry_id: Optional[str] = Field(default=None, alias="inquiryId")
    language: str = Field(default=Language.HINDI.value, alias="language")

    @field_validator(
        "phone_number", "customer_name", "preferred_area", "budget", "inquiry_id",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("language", mode="before")
    @classmethod
    def _default_language(cls, value):
        return value or Language.HINDI.value

    @property
    def resolved_language(self) -> Language:
        return Language.resolve(self.language)
