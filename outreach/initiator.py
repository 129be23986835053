"""Call Initiator: turns a CallRequest into one outbound AI voice call.

Flow:
  1. Refuse early if provider credentials are missing (ConfigurationError)
  2. Require a phone number (ValidationError) and normalize it
  3. Pick the conversation script for the requested language
  4. Render the opening line and agent instructions for this customer
  5. Hand destination, script, tool schema and metadata to the provider

Nothing is written locally; the provider owns the call from here on and
reports back through the webhook (see ``outreach.receiver``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from outreach.config import Settings
from outreach.errors import ConfigurationError, ValidationError
from outreach.models.call import CallRequest, Language
from outreach.phone import normalize_phone, redact_pii
from outreach.providers.base import CallPlacement, Voice, VoiceCallProvider
from outreach.scripts import get_script
from outreach.tools import ScheduleAppointmentTool

log = logging.getLogger("outreach.initiator")

NOT_SPECIFIED = "Not specified"


@dataclass
class CallOutcome:
    """Result of a successfully placed call."""

    call_id: Optional[str]
    language: Language
    destination: str
    data: dict[str, Any] = field(default_factory=dict)


class CallInitiator:
    """Places outbound calls through a VoiceCallProvider.

    The provider may be None when credentials are not configured; every
    ``place_call`` then fails with ConfigurationError instead of the app
    refusing to start.
    """

    def __init__(
        self,
        provider: Optional[VoiceCallProvider],
        settings: Settings,
    ) -> None:
        self._provider = provider
        self._settings = settings
        self._tool = ScheduleAppointmentTool()

    def build_placement(self, request: CallRequest) -> CallPlacement:
        """Validate and render everything for one call without dialing."""
        if not request.phone_number:
            raise ValidationError("Phone number is required")

        destination = normalize_phone(
            request.phone_number, self._settings.default_country_code
        )
        language = request.resolved_language
        script = get_script(language)
        customer_name = script.display_name(request.customer_name)

        rendered = script.render(
            request.customer_name, request.preferred_area, request.budget
        )

        return CallPlacement(
            destination=destination,
            customer_name=customer_name,
            script=rendered,
            voice=Voice(
                provider=self._settings.voice_provider,
                voice_id=self._settings.voice_id,
            ),
            tools=[self._tool.to_function_tool()],
            metadata={
                "inquiryId": request.inquiry_id,
                "customerName": customer_name,
                "preferredArea": request.preferred_area or NOT_SPECIFIED,
                "budget": request.budget or NOT_SPECIFIED,
                "language": language.value,
            },
        )

    async def place_call(self, request: CallRequest) -> CallOutcome:
        """Place one call. Single-shot: provider failures are not retried.

        Raises:
            ConfigurationError: provider credentials are missing.
            ValidationError: the request has no phone number.
            ProviderError: the provider rejected the call.
        """
        if self._provider is None or not self._settings.provider_configured:
            log.error("Missing Vapi configuration")
            raise ConfigurationError("VAPI configuration is incomplete")

        placement = self.build_placement(request)
        language = Language(placement.metadata["language"])
        log.info(
            "Initiating outbound call to %s in %s",
            redact_pii(placement.destination),
            language.value,
        )

        placed = await self._provider.place_call(placement)
        return CallOutcome(
            call_id=placed.call_id,
            language=language,
            destination=placement.destination,
            data=placed.raw,
        )
