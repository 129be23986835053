"""Vapi provider implementation.

Places outbound calls with ``POST /call/phone``. The saved assistant is
overridden per call with the rendered first message, the system prompt,
the ``schedule_appointment`` tool, the voice, and the metadata bag that
Vapi echoes back under ``call.assistantOverrides.metadata`` on every
webhook.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from outreach.errors import ProviderError
from outreach.phone import redact_pii

from .base import CallPlacement, PlacedCall, VoiceCallProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.vapi.ai"


class VapiProvider(VoiceCallProvider):
    """VoiceCallProvider backed by the Vapi REST API."""

    def __init__(
        self,
        api_key: str,
        phone_number_id: str,
        assistant_id: str,
        base_url: str = DEFAULT_BASE_URL,
        llm_provider: str = "openai",
        llm_model: str = "gpt-4o",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._phone_number_id = phone_number_id
        self._assistant_id = assistant_id
        self._llm_provider = llm_provider
        self._llm_model = llm_model
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def build_payload(self, placement: CallPlacement) -> dict[str, Any]:
        """Translate a CallPlacement into Vapi's ``/call/phone`` body."""
        return {
            "phoneNumberId": self._phone_number_id,
            "customer": {
                "number": placement.destination,
                "name": placement.customer_name,
            },
            "assistantId": self._assistant_id,
            "assistantOverrides": {
                "firstMessage": placement.script.opening,
                "model": {
                    "provider": self._llm_provider,
                    "model": self._llm_model,
                    "messages": [
                        {"role": "system", "content": placement.script.instructions},
                    ],
                    "tools": placement.tools,
                },
                "voice": {
                    "provider": placement.voice.provider,
                    "voiceId": placement.voice.voice_id,
                },
                "metadata": placement.metadata,
            },
        }

    @staticmethod
    def _decode(text: str) -> dict[str, Any]:
        try:
            data = json.loads(text)
        except ValueError:
            return {"raw": text}
        return data if isinstance(data, dict) else {"raw": data}

    # ------------------------------------------------------------------
    # VoiceCallProvider interface
    # ------------------------------------------------------------------

    async def place_call(self, placement: CallPlacement) -> PlacedCall:
        payload = self.build_payload(placement)
        logger.info(
            "Placing Vapi call to %s (language=%s)",
            redact_pii(placement.destination),
            placement.metadata.get("language"),
        )

        try:
            resp = await self._client.post("/call/phone", json=payload)
        except httpx.HTTPError as e:
            logger.error("Vapi request failed: %s", e)
            raise ProviderError(f"Voice provider unreachable: {e}") from e

        if not resp.is_success:
            logger.error("Vapi API error: %s %s", resp.status_code, resp.text)
            raise ProviderError(
                "Failed to initiate call",
                provider_status=resp.status_code,
                body=resp.text,
            )

        data = self._decode(resp.text)
        call_id = data.get("id")
        logger.info("Vapi call created: %s", call_id)
        return PlacedCall(call_id=call_id, raw=data)

    async def aclose(self) -> None:
        await self._client.aclose()
