"""Abstract base class for outbound voice-call providers.

Defines the single operation the call initiator needs: place one call
with a rendered script, a tool schema and a metadata bag the provider
echoes back on every webhook for that call. Any hosted voice-agent
backend (Vapi, Retell, Bland, ...) implements this ABC.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from outreach.scripts.base import RenderedScript


@dataclass
class Voice:
    """Voice identity the agent speaks with."""

    provider: str
    voice_id: str


@dataclass
class CallPlacement:
    """Everything the provider needs to place one outbound call."""

    destination: str  # normalized, "+" prefixed
    customer_name: str
    script: RenderedScript
    voice: Voice
    tools: list[dict[str, Any]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class PlacedCall:
    """Provider's acknowledgement of a placed call."""

    call_id: Optional[str]
    raw: dict[str, Any] = field(default_factory=dict)


class VoiceCallProvider(ABC):
    """Abstract outbound-call backend.

    Implementations are single-shot: a failed request raises
    :class:`outreach.errors.ProviderError` and is never retried here.
    """

    @abstractmethod
    async def place_call(self, placement: CallPlacement) -> PlacedCall:
        """Ask the provider to dial ``placement.destination``.

        Args:
            placement: Destination, script, tools and metadata for the call.

        Returns:
            PlacedCall carrying the provider's call identifier and the
            decoded response body.

        Raises:
            ProviderError: The provider answered non-2xx or was unreachable.
        """

    async def aclose(self) -> None:
        """Release any transport resources. Safe to call multiple times."""
