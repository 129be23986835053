"""Voice-call provider abstractions and implementations."""

from .base import CallPlacement, PlacedCall, Voice, VoiceCallProvider

__all__ = ["CallPlacement", "PlacedCall", "Voice", "VoiceCallProvider"]
