"""Shared fixtures: settings, an in-memory store, and a fake voice provider."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from outreach.config import Settings
from outreach.errors import ProviderError
from outreach.providers.base import CallPlacement, PlacedCall, VoiceCallProvider
from outreach.store.sql import SqlAppointmentStore


class FakeProvider(VoiceCallProvider):
    """Records placements; optionally fails like a provider would."""

    def __init__(self, call_id="call_123", error: ProviderError | None = None):
        self.placements: list[CallPlacement] = []
        self.closed = False
        self._call_id = call_id
        self._error = error

    async def place_call(self, placement: CallPlacement) -> PlacedCall:
        self.placements.append(placement)
        if self._error is not None:
            raise self._error
        return PlacedCall(call_id=self._call_id, raw={"id": self._call_id, "status": "queued"})

    async def aclose(self) -> None:
        self.closed = True


def make_settings(**overrides) -> Settings:
    values = {
        "vapi_api_key": "test-key",
        "vapi_phone_number_id": "pn_1",
        "vapi_assistant_id": "asst_1",
        "database_url": "sqlite://",
        "admin_api_key": "",
        "debug": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def unconfigured_settings():
    return make_settings(vapi_api_key="", vapi_phone_number_id="", vapi_assistant_id="")


@pytest.fixture
def store():
    s = SqlAppointmentStore("sqlite://")
    yield s
    s.dispose()


@pytest.fixture
def provider():
    return FakeProvider()
