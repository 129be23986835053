"""HTTP tests for the FastAPI app with a fake provider and in-memory store."""

import pytest
from fastapi.testclient import TestClient

from outreach.app import create_app
from outreach.errors import ProviderError
from outreach.models.appointment import AppointmentStatus, NewAppointment

from conftest import FakeProvider, make_settings


@pytest.fixture
def client(settings, provider, store):
    return TestClient(create_app(settings=settings, provider=provider, store=store))


# ── Health ──────────────────────────────────────────────────────────


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ── POST /calls/outbound ───────────────────────────────────────────


class TestOutboundCall:
    def test_success(self, client, provider):
        resp = client.post("/calls/outbound", json={
            "inquiryId": "inq-1",
            "phoneNumber": "09876543210",
            "customerName": "Asha",
            "language": "english",
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["callId"] == "call_123"
        assert body["language"] == "english"
        assert body["data"]["id"] == "call_123"
        assert provider.placements[0].destination == "+919876543210"

    def test_language_defaults_to_hindi(self, client):
        resp = client.post("/calls/outbound", json={"phoneNumber": "9876543210"})
        assert resp.json()["language"] == "hindi"

    def test_unknown_language_reported_as_hindi(self, client):
        resp = client.post("/calls/outbound", json={
            "phoneNumber": "9876543210", "language": "klingon",
        })
        assert resp.json()["language"] == "hindi"

    def test_missing_phone(self, client, provider):
        resp = client.post("/calls/outbound", json={"customerName": "Asha"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Phone number is required"}
        assert provider.placements == []

    def test_missing_configuration(self, unconfigured_settings, store):
        client = TestClient(create_app(settings=unconfigured_settings, store=store))
        resp = client.post("/calls/outbound", json={"phoneNumber": "9876543210"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "VAPI configuration is incomplete"}

    def test_provider_failure(self, settings, store):
        provider = FakeProvider(error=ProviderError(
            "Failed to initiate call", provider_status=402, body='{"message":"no credits"}',
        ))
        client = TestClient(create_app(settings=settings, provider=provider, store=store))

        resp = client.post("/calls/outbound", json={"phoneNumber": "9876543210"})
        assert resp.status_code == 500
        assert resp.json() == {
            "error": "Failed to initiate call",
            "details": '{"message":"no credits"}',
            "status": 402,
        }

    def test_invalid_json(self, client):
        resp = client.post(
            "/calls/outbound", content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 500
        assert "error" in resp.json()

    def test_cors_preflight(self, client):
        resp = client.options("/calls/outbound", headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        })
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] in ("*", "https://example.com")


# ── POST /webhooks/vapi ────────────────────────────────────────────


def _tool_event(date="20/01/2026", time="10 AM"):
    return {
        "message": {
            "type": "tool-calls",
            "toolCalls": [{
                "id": "tc_1",
                "function": {
                    "name": "schedule_appointment",
                    "arguments": {"date": date, "time": time},
                },
            }],
            "call": {
                "id": "call_9",
                "customer": {"number": "+919876543210"},
                "assistantOverrides": {"metadata": {"customerName": "Asha"}},
            },
        }
    }


class TestWebhook:
    def test_tool_call_acknowledged_and_stored(self, client, store):
        resp = client.post("/webhooks/vapi", json=_tool_event())
        assert resp.status_code == 200
        assert resp.json() == {"success": True}

        rows = store.list_appointments()
        assert len(rows) == 1
        assert rows[0].status is AppointmentStatus.SCHEDULED
        assert rows[0].appointment_date == "20/01/2026"

    def test_ignored_event_acknowledged(self, client, store):
        resp = client.post("/webhooks/vapi", json={"message": {"type": "status-update"}})
        assert resp.json() == {"success": True}
        assert store.list_appointments() == []

    def test_unparseable_body(self, client):
        resp = client.post(
            "/webhooks/vapi", content=b"<xml/>",
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 500
        assert "error" in resp.json()

    def test_non_object_body(self, client):
        resp = client.post("/webhooks/vapi", json=["message"])
        assert resp.status_code == 500

    def test_store_failure_still_acknowledged(self, settings, provider):
        from test_receiver import FailingStore

        client = TestClient(create_app(settings=settings, provider=provider, store=FailingStore()))
        resp = client.post("/webhooks/vapi", json=_tool_event())
        assert resp.status_code == 200
        assert resp.json() == {"success": True}


# ── Admin appointment API ──────────────────────────────────────────


class TestAdminApi:
    @pytest.fixture
    def client(self, provider, store):
        cfg = make_settings(admin_api_key="secret", debug=False)
        return TestClient(create_app(settings=cfg, provider=provider, store=store))

    @pytest.fixture
    def auth(self):
        return {"Authorization": "Bearer secret"}

    def test_requires_token(self, client):
        assert client.get("/api/appointments").status_code == 401

    def test_list(self, client, store, auth):
        store.insert(NewAppointment(customer_name="Asha"))
        store.insert(NewAppointment(
            customer_name="Ravi", status=AppointmentStatus.PENDING_CONFIRMATION,
        ))

        body = client.get("/api/appointments", headers=auth).json()
        assert body["count"] == 2

        pending = client.get(
            "/api/appointments", params={"status": "pending_confirmation"}, headers=auth,
        ).json()
        assert pending["count"] == 1
        assert pending["appointments"][0]["customer_name"] == "Ravi"

    def test_list_unknown_status(self, client, auth):
        resp = client.get("/api/appointments", params={"status": "lost"}, headers=auth)
        assert resp.status_code == 400

    def test_update_status(self, client, store, auth):
        row = store.insert(NewAppointment(customer_name="Asha"))
        resp = client.patch(
            f"/api/appointments/{row.id}", json={"status": "confirmed"}, headers=auth,
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "confirmed"
        assert store.get(row.id).status is AppointmentStatus.CONFIRMED

    def test_update_rejects_unknown_status(self, client, store, auth):
        row = store.insert(NewAppointment(customer_name="Asha"))
        resp = client.patch(
            f"/api/appointments/{row.id}", json={"status": "teleported"}, headers=auth,
        )
        assert resp.status_code == 400
        assert store.get(row.id).status is AppointmentStatus.SCHEDULED

    def test_update_missing(self, client, auth):
        resp = client.patch(
            "/api/appointments/nope", json={"status": "cancelled"}, headers=auth,
        )
        assert resp.status_code == 404

    def test_delete(self, client, store, auth):
        row = store.insert(NewAppointment(customer_name="Asha"))
        assert client.delete(f"/api/appointments/{row.id}", headers=auth).json() == {
            "deleted": True
        }
        assert client.delete(f"/api/appointments/{row.id}", headers=auth).status_code == 404

    def test_correct_token_accepted_from_factory_settings(self, client, auth):
        resp = client.get("/api/appointments", headers=auth)
        assert resp.status_code == 200
        assert resp.json() == {"appointments": [], "count": 0}

    def test_wrong_token(self, client):
        resp = client.get("/api/appointments", headers={"Authorization": "Bearer nope"})
        assert resp.status_code == 401


class TestAdminAccessModes:
    def _client(self, provider, store, **overrides):
        cfg = make_settings(**overrides)
        return TestClient(create_app(settings=cfg, provider=provider, store=store))

    def test_open_without_key_in_debug(self, provider, store):
        client = self._client(provider, store, admin_api_key="", debug=True)
        assert client.get("/api/appointments").status_code == 200

    def test_locked_without_key_in_production(self, provider, store):
        client = self._client(provider, store, admin_api_key="", debug=False)
        resp = client.get("/api/appointments", headers={"Authorization": "Bearer x"})
        assert resp.status_code == 403

    def test_apps_do_not_share_keys(self, provider, store):
        first = self._client(provider, store, admin_api_key="one", debug=False)
        second = self._client(provider, store, admin_api_key="two", debug=False)
        assert first.get("/api/appointments", headers={"Authorization": "Bearer one"}).status_code == 200
        assert second.get("/api/appointments", headers={"Authorization": "Bearer one"}).status_code == 401
