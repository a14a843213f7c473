"""Tests for parking_api: ticket lifecycle over HTTP."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from parking.api.parking_api import create_app
from parking.core import EngineType, FlatRatePricing, Parking


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def parking():
    return Parking(
        FlatRatePricing(),
        {EngineType.GAS: ["A"], EngineType.ELECTRIC: ["B"], EngineType.HI_ELECTRIC: []},
        clock=lambda: datetime(2024, 6, 1, 10, 0, tzinfo=UTC),
    )


@pytest.fixture()
def client(parking):
    with TestClient(create_app(parking)) as c:
        yield c


def enter(client, engine: str) -> dict:
    resp = client.post("/parking/ticket", params={"engine": engine})
    assert resp.status_code == 200
    return resp.json()


# ---------------------------------------------------------------------------
# Entry and listing
# ---------------------------------------------------------------------------

class TestEntry:
    def test_health(self, client):
        assert client.get("/health").json() == {"ok": True}

    def test_parking_starts_empty(self, client):
        resp = client.get("/parking/ticket")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_enter_returns_ticket(self, client):
        ticket = enter(client, "GAS")
        assert ticket["engine_type"] == "GAS"
        assert ticket["slot"] == {"name": "A", "engine_type": "GAS"}
        assert ticket["issued_at"] == "2024-06-01T10:00:00+00:00"
        uuid.UUID(ticket["id"])

    def test_full_parking_is_unavailable(self, client):
        enter(client, "GAS")
        enter(client, "GAS")  # falls back to the ELECTRIC slot
        resp = client.post("/parking/ticket", params={"engine": "GAS"})
        assert resp.status_code == 503

    def test_restricted_type_without_slots_is_unavailable(self, client):
        resp = client.post("/parking/ticket", params={"engine": "HI_ELECTRIC"})
        assert resp.status_code == 503

    def test_unknown_engine_is_rejected(self, client):
        resp = client.post("/parking/ticket", params={"engine": "DIESEL"})
        assert resp.status_code == 422

    def test_list_and_get(self, client):
        ticket = enter(client, "ELECTRIC")
        assert client.get("/parking/ticket").json() == [ticket]
        assert client.get(f"/parking/ticket/{ticket['id']}").json() == ticket

    def test_get_unknown_ticket(self, client):
        resp = client.get(f"/parking/ticket/{uuid.uuid4()}")
        assert resp.status_code == 404

    def test_free_slots(self, client):
        enter(client, "GAS")
        assert client.get("/parking/slots").json() == {
            "GAS": [],
            "ELECTRIC": ["B"],
            "HI_ELECTRIC": [],
        }


# ---------------------------------------------------------------------------
# Payment and exit
# ---------------------------------------------------------------------------

class TestExit:
    def test_owed(self, client):
        ticket = enter(client, "GAS")
        assert client.get(f"/parking/ticket/{ticket['id']}/owed").json() == 20.0

    def test_owed_unknown_is_zero(self, client):
        assert client.get(f"/parking/ticket/{uuid.uuid4()}/owed").json() == 0.0

    def test_insufficient_payment(self, client):
        ticket = enter(client, "GAS")
        resp = client.delete(f"/parking/ticket/{ticket['id']}", params={"payment": 19})
        assert resp.status_code == 400
        assert "Insufficient payment" in resp.json()["detail"]
        assert client.get(f"/parking/ticket/{ticket['id']}").status_code == 200

    def test_nan_payment_is_rejected(self, client):
        ticket = enter(client, "GAS")
        resp = client.delete(f"/parking/ticket/{ticket['id']}", params={"payment": "nan"})
        assert resp.status_code == 400
        assert "Insufficient payment" in resp.json()["detail"]
        assert client.get(f"/parking/ticket/{ticket['id']}").json() == ticket
        assert client.get("/parking/slots").json()["GAS"] == []

    def test_leave(self, client):
        ticket = enter(client, "ELECTRIC")
        resp = client.delete(f"/parking/ticket/{ticket['id']}", params={"payment": 10})
        assert resp.status_code == 200
        assert resp.json() == {"left_at": "2024-06-01T10:00:00+00:00"}
        assert client.get("/parking/ticket").json() == []

    def test_leave_twice(self, client):
        ticket = enter(client, "ELECTRIC")
        client.delete(f"/parking/ticket/{ticket['id']}", params={"payment": 10})
        resp = client.delete(f"/parking/ticket/{ticket['id']}", params={"payment": 10})
        assert resp.status_code == 400
        assert resp.json()["detail"] == f"Unknown ticket {ticket['id']}"

    def test_leave_requires_payment(self, client):
        ticket = enter(client, "GAS")
        resp = client.delete(f"/parking/ticket/{ticket['id']}")
        assert resp.status_code == 422
