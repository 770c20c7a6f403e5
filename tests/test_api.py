"""
End-to-end tests of the HTTP surface with in-memory adapters.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from saphir.application.exceptions import GatewayError
from saphir.application.use_cases.admin_dashboard import AdminDashboardUseCase
from saphir.application.use_cases.availability import AvailabilityProvider
from saphir.application.use_cases.booking import BookingUseCase
from saphir.application.use_cases.client_space import ClientSpaceUseCase
from saphir.application.use_cases.submit_reservation import SubmitReservationUseCase
from saphir.core.config import settings
from saphir.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from saphir.infrastructure.clock import FixedClock
from saphir.infrastructure.store.memory_draft_store import MemoryDraftStore
from saphir.infrastructure.store.memory_gateway import MemoryReservationGateway
from saphir.infrastructure.whatsapp.whatsapp_platform import WhatsAppPlatform
from saphir.main import app
from saphir.wiring.dependencies import (
    get_admin_dashboard,
    get_availability,
    get_booking_use_case,
    get_client_space_use_case,
    get_clock,
    get_draft_store,
    get_service_catalog,
    get_submit_use_case,
)

NOW = datetime(2026, 10, 19, 10, 0)


class FailingGateway(MemoryReservationGateway):
    def create_reservation_with_client(self, payload) -> None:
        raise GatewayError("timeout")


def _install(gateway: MemoryReservationGateway) -> None:
    catalog = ServiceCatalogStore()
    drafts = MemoryDraftStore()
    clock = FixedClock(NOW)
    availability = AvailabilityProvider(clock)
    platform = WhatsAppPlatform(business_number="2250143250653")
    dashboard = AdminDashboardUseCase(gateway=gateway, platform=platform)

    app.dependency_overrides = {
        get_service_catalog: lambda: catalog,
        get_clock: lambda: clock,
        get_draft_store: lambda: drafts,
        get_availability: lambda: availability,
        get_booking_use_case: lambda: BookingUseCase(catalog=catalog, drafts=drafts, availability=availability),
        get_submit_use_case: lambda: SubmitReservationUseCase(
            catalog=catalog, drafts=drafts, gateway=gateway, platform=platform
        ),
        get_admin_dashboard: lambda: dashboard,
        get_client_space_use_case: lambda: ClientSpaceUseCase(gateway=gateway),
    }


@pytest.fixture
def client():
    _install(MemoryReservationGateway())
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    _install(FailingGateway())
    yield TestClient(app)
    app.dependency_overrides.clear()


def _event(client, draft_id, **body):
    return client.post(f"/api/v1/drafts/{draft_id}/events", json=body)


def _ready_draft(client) -> str:
    draft_id = client.post("/api/v1/drafts", json={"service_id": "massage-relaxant"}).json()["draft_id"]
    for body in (
        {"type": "select_option", "category": "oil", "option_id": "rose"},
        {"type": "continue"},
        {"type": "select_date", "booking_date": "2026-10-20"},
        {"type": "select_time", "booking_time": "10:00"},
        {"type": "continue"},
        {"type": "set_contact", "field": "name", "value": "Aya Kouassi"},
        {"type": "set_contact", "field": "phone", "value": "+225 01 43 25 06 53"},
    ):
        assert _event(client, draft_id, **body).status_code == 200
    return draft_id


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_catalog_endpoints(client):
    categories = client.get("/api/v1/categories").json()
    assert categories[0] == {"id": "all", "name": "Tous"}

    services = client.get("/api/v1/services", params={"category": "hammam"}).json()
    assert [s["id"] for s in services] == ["hammam-royal"]

    service = client.get("/api/v1/services/massage-relaxant").json()
    assert service["price"] == 35000
    assert [g["category"] for g in service["options"]] == ["oil", "music", "intensity"]

    assert client.get("/api/v1/services/unknown").status_code == 404


def test_quote(client):
    resp = client.post(
        "/api/v1/services/massage-relaxant/quote",
        json={"oil": "rose", "music": "zen", "intensity": "douce"},
    )
    assert resp.status_code == 200
    assert resp.json()["total"] == 40000
    assert resp.json()["option_names"]["oil"] == "Rose de Damas"

    assert client.post("/api/v1/services/massage-relaxant/quote").json()["total"] == 35000

    bad = client.post(
        "/api/v1/services/massage-relaxant/quote",
        json={"oil": "oud", "music": "zen", "intensity": "douce"},
    )
    assert bad.status_code == 400


def test_availability(client):
    body = client.get("/api/v1/availability").json()

    assert len(body["dates"]) == 14
    assert body["dates"][0] == "2026-10-20"
    assert "12:00" not in body["time_slots"]


def test_wizard_blocks_continue_without_schedule(client):
    draft_id = client.post("/api/v1/drafts", json={"service_id": "massage-relaxant"}).json()["draft_id"]
    draft = _event(client, draft_id, type="continue").json()
    assert draft["step"] == 2
    assert draft["can_continue"] is False

    resp = _event(client, draft_id, type="continue")
    assert resp.status_code == 200
    assert resp.json()["step"] == 2
    assert client.get(f"/api/v1/drafts/{draft_id}").json()["step"] == 2

    assert _event(client, draft_id, type="select_time", booking_time="12:00").status_code == 400
    assert _event(client, draft_id, type="select_date").status_code == 400


def test_unknown_draft_and_service(client):
    assert client.get("/api/v1/drafts/missing").status_code == 404
    assert client.post("/api/v1/drafts", json={"service_id": "nope"}).status_code == 404
    assert client.post("/api/v1/drafts/missing/submit").status_code == 404


def test_close_deletes_draft(client):
    draft_id = client.post("/api/v1/drafts", json={"service_id": "facial-eclat"}).json()["draft_id"]

    assert client.delete(f"/api/v1/drafts/{draft_id}").status_code == 204
    assert client.get(f"/api/v1/drafts/{draft_id}").status_code == 404


def test_submit_and_follow_in_back_office(client):
    draft_id = _ready_draft(client)

    draft = client.get(f"/api/v1/drafts/{draft_id}").json()
    assert draft["total"] == 40000
    assert draft["can_submit"] is True
    assert draft["date_label"] == "20 oct. 2026"

    resp = client.post(f"/api/v1/drafts/{draft_id}/submit")
    assert resp.status_code == 200
    confirmation = resp.json()
    assert confirmation["total_label"] == "40 000 FCFA"
    assert confirmation["chat_link"].startswith("https://wa.me/2250143250653?text=")

    reset = client.get(f"/api/v1/drafts/{draft_id}").json()
    assert reset["step"] == 1
    assert reset["name"] == ""

    overview = client.get("/api/v1/admin/overview").json()
    assert overview["stats"]["revenue"] == 0
    reservation = overview["reservations"][0]
    assert reservation["client_phone"] == "0143250653"
    assert reservation["status_label"] == "En attente"

    patched = client.patch(
        f"/api/v1/admin/reservations/{reservation['id']}/status",
        json={"status": "confirme"},
    )
    assert patched.status_code == 200
    assert patched.json()["status_label"] == "Confirmé"

    stats = client.get("/api/v1/admin/overview").json()["stats"]
    assert stats["revenue"] == 40000
    assert stats["revenue_label"] == "40 000 FCFA"
    assert stats["confirmed_count"] == 1

    accounting = client.get("/api/v1/admin/accounting").json()
    assert accounting["revenue_by_status"]["confirme"] == 40000
    assert accounting["average_basket"] == 40000

    clients = client.get("/api/v1/admin/clients", params={"search": "aya"}).json()
    assert clients[0]["total_reservations"] == 1

    space = client.get("/api/v1/space", params={"phone": "+225 01 43 25 06 53"}).json()
    assert space["current"]["id"] == reservation["id"]
    assert space["progress_step"] == 1


def test_submit_with_missing_contact(client):
    draft_id = client.post("/api/v1/drafts", json={"service_id": "massage-relaxant"}).json()["draft_id"]

    resp = client.post(f"/api/v1/drafts/{draft_id}/submit")

    assert resp.status_code == 400
    assert resp.json()["detail"]["fields"] == ["date", "name", "phone"]


def test_submit_failure_keeps_draft(failing_client):
    draft_id = _ready_draft(failing_client)

    resp = failing_client.post(f"/api/v1/drafts/{draft_id}/submit")

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Une erreur est survenue"
    draft = failing_client.get(f"/api/v1/drafts/{draft_id}").json()
    assert draft["step"] == 3
    assert draft["name"] == "Aya Kouassi"
    assert draft["submitting"] is False


def test_revenue_chart(client):
    points = client.get("/api/v1/admin/revenue-chart", params={"days": 7}).json()

    assert len(points) == 7
    assert points[-1]["day"] == "2026-10-19"
    assert all(p["y"] == 200.0 for p in points)


def test_gift_card(client):
    resp = client.post("/api/v1/gift-cards", json={"recipient_name": "Aya", "sender_name": "Marc"})
    assert resp.status_code == 201
    assert resp.json()["amount_label"] == "50 000 FCFA"

    assert client.post("/api/v1/gift-cards", json={"amount": 1000, "recipient_name": "Aya", "sender_name": "Marc"}).status_code == 400
    assert client.post("/api/v1/gift-cards", json={"recipient_name": "", "sender_name": "Marc"}).status_code == 400


def test_reservations_webhook(client, monkeypatch):
    draft_id = _ready_draft(client)
    client.post(f"/api/v1/drafts/{draft_id}/submit")
    reservation_id = client.get("/api/v1/admin/overview").json()["reservations"][0]["id"]

    monkeypatch.setattr(settings, "WEBHOOK_SECRET", "s3cret")
    body = json.dumps({
        "type": "UPDATE",
        "table": "reservations",
        "record": {"id": reservation_id, "status": "soin_en_cours"},
    }).encode("utf-8")
    signature = "sha256=" + hmac.new(b"s3cret", body, hashlib.sha256).hexdigest()

    assert client.post("/webhooks/reservations", content=body).status_code == 403
    resp = client.post("/webhooks/reservations", content=body, headers={"X-Webhook-Signature": signature})
    assert resp.status_code == 200

    reservation = client.get("/api/v1/admin/overview").json()["reservations"][0]
    assert reservation["status"] == "soin_en_cours"

    bad = b"not json"
    bad_signature = "sha256=" + hmac.new(b"s3cret", bad, hashlib.sha256).hexdigest()
    assert client.post("/webhooks/reservations", content=bad, headers={"X-Webhook-Signature": bad_signature}).status_code == 400


def test_draft_edits_conflict_while_submitting(client):
    draft_id = _ready_draft(client)
    app.dependency_overrides[get_draft_store]().claim_submission(draft_id)

    assert _event(client, draft_id, type="set_contact", field="email", value="aya@example.com").status_code == 409
    assert client.delete(f"/api/v1/drafts/{draft_id}").status_code == 409
    assert client.post(f"/api/v1/drafts/{draft_id}/submit").status_code == 409

    draft = client.get(f"/api/v1/drafts/{draft_id}").json()
    assert draft["email"] == ""
    assert draft["submitting"] is True


def test_reservation_by_id(client):
    client.post(f"/api/v1/drafts/{_ready_draft(client)}/submit")
    reservation_id = client.get("/api/v1/admin/overview").json()["reservations"][0]["id"]
    client.patch(f"/api/v1/admin/reservations/{reservation_id}/status", json={"status": "confirme"})

    resp = client.get(f"/api/v1/reservations/{reservation_id}")
    assert resp.status_code == 200
    reservation = resp.json()
    assert reservation["id"] == reservation_id
    assert reservation["status_label"] == "Confirmé"
    assert reservation["progress_step"] == 1
    assert reservation["client_total_reservations"] == 1

    assert client.get("/api/v1/reservations/unknown").status_code == 404


def test_webhook_insert_reloads_back_office(client, monkeypatch):
    assert client.get("/api/v1/admin/overview").json()["reservations"] == []

    client.post(f"/api/v1/drafts/{_ready_draft(client)}/submit")
    assert client.get("/api/v1/admin/overview").json()["reservations"] == []

    monkeypatch.setattr(settings, "WEBHOOK_SECRET", "s3cret")
    body = json.dumps({"type": "INSERT", "table": "reservations", "record": {"id": "res_1"}}).encode("utf-8")
    signature = "sha256=" + hmac.new(b"s3cret", body, hashlib.sha256).hexdigest()

    resp = client.post("/webhooks/reservations", content=body, headers={"X-Webhook-Signature": signature})
    assert resp.status_code == 200

    reservations = client.get("/api/v1/admin/overview").json()["reservations"]
    assert [r["id"] for r in reservations] == ["res_1"]
