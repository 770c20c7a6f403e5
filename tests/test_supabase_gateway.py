"""
Tests for the PostgREST gateway against a mocked httpx transport.
"""

from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from saphir.application.dto.reservation_payload import ReservationPayload
from saphir.application.exceptions import GatewayError
from saphir.domain.entities.reservation import ReservationStatus
from saphir.infrastructure.supabase.supabase_client import SupabaseClient
from saphir.infrastructure.supabase.supabase_gateway import SupabaseReservationGateway


def _gateway(handler) -> SupabaseReservationGateway:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    client = SupabaseClient(base_url="https://project.supabase.co/", api_key="anon-key", client=http)
    return SupabaseReservationGateway(client=client)


def test_create_calls_rpc_with_prefixed_params():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json="res-uuid")

    payload = ReservationPayload(
        full_name="Aya Kouassi",
        phone="0143250653",
        booking_date="2026-10-20",
        booking_time="10:00",
        service_name="Massage Relaxant Or Rose",
        total_price=40000,
    )
    _gateway(handler).create_reservation_with_client(payload)

    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/rest/v1/rpc/create_reservation_with_client"
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["authorization"] == "Bearer anon-key"
    body = json.loads(request.content)
    assert body["p_full_name"] == "Aya Kouassi"
    assert body["p_total_price"] == 40000
    assert body["p_email"] == ""


def test_list_reservations_with_joined_client():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/rest/v1/reservations"
        assert request.url.params["select"] == "*, clients!fk_reservation_client_unique(*)"
        assert request.url.params["order"] == "booking_date.asc"
        return httpx.Response(200, json=[
            {
                "id": "a1",
                "client_name": "Aya Kouassi",
                "client_phone": "0143250653",
                "booking_date": "2026-10-20",
                "booking_time": "10:00",
                "service_name": "Massage Relaxant Or Rose",
                "total_price": 40000,
                "status": "confirme",
                "clients": {"total_reservations": 6},
            },
            {
                "id": "a2",
                "client_name": "Marc Yao",
                "client_phone": "0700000000",
                "booking_date": None,
                "service_name": "Rituel Hammam Royal",
                "total_price": None,
                "status": "archived",
                "clients": [],
            },
        ])

    first, second = _gateway(handler).list_reservations()

    assert first.booking_date == date(2026, 10, 20)
    assert first.status is ReservationStatus.CONFIRMED
    assert first.client_total_reservations == 6
    assert second.booking_date is None
    assert second.total_price == 0
    assert second.status is ReservationStatus.PENDING
    assert second.client_total_reservations == 0


def test_list_clients_ordered_by_loyalty():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/rest/v1/clients"
        assert request.url.params["order"] == "total_reservations.desc"
        return httpx.Response(200, json=[{"id": 7, "full_name": "Aya", "phone": "0143250653", "total_reservations": 5}])

    clients = _gateway(handler).list_clients()

    assert clients[0].client_id == "7"
    assert clients[0].total_reservations == 5


def test_update_status_patches_by_id():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    _gateway(handler).update_status("a1", ReservationStatus.IN_CARE)

    request = seen[0]
    assert request.method == "PATCH"
    assert request.url.params["id"] == "eq.a1"
    assert json.loads(request.content) == {"status": "soin_en_cours"}


def test_rejected_call_raises_gateway_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"code": "P0001", "message": "invalid phone"})

    with pytest.raises(GatewayError):
        _gateway(handler).list_clients()


def test_network_error_raises_gateway_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GatewayError):
        _gateway(handler).list_reservations()


def test_client_requires_credentials():
    with pytest.raises(ValueError):
        SupabaseClient(base_url="", api_key="key")


def test_error_body_that_is_not_an_object_raises_gateway_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json=[{"message": "boom"}])

    payload = ReservationPayload(
        full_name="Aya Kouassi",
        phone="0143250653",
        booking_date="2026-10-20",
        booking_time="10:00",
        service_name="Massage Relaxant Or Rose",
        total_price=40000,
    )
    with pytest.raises(GatewayError) as exc_info:
        _gateway(handler).create_reservation_with_client(payload)

    assert "400" in str(exc_info.value)


def test_get_reservation_filters_by_id():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.params["id"] == "eq.a1":
            return httpx.Response(200, json=[{
                "id": "a1",
                "client_name": "Aya Kouassi",
                "client_phone": "0143250653",
                "booking_date": "2026-10-20",
                "booking_time": "10:00",
                "service_name": "Massage Relaxant Or Rose",
                "total_price": 40000,
                "status": "preparation",
                "clients": {"total_reservations": 3},
            }])
        return httpx.Response(200, json=[])

    gateway = _gateway(handler)
    found = gateway.get_reservation("a1")

    assert seen[0].url.path == "/rest/v1/reservations"
    assert seen[0].url.params["select"] == "*, clients!fk_reservation_client_unique(*)"
    assert found.reservation_id == "a1"
    assert found.status is ReservationStatus.PREPARATION
    assert found.client_total_reservations == 3
    assert gateway.get_reservation("missing") is None
