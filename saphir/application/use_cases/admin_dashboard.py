from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Iterable

from saphir.application.exceptions import GatewayError
from saphir.application.ports.message_platform import MessagePlatformPort
from saphir.application.ports.reservation_gateway import ReservationGatewayPort
from saphir.application.utils.formatting import phone_for_chat
from saphir.application.utils.records import reservation_from_record, reservation_to_record
from saphir.domain.entities.change_event import ChangeEvent
from saphir.domain.entities.reservation import Client, Reservation, ReservationStatus

LOYAL_THRESHOLD = 3
VIP_THRESHOLD = 5

# Statuses whose totals count as earned revenue in the chart and accounting tab.
REVENUE_STATUSES = (ReservationStatus.CONFIRMED, ReservationStatus.COMPLETED)


@dataclass(frozen=True)
class DashboardStats:
    revenue: int
    confirmed_count: int
    today_count: int


@dataclass(frozen=True)
class Overview:
    stats: DashboardStats
    reservations: list[Reservation]


@dataclass(frozen=True)
class AccountingReport:
    revenue_by_status: dict[ReservationStatus, int]
    revenue_by_service: dict[str, int]
    earned_revenue: int
    average_basket: int


@dataclass(frozen=True)
class ChartPoint:
    day: date
    total: int
    x: float
    y: float


def compute_stats(reservations: Iterable[Reservation], today: date) -> DashboardStats:
    reservations = list(reservations)
    confirmed = [r for r in reservations if r.status is ReservationStatus.CONFIRMED]
    return DashboardStats(
        revenue=sum(r.total_price or 0 for r in confirmed),
        confirmed_count=len(confirmed),
        today_count=sum(1 for r in reservations if r.booking_date == today),
    )


def compute_accounting(reservations: Iterable[Reservation]) -> AccountingReport:
    by_status: dict[ReservationStatus, int] = {status: 0 for status in ReservationStatus}
    by_service: dict[str, int] = defaultdict(int)
    earned: list[int] = []
    for r in reservations:
        by_status[r.status] += r.total_price or 0
        if r.status in REVENUE_STATUSES:
            by_service[r.service_name] += r.total_price or 0
            earned.append(r.total_price or 0)
    earned_total = sum(earned)
    return AccountingReport(
        revenue_by_status=by_status,
        revenue_by_service=dict(sorted(by_service.items(), key=lambda item: item[1], reverse=True)),
        earned_revenue=earned_total,
        average_basket=earned_total // len(earned) if earned else 0,
    )


def revenue_by_day(reservations: Iterable[Reservation], start: date, days: int) -> list[tuple[date, int]]:
    """Earned totals per booking day over [start, start + days), zero-filled."""
    totals: dict[date, int] = defaultdict(int)
    for r in reservations:
        if r.booking_date is not None and r.status in REVENUE_STATUSES:
            totals[r.booking_date] += r.total_price or 0
    return [(start + timedelta(days=i), totals.get(start + timedelta(days=i), 0)) for i in range(days)]


def chart_points(series: list[tuple[date, int]], width: float = 600.0, height: float = 200.0) -> list[ChartPoint]:
    """Normalize a daily series into SVG coordinates (origin top-left, so y is inverted)."""
    if not series:
        return []
    peak = max(total for _, total in series)
    step = width / (len(series) - 1) if len(series) > 1 else 0.0
    points = []
    for index, (day, total) in enumerate(series):
        ratio = total / peak if peak else 0.0
        points.append(ChartPoint(day=day, total=total, x=round(index * step, 2), y=round(height - ratio * height, 2)))
    return points


def filter_reservations(reservations: Iterable[Reservation], term: str) -> list[Reservation]:
    needle = (term or "").lower()
    return [
        r for r in reservations
        if needle in (r.client_name or "").lower() or (term or "") in (r.client_phone or "")
    ]


def filter_clients(clients: Iterable[Client], term: str) -> list[Client]:
    needle = (term or "").lower()
    return [
        c for c in clients
        if needle in (c.full_name or "").lower() or (term or "") in (c.phone or "")
    ]


def loyalty_badge(total_reservations: int) -> str | None:
    if total_reservations >= VIP_THRESHOLD:
        return "vip"
    if total_reservations >= LOYAL_THRESHOLD:
        return "loyal"
    return None


class AdminDashboardUseCase:
    """Back-office view over reservations and clients, kept in sync by the change feed."""

    def __init__(self, gateway: ReservationGatewayPort, platform: MessagePlatformPort) -> None:
        self._gateway = gateway
        self._platform = platform
        self._reservations: list[Reservation] = []
        self._clients: list[Client] = []
        self._loaded = False
        # Guards the cached lists; gateway calls are made outside of it.
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def refresh(self) -> None:
        """Reload everything. A reservations failure propagates; a clients failure yields an empty list."""
        reservations = self._gateway.list_reservations()
        try:
            clients = self._gateway.list_clients()
        except GatewayError as e:
            self._logger.error("Failed to load clients", extra={"reason": str(e)})
            clients = []
        with self._lock:
            self._reservations = reservations
            self._clients = clients
            self._loaded = True
        self._logger.info("Reservations loaded", extra={"count": len(reservations)})

    def refresh_reservations(self) -> None:
        reservations = self._gateway.list_reservations()
        with self._lock:
            self._reservations = reservations
        self._logger.info("Reservations loaded", extra={"count": len(reservations)})

    def reservations(self, search: str = "") -> list[Reservation]:
        return filter_reservations(self._cached_reservations(), search)

    def overview(self, search: str, today: date) -> Overview:
        """Stats always cover every reservation; only the list is filtered."""
        reservations = self._cached_reservations()
        return Overview(
            stats=compute_stats(reservations, today),
            reservations=filter_reservations(reservations, search),
        )

    def clients(self, search: str = "") -> list[Client]:
        self._ensure_loaded()
        with self._lock:
            clients = list(self._clients)
        return filter_clients(clients, search)

    def accounting(self) -> AccountingReport:
        return compute_accounting(self._cached_reservations())

    def revenue_chart(self, start: date, days: int = 14, width: float = 600.0, height: float = 200.0) -> list[ChartPoint]:
        return chart_points(revenue_by_day(self._cached_reservations(), start, days), width, height)

    def update_status(self, reservation_id: str, status: ReservationStatus) -> None:
        self._gateway.update_status(reservation_id, status)
        self._logger.info(
            "Reservation status updated",
            extra={"reservation_id": reservation_id, "status": status.value},
        )
        self.refresh_reservations()

    def contact_link(self, phone: str) -> str | None:
        if not phone:
            return None
        return self._platform.build_chat_link(phone=phone_for_chat(phone))

    def apply_change(self, event: ChangeEvent) -> None:
        """Apply one realtime event on the reservations table to the cached list."""
        if event.table != "reservations":
            return
        self._logger.info("Change event received", extra={"event_type": event.event_type})
        if not self._loaded:
            # Nothing cached yet; the first read loads the current rows.
            return

        if event.event_type == "INSERT":
            # The joined client columns are only available through a full reload.
            self.refresh_reservations()
            return

        if event.event_type == "UPDATE" and event.record:
            changed_id = str(event.record.get("id"))
            with self._lock:
                matched = any(r.reservation_id == changed_id for r in self._reservations)
                if matched:
                    self._reservations = [
                        _merge(r, event.record) if r.reservation_id == changed_id else r
                        for r in self._reservations
                    ]
            if not matched:
                self.refresh_reservations()
            return

        if event.event_type == "DELETE" and event.old_record:
            removed_id = str(event.old_record.get("id"))
            with self._lock:
                self._reservations = [r for r in self._reservations if r.reservation_id != removed_id]

    def _cached_reservations(self) -> list[Reservation]:
        self._ensure_loaded()
        with self._lock:
            return list(self._reservations)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.refresh()



def _merge(current: Reservation, record: dict[str, Any]) -> Reservation:
    merged = reservation_from_record({**reservation_to_record(current), **record})
    return replace(merged, client_total_reservations=current.client_total_reservations)

