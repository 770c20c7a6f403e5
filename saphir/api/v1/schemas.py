from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, Field

from saphir.domain.entities.gift_card import DEFAULT_GIFT_CARD_AMOUNT
from saphir.domain.entities.reservation import ReservationStatus
from saphir.domain.entities.service_catalog import OptionCategory


class CategorySchema(BaseModel):
    id: str
    name: str


class OptionSchema(BaseModel):
    id: str
    name: str
    price: int


class OptionGroupSchema(BaseModel):
    category: OptionCategory
    default_option_id: str
    options: list[OptionSchema]


class ServiceSchema(BaseModel):
    id: str
    name: str
    category: str
    description: str
    duration: str
    price: int
    image: str
    options: list[OptionGroupSchema]


class SelectionsSchema(BaseModel):
    oil: str
    music: str
    intensity: str


class QuoteResponseSchema(BaseModel):
    service_id: str
    base_price: int
    selections: SelectionsSchema
    option_names: dict[str, str]
    total: int


class AvailabilityResponseSchema(BaseModel):
    dates: list[dt.date]
    time_slots: list[str]


class OpenDraftRequestSchema(BaseModel):
    service_id: str


class DraftEventType(str, Enum):
    select_option = "select_option"
    select_date = "select_date"
    select_time = "select_time"
    set_contact = "set_contact"
    continue_ = "continue"
    back = "back"
    close = "close"


class DraftEventSchema(BaseModel):
    type: DraftEventType
    category: OptionCategory | None = None
    option_id: str | None = None
    booking_date: dt.date | None = None
    booking_time: str | None = None
    field: str | None = None
    value: str | None = None


class DraftResponseSchema(BaseModel):
    draft_id: str
    service_id: str
    service_name: str
    step: int
    selections: SelectionsSchema
    option_names: dict[str, str]
    booking_date: dt.date | None = None
    date_label: str
    booking_time: str | None = None
    name: str = ""
    phone: str = ""
    email: str = ""
    total: int
    can_continue: bool
    can_submit: bool
    submitting: bool = False
    available_dates: list[dt.date] = Field(default_factory=list)
    time_slots: list[str] = Field(default_factory=list)


class ConfirmationResponseSchema(BaseModel):
    service_name: str
    booking_date: dt.date
    booking_time: str
    client_name: str
    total: int
    total_label: str
    message: str
    chat_link: str


class ReservationSchema(BaseModel):
    id: str
    client_name: str
    client_phone: str
    client_email: str = ""
    booking_date: dt.date | None = None
    booking_time: str | None = None
    service_name: str
    total_price: int
    status: ReservationStatus
    status_label: str
    progress_step: int | None = None
    client_total_reservations: int = 0
    badge: str | None = None
    contact_link: str | None = None


class ClientSchema(BaseModel):
    id: str
    full_name: str
    phone: str
    email: str = ""
    total_reservations: int = 0
    badge: str | None = None
    contact_link: str | None = None


class StatsSchema(BaseModel):
    revenue: int
    revenue_label: str
    confirmed_count: int
    today_count: int


class OverviewResponseSchema(BaseModel):
    stats: StatsSchema
    reservations: list[ReservationSchema]


class AccountingResponseSchema(BaseModel):
    revenue_by_status: dict[str, int]
    revenue_by_service: dict[str, int]
    earned_revenue: int
    average_basket: int


class ChartPointSchema(BaseModel):
    day: dt.date
    total: int
    x: float
    y: float


class StatusUpdateRequestSchema(BaseModel):
    status: ReservationStatus


class TrackingResponseSchema(BaseModel):
    current: ReservationSchema | None = None
    progress_step: int | None = None
    history: list[ReservationSchema] = Field(default_factory=list)


class GiftCardRequestSchema(BaseModel):
    amount: int = DEFAULT_GIFT_CARD_AMOUNT
    recipient_name: str
    sender_name: str
    message: str = ""


class GiftCardResponseSchema(BaseModel):
    code: str
    amount: int
    amount_label: str
    recipient_name: str
    sender_name: str
    message: str = ""
