from functools import lru_cache
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from saphir.core.config import settings
from saphir.application.ports.clock import ClockPort
from saphir.application.ports.draft_store import DraftStorePort
from saphir.application.ports.message_platform import MessagePlatformPort
from saphir.application.ports.reservation_gateway import ReservationGatewayPort
from saphir.application.ports.service_catalog import ServiceCatalogPort
from saphir.application.use_cases.admin_dashboard import AdminDashboardUseCase
from saphir.application.use_cases.availability import AvailabilityProvider
from saphir.application.use_cases.booking import BookingUseCase
from saphir.application.use_cases.client_space import ClientSpaceUseCase
from saphir.application.use_cases.gift_card import GenerateGiftCardUseCase
from saphir.application.use_cases.submit_reservation import SubmitReservationUseCase
from saphir.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from saphir.infrastructure.clock import SystemClock
from saphir.infrastructure.store.memory_draft_store import MemoryDraftStore
from saphir.infrastructure.store.memory_gateway import MemoryReservationGateway
from saphir.infrastructure.supabase.supabase_client import SupabaseClient
from saphir.infrastructure.supabase.supabase_gateway import SupabaseReservationGateway
from saphir.infrastructure.whatsapp.whatsapp_platform import WhatsAppPlatform


logger = logging.getLogger(__name__)


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_clock() -> ClockPort:
    try:
        tz = ZoneInfo(settings.BUSINESS_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown BUSINESS_TIMEZONE, falling back to UTC", extra={"reason": settings.BUSINESS_TIMEZONE})
        tz = ZoneInfo("UTC")
    return SystemClock(tz)


@lru_cache
def get_draft_store() -> DraftStorePort:
    return MemoryDraftStore()


@lru_cache
def get_reservation_gateway() -> ReservationGatewayPort:
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MemoryReservationGateway (Supabase not configured, ENV=dev/local)")
            return MemoryReservationGateway()
        raise ValueError("SUPABASE_URL and SUPABASE_KEY are required outside dev/local.")

    logger.info("Using SupabaseReservationGateway")
    client = SupabaseClient(
        base_url=settings.SUPABASE_URL,
        api_key=settings.SUPABASE_KEY,
        timeout=settings.SUPABASE_TIMEOUT_SECONDS,
    )
    return SupabaseReservationGateway(client=client, create_function=settings.SUPABASE_RPC_CREATE)


@lru_cache
def get_message_platform() -> MessagePlatformPort:
    return WhatsAppPlatform(business_number=settings.WHATSAPP_NUMBER, base_url=settings.WHATSAPP_BASE_URL)


def get_availability() -> AvailabilityProvider:
    return AvailabilityProvider(clock=get_clock(), days=settings.BOOKING_WINDOW_DAYS)


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        catalog=get_service_catalog(),
        drafts=get_draft_store(),
        availability=get_availability(),
    )


def get_submit_use_case() -> SubmitReservationUseCase:
    return SubmitReservationUseCase(
        catalog=get_service_catalog(),
        drafts=get_draft_store(),
        gateway=get_reservation_gateway(),
        platform=get_message_platform(),
        currency=settings.CURRENCY_LABEL,
    )


@lru_cache
def get_admin_dashboard() -> AdminDashboardUseCase:
    return AdminDashboardUseCase(gateway=get_reservation_gateway(), platform=get_message_platform())


def get_client_space_use_case() -> ClientSpaceUseCase:
    return ClientSpaceUseCase(gateway=get_reservation_gateway())


def get_gift_card_use_case() -> GenerateGiftCardUseCase:
    return GenerateGiftCardUseCase()
