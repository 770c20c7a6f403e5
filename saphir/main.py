import logging

from fastapi import FastAPI

from saphir.api.v1.admin import router as admin_router
from saphir.api.v1.bookings import router as bookings_router
from saphir.api.v1.catalog import router as catalog_router
from saphir.api.v1.gift_cards import router as gift_cards_router
from saphir.api.webhooks import router as webhooks_router
from saphir.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("draft_id", "service", "reservation_id", "status", "event_type", "count", "amount", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.BUSINESS_NAME} Booking", version="1.0.0")

app.include_router(catalog_router, prefix="/api/v1", tags=["catalog"])
app.include_router(bookings_router, prefix="/api/v1", tags=["bookings"])
app.include_router(gift_cards_router, prefix="/api/v1", tags=["gift-cards"])
app.include_router(admin_router, prefix="/api/v1/admin", tags=["admin"])
app.include_router(webhooks_router, tags=["webhooks"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
