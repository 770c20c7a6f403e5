from __future__ import annotations

import logging
from urllib.parse import quote

from saphir.application.ports.message_platform import MessagePlatformPort


class WhatsAppPlatform(MessagePlatformPort):
    """Click-to-chat links; the client opens them, nothing is sent from the server."""

    def __init__(self, business_number: str, base_url: str = "https://wa.me") -> None:
        self._business_number = business_number
        self._base_url = base_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    def build_chat_link(self, text: str | None = None, phone: str | None = None) -> str:
        number = phone or self._business_number
        link = f"{self._base_url}/{number}"
        if text:
            link += f"?text={quote(text, safe='')}"
        self._logger.debug("Chat link built", extra={"text_length": len(text or "")})
        return link
