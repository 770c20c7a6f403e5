from __future__ import annotations

import logging
import secrets

from saphir.application.exceptions import InvalidSelection, MissingRequiredField
from saphir.domain.entities.gift_card import GIFT_CARD_AMOUNTS, GiftCard

CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 8


def generate_code(length: int = CODE_LENGTH) -> str:
    body = "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))
    return f"SAPHIR-{body}"


class GenerateGiftCardUseCase:
    def __init__(self, amounts: tuple[int, ...] = GIFT_CARD_AMOUNTS) -> None:
        self._amounts = amounts
        self._logger = logging.getLogger(__name__)

    def execute(self, amount: int, recipient_name: str, sender_name: str, message: str = "") -> GiftCard:
        recipient = (recipient_name or "").strip()
        sender = (sender_name or "").strip()
        missing = [name for name, value in (("recipient_name", recipient), ("sender_name", sender)) if not value]
        if missing:
            raise MissingRequiredField(missing)
        if amount not in self._amounts:
            raise InvalidSelection(f"Gift card amount {amount} is not offered")

        card = GiftCard(
            code=generate_code(),
            amount=amount,
            recipient_name=recipient,
            sender_name=sender,
            message=(message or "").strip(),
        )
        self._logger.info("Gift card generated", extra={"amount": amount})
        return card
