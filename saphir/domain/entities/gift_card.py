from __future__ import annotations

from dataclasses import dataclass


GIFT_CARD_AMOUNTS: tuple[int, ...] = (25000, 50000, 75000, 100000, 150000)
DEFAULT_GIFT_CARD_AMOUNT = 50000


@dataclass(frozen=True)
class GiftCard:
    code: str
    amount: int
    recipient_name: str
    sender_name: str
    message: str = ""
