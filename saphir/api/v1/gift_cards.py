from fastapi import APIRouter, Depends, HTTPException

from saphir.api.v1.schemas import GiftCardRequestSchema, GiftCardResponseSchema
from saphir.application.exceptions import InvalidSelection, MissingRequiredField
from saphir.application.use_cases.gift_card import GenerateGiftCardUseCase
from saphir.application.utils.formatting import format_price
from saphir.core.config import settings
from saphir.wiring.dependencies import get_gift_card_use_case

router = APIRouter()


@router.post("/gift-cards", response_model=GiftCardResponseSchema, status_code=201)
def create_gift_card(req: GiftCardRequestSchema, uc: GenerateGiftCardUseCase = Depends(get_gift_card_use_case)):
    try:
        card = uc.execute(
            amount=req.amount,
            recipient_name=req.recipient_name,
            sender_name=req.sender_name,
            message=req.message,
        )
    except MissingRequiredField as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "fields": list(e.fields)})
    except InvalidSelection as e:
        raise HTTPException(status_code=400, detail=str(e))

    return GiftCardResponseSchema(
        code=card.code,
        amount=card.amount,
        amount_label=f"{format_price(card.amount)} {settings.CURRENCY_LABEL}",
        recipient_name=card.recipient_name,
        sender_name=card.sender_name,
        message=card.message,
    )
