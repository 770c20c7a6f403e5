import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from saphir.api.v1.presenters import draft_schema, reservation_schema
from saphir.api.v1.schemas import (
    ConfirmationResponseSchema,
    DraftEventSchema,
    DraftEventType,
    DraftResponseSchema,
    OpenDraftRequestSchema,
    ReservationSchema,
    TrackingResponseSchema,
)
from saphir.application.exceptions import (
    DraftNotFound,
    GatewayError,
    InvalidSelection,
    InvalidTimeSlot,
    MissingRequiredField,
    ReservationNotFound,
    ServiceNotFound,
    SubmissionFailed,
    SubmissionInProgress,
)
from saphir.application.use_cases.booking import BookingUseCase
from saphir.application.use_cases.client_space import ClientSpaceUseCase
from saphir.application.use_cases.reservation_flow import (
    Back,
    Close,
    Continue,
    DraftEvent,
    SelectDate,
    SelectOption,
    SelectTime,
    SetContact,
)
from saphir.application.use_cases.submit_reservation import SubmitReservationUseCase
from saphir.application.utils.formatting import format_price
from saphir.core.config import settings
from saphir.wiring.dependencies import (
    get_booking_use_case,
    get_client_space_use_case,
    get_submit_use_case,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_event(req: DraftEventSchema) -> DraftEvent:
    if req.type is DraftEventType.select_option:
        if req.category is None or not req.option_id:
            raise ValueError("select_option requires category and option_id")
        return SelectOption(category=req.category, option_id=req.option_id)
    if req.type is DraftEventType.select_date:
        if req.booking_date is None:
            raise ValueError("select_date requires booking_date")
        return SelectDate(value=req.booking_date)
    if req.type is DraftEventType.select_time:
        if not req.booking_time:
            raise ValueError("select_time requires booking_time")
        return SelectTime(value=req.booking_time)
    if req.type is DraftEventType.set_contact:
        if not req.field:
            raise ValueError("set_contact requires field")
        return SetContact(field=req.field, value=req.value or "")
    if req.type is DraftEventType.continue_:
        return Continue()
    if req.type is DraftEventType.back:
        return Back()
    return Close()


@router.post("/drafts", response_model=DraftResponseSchema, status_code=201)
def open_draft(req: OpenDraftRequestSchema, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        draft = uc.open(req.service_id)
    except ServiceNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return draft_schema(uc.view(draft.draft_id))


@router.get("/drafts/{draft_id}", response_model=DraftResponseSchema)
def get_draft(draft_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        return draft_schema(uc.view(draft_id))
    except (DraftNotFound, ServiceNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/drafts/{draft_id}/events", response_model=DraftResponseSchema)
def apply_event(draft_id: str, req: DraftEventSchema, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        uc.apply(draft_id, _to_event(req))
    except (DraftNotFound, ServiceNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (InvalidSelection, InvalidTimeSlot, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SubmissionInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    return draft_schema(uc.view(draft_id))


@router.delete("/drafts/{draft_id}", status_code=204)
def close_draft(draft_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        uc.close(draft_id)
    except DraftNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SubmissionInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    return Response(status_code=204)


@router.post("/drafts/{draft_id}/submit", response_model=ConfirmationResponseSchema)
def submit_draft(draft_id: str, uc: SubmitReservationUseCase = Depends(get_submit_use_case)):
    try:
        confirmation = uc.execute(draft_id)
    except (DraftNotFound, ServiceNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MissingRequiredField as e:
        raise HTTPException(
            status_code=400,
            detail={"message": "Veuillez remplir tous les champs obligatoires", "fields": list(e.fields)},
        )
    except InvalidSelection as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SubmissionInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    except SubmissionFailed as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ConfirmationResponseSchema(
        service_name=confirmation.service_name,
        booking_date=confirmation.booking_date,
        booking_time=confirmation.booking_time,
        client_name=confirmation.client_name,
        total=confirmation.total,
        total_label=f"{format_price(confirmation.total)} {settings.CURRENCY_LABEL}",
        message=confirmation.message,
        chat_link=confirmation.chat_link,
    )


@router.get("/space", response_model=TrackingResponseSchema)
def client_space(phone: str, uc: ClientSpaceUseCase = Depends(get_client_space_use_case)):
    try:
        tracking = uc.execute(phone)
    except GatewayError as e:
        logger.error("Client space unavailable", extra={"reason": str(e)})
        raise HTTPException(status_code=502, detail="Une erreur est survenue")
    return TrackingResponseSchema(
        current=reservation_schema(tracking.current) if tracking.current else None,
        progress_step=tracking.progress_step,
        history=[reservation_schema(r) for r in tracking.history],
    )


@router.get("/reservations/{reservation_id}", response_model=ReservationSchema)
def get_reservation(reservation_id: str, uc: ClientSpaceUseCase = Depends(get_client_space_use_case)):
    try:
        return reservation_schema(uc.reservation(reservation_id))
    except ReservationNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except GatewayError as e:
        logger.error("Reservation lookup failed", extra={"reservation_id": reservation_id, "reason": str(e)})
        raise HTTPException(status_code=502, detail="Une erreur est survenue")
