from fastapi import APIRouter, Depends, HTTPException

from saphir.api.v1.presenters import selections_schema, service_schema
from saphir.api.v1.schemas import (
    AvailabilityResponseSchema,
    CategorySchema,
    QuoteResponseSchema,
    SelectionsSchema,
    ServiceSchema,
)
from saphir.application.exceptions import InvalidSelection
from saphir.application.ports.service_catalog import ServiceCatalogPort
from saphir.application.use_cases.availability import AvailabilityProvider
from saphir.application.use_cases.pricing import default_selections, price_breakdown
from saphir.domain.entities.reservation_draft import Selections
from saphir.domain.entities.service_catalog import Service
from saphir.wiring.dependencies import get_availability, get_service_catalog

router = APIRouter()


def _get_service(catalog: ServiceCatalogPort, service_id: str) -> Service:
    service = catalog.get_service(service_id)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Service '{service_id}' not found")
    return service


@router.get("/categories", response_model=list[CategorySchema])
def list_categories(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [CategorySchema(id=c.category_id, name=c.name) for c in catalog.list_categories()]


@router.get("/services", response_model=list[ServiceSchema])
def list_services(category: str = "all", catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [service_schema(s) for s in catalog.list_services(category)]


@router.get("/services/{service_id}", response_model=ServiceSchema)
def get_service(service_id: str, catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return service_schema(_get_service(catalog, service_id))


@router.post("/services/{service_id}/quote", response_model=QuoteResponseSchema)
def quote(
    service_id: str,
    req: SelectionsSchema | None = None,
    catalog: ServiceCatalogPort = Depends(get_service_catalog),
):
    service = _get_service(catalog, service_id)
    selections = (
        Selections(oil_id=req.oil, music_id=req.music, intensity_id=req.intensity)
        if req is not None
        else default_selections(service)
    )
    try:
        breakdown = price_breakdown(service, selections)
    except InvalidSelection as e:
        raise HTTPException(status_code=400, detail=str(e))

    return QuoteResponseSchema(
        service_id=service.service_id,
        base_price=breakdown.base_price,
        selections=selections_schema(selections),
        option_names={category.value: opt.name for category, opt in breakdown.options.items()},
        total=breakdown.total,
    )


@router.get("/availability", response_model=AvailabilityResponseSchema)
def availability(provider: AvailabilityProvider = Depends(get_availability)):
    return AvailabilityResponseSchema(
        dates=provider.list_available_dates(),
        time_slots=provider.list_time_slots(),
    )
