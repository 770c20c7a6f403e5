from __future__ import annotations

from dataclasses import dataclass

from saphir.application.exceptions import InvalidSelection
from saphir.domain.entities.reservation_draft import Selections
from saphir.domain.entities.service_catalog import Option, OptionCategory, Service


@dataclass(frozen=True)
class PriceBreakdown:
    base_price: int
    options: dict[OptionCategory, Option]
    total: int


def default_selections(service: Service) -> Selections:
    return Selections(
        oil_id=service.group(OptionCategory.OIL).default_option_id,
        music_id=service.group(OptionCategory.MUSIC).default_option_id,
        intensity_id=service.group(OptionCategory.INTENSITY).default_option_id,
    )


def resolve_option(service: Service, category: OptionCategory, option_id: str) -> Option:
    option = service.group(category).get(option_id)
    if option is None:
        raise InvalidSelection(
            f"Option '{option_id}' is not a {category.value} option of '{service.service_id}'"
        )
    return option


def price_breakdown(service: Service, selections: Selections) -> PriceBreakdown:
    resolved = {
        category: resolve_option(service, category, option_id)
        for category, option_id in selections.as_dict().items()
    }
    total = service.base_price + sum(opt.price_delta for opt in resolved.values())
    return PriceBreakdown(base_price=service.base_price, options=resolved, total=total)


def compute_total(service: Service, selections: Selections) -> int:
    """Base price plus the delta of the selected option in each group."""
    return price_breakdown(service, selections).total
