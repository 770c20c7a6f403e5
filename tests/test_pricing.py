"""
Tests for option pricing and the service catalog.
"""

from __future__ import annotations

import pytest

from saphir.application.exceptions import InvalidSelection
from saphir.application.use_cases.pricing import compute_total, default_selections, price_breakdown
from saphir.domain.entities.reservation_draft import Selections
from saphir.domain.entities.service_catalog import Option, OptionCategory, OptionGroup, Service
from saphir.infrastructure.catalog.service_catalog_store import ServiceCatalogStore


def _service(service_id: str) -> Service:
    service = ServiceCatalogStore().get_service(service_id)
    assert service is not None
    return service


def test_relaxing_massage_with_rose_oil():
    service = _service("massage-relaxant")
    selections = Selections(oil_id="rose", music_id="zen", intensity_id="intense")

    assert compute_total(service, selections) == 40000


def test_default_selections_add_default_deltas():
    for service in ServiceCatalogStore().list_services():
        expected = service.base_price + sum(group.default.price_delta for group in service.options.values())
        assert compute_total(service, default_selections(service)) == expected

    signature = _service("signature-saphir")
    assert compute_total(signature, default_selections(signature)) == 175000


def test_defaults_are_first_options():
    service = _service("massage-relaxant")
    selections = default_selections(service)

    assert selections == Selections(oil_id="lavande", music_id="zen", intensity_id="douce")


def test_deltas_add_across_groups():
    service = _service("signature-saphir")
    selections = Selections(oil_id="royal", music_id="live", intensity_id="zen")

    breakdown = price_breakdown(service, selections)

    assert breakdown.base_price == 150000
    assert breakdown.total == 150000 + 30000 + 25000
    assert breakdown.options[OptionCategory.MUSIC].name == "Musique Live (Harpe)"


def test_facial_intensity_has_a_price():
    service = _service("facial-eclat")
    selections = Selections(oil_id="or", music_id="spa", intensity_id="antiage")

    assert compute_total(service, selections) == 45000 + 15000 + 5000


def test_unknown_option_is_rejected():
    service = _service("massage-relaxant")
    selections = Selections(oil_id="oud", music_id="zen", intensity_id="douce")

    with pytest.raises(InvalidSelection):
        compute_total(service, selections)


def test_explicit_default_option():
    group = OptionGroup(
        category=OptionCategory.MUSIC,
        options=(Option("zen", "Zen"), Option("piano", "Piano")),
        default_option_id="piano",
    )

    assert group.default.option_id == "piano"
    assert group.get("zen").name == "Zen"
    assert group.get("jazz") is None


def test_option_group_rejects_bad_definitions():
    with pytest.raises(ValueError):
        OptionGroup(category=OptionCategory.OIL, options=())
    with pytest.raises(ValueError):
        OptionGroup(category=OptionCategory.OIL, options=(Option("a", "A"), Option("a", "B")))
    with pytest.raises(ValueError):
        OptionGroup(category=OptionCategory.OIL, options=(Option("a", "A"),), default_option_id="b")


def test_catalog_lookup_and_filters():
    store = ServiceCatalogStore()

    assert store.get_service(" Massage-Relaxant ").name == "Massage Relaxant Or Rose"
    assert store.get_service("unknown") is None
    assert len(store.list_services()) == 5
    assert [s.service_id for s in store.list_services("massages")] == ["massage-relaxant", "massage-pierres"]
    assert store.list_services("nothing") == []
    assert store.list_categories()[0].category_id == "all"
