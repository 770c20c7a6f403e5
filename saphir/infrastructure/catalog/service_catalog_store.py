from __future__ import annotations

from saphir.application.ports.service_catalog import ServiceCatalogPort
from saphir.domain.entities.service_catalog import ALL_CATEGORIES, Category, Service
from saphir.infrastructure.catalog.service_catalog_data import CATEGORIES, SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(
        self,
        catalog: dict[str, Service] | None = None,
        categories: list[Category] | None = None,
    ) -> None:
        self._catalog = catalog or SERVICE_CATALOG
        self._categories = categories or CATEGORIES

    def get_service(self, service_id: str) -> Service | None:
        normalized_id = service_id.lower().strip()
        return self._catalog.get(normalized_id)

    def list_services(self, category: str = ALL_CATEGORIES) -> list[Service]:
        if not category or category == ALL_CATEGORIES:
            return list(self._catalog.values())
        return [service for service in self._catalog.values() if service.category == category]

    def list_categories(self) -> list[Category]:
        categories = list(self._categories)
        if not categories or categories[0].category_id != ALL_CATEGORIES:
            categories = [Category(category_id=ALL_CATEGORIES, name="Tous")] + [
                c for c in categories if c.category_id != ALL_CATEGORIES
            ]
        return categories
