from __future__ import annotations

from abc import ABC, abstractmethod

from saphir.domain.entities.service_catalog import Category, Service


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        """Get service by id. Returns None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self, category: str = "all") -> list[Service]:
        """List services of a category, in catalog order. "all" lists every service."""
        raise NotImplementedError

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Ordered categories, starting with the "all" wildcard."""
        raise NotImplementedError
