from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OptionCategory(str, Enum):
    OIL = "oil"
    MUSIC = "music"
    INTENSITY = "intensity"


@dataclass(frozen=True)
class Option:
    option_id: str
    name: str
    price_delta: int = 0


@dataclass(frozen=True)
class OptionGroup:
    category: OptionCategory
    options: tuple[Option, ...]
    default_option_id: str | None = None

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError(f"Option group '{self.category.value}' has no options")
        ids = [opt.option_id for opt in self.options]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate option ids in group '{self.category.value}'")
        if self.default_option_id is None:
            # Frozen dataclass: bypass __setattr__ to fill the implicit default.
            object.__setattr__(self, "default_option_id", ids[0])
        elif self.default_option_id not in ids:
            raise ValueError(
                f"Default option '{self.default_option_id}' not in group '{self.category.value}'"
            )

    def get(self, option_id: str) -> Option | None:
        for opt in self.options:
            if opt.option_id == option_id:
                return opt
        return None

    @property
    def default(self) -> Option:
        return self.get(self.default_option_id)  # type: ignore[arg-type, return-value]


@dataclass(frozen=True)
class Service:
    service_id: str
    name: str
    category: str
    description: str
    duration: str
    base_price: int
    image: str
    options: dict[OptionCategory, OptionGroup] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing = [cat.value for cat in OptionCategory if cat not in self.options]
        if missing:
            raise ValueError(f"Service '{self.service_id}' is missing option groups: {', '.join(missing)}")

    def group(self, category: OptionCategory) -> OptionGroup:
        return self.options[category]


@dataclass(frozen=True)
class Category:
    category_id: str
    name: str


ALL_CATEGORIES = "all"
