from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum

from saphir.domain.entities.service_catalog import OptionCategory


class WizardStep(IntEnum):
    CUSTOMIZE = 1
    SCHEDULE = 2
    CONTACT = 3


@dataclass(frozen=True)
class Selections:
    oil_id: str
    music_id: str
    intensity_id: str

    def as_dict(self) -> dict[OptionCategory, str]:
        return {
            OptionCategory.OIL: self.oil_id,
            OptionCategory.MUSIC: self.music_id,
            OptionCategory.INTENSITY: self.intensity_id,
        }


@dataclass(frozen=True)
class ReservationDraft:
    service_id: str
    selections: Selections
    booking_date: date | None = None
    booking_time: str | None = None
    name: str = ""
    phone: str = ""
    email: str = ""
    step: WizardStep = WizardStep.CUSTOMIZE
    draft_id: str | None = None
    submitting: bool = False
