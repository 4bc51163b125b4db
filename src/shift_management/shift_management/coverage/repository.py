from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import CoverageObservation, StaffingRequirement


class TimeSlotRepository(Protocol):
    def list_for_day_of_week(self, day_of_week: int) -> Sequence[StaffingRequirement]:
        raise NotImplementedError


class CoverageRepository(Protocol):
    def list_for_date(self, work_date: date) -> Sequence[CoverageObservation]:
        raise NotImplementedError
