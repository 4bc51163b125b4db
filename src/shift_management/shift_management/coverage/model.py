from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from ..core.enums import CoverageStatus


@dataclass(frozen=True)
class StaffingRequirement:
    """Recurring staffing need (time slot) for one day of the week."""

    time_slot_id: int
    day_of_week: int
    start_time: time
    end_time: time
    position: str
    required_count: int


@dataclass(frozen=True)
class CoverageObservation:
    """Headcount actually assigned to a time slot on a concrete date."""

    work_date: date
    time_slot_id: int
    actual_count: int = 0


@dataclass(frozen=True)
class CoverageSummary:
    work_date: date
    day_of_week: int
    start_time: time
    end_time: time
    position: str
    required_count: int
    actual_count: int
    shortage: int
    status: CoverageStatus

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "day_of_week": self.day_of_week,
            "start_time": self.start_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M"),
            "position": self.position,
            "required_count": self.required_count,
            "actual_count": self.actual_count,
            "shortage": self.shortage,
            "status": self.status.value,
        }
