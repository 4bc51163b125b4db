from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from ..common.datetime_utils import day_of_week
from ..core.enums import CoverageStatus
from .model import CoverageObservation, CoverageSummary, StaffingRequirement


def coverage_status(required_count: int, actual_count: int) -> CoverageStatus:
    if actual_count >= required_count:
        return CoverageStatus.SUFFICIENT
    return CoverageStatus.SHORTAGE


class CoverageEvaluator:
    """Compares time-slot requirements with actual headcount for one date."""

    def evaluate(
        self,
        on_date: date,
        requirements: Sequence[StaffingRequirement],
        observations: Iterable[CoverageObservation],
    ) -> list[CoverageSummary]:
        """One summary per requirement, in the order given.

        A requirement without a matching observation counts as 0 assigned.
        Shortage is the signed difference (negative when over-staffed).
        """
        actual_by_slot = {o.time_slot_id: o.actual_count for o in observations if o.work_date == on_date}
        dow = day_of_week(on_date)

        summaries: list[CoverageSummary] = []
        for req in requirements:
            actual = int(actual_by_slot.get(req.time_slot_id, 0))
            summaries.append(
                CoverageSummary(
                    work_date=on_date,
                    day_of_week=dow,
                    start_time=req.start_time,
                    end_time=req.end_time,
                    position=req.position,
                    required_count=req.required_count,
                    actual_count=actual,
                    shortage=req.required_count - actual,
                    status=coverage_status(req.required_count, actual),
                )
            )
        return summaries
