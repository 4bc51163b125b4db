from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import day_of_week, today_local
from .evaluator import CoverageEvaluator
from .model import CoverageSummary
from .repository import CoverageRepository, TimeSlotRepository

logger = logging.getLogger(__name__)


class CoverageService:
    def __init__(
        self,
        time_slots: TimeSlotRepository,
        coverage: CoverageRepository,
        *,
        evaluator: Optional[CoverageEvaluator] = None,
    ):
        self._time_slots = time_slots
        self._coverage = coverage
        self._evaluator = evaluator or CoverageEvaluator()

    def evaluate(self, *, on_date: Optional[date] = None) -> list[CoverageSummary]:
        """Coverage report for on_date (today when omitted), ordered by start time then position."""
        on_date = on_date or today_local()
        requirements = sorted(
            self._time_slots.list_for_day_of_week(day_of_week(on_date)),
            key=lambda r: (r.start_time, r.position),
        )
        observations = self._coverage.list_for_date(on_date)
        logger.debug("coverage %s: %d slots, %d observations", on_date, len(requirements), len(observations))
        return self._evaluator.evaluate(on_date, requirements, observations)
