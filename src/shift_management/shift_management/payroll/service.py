from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import month_bounds
from ..core.exceptions import NotFoundError
from ..shifts.repository import ShiftRepository
from ..wages.model import WageRecord
from ..wages.repository import WageRepository
from .aggregator import PayrollAggregator
from .model import PayrollResult

logger = logging.getLogger(__name__)


class PayrollService:
    """Monthly payroll over the shift and wage stores.

    Fetch failures from the repositories propagate unchanged.
    """

    def __init__(
        self,
        shifts: ShiftRepository,
        wages: WageRepository,
        *,
        aggregator: Optional[PayrollAggregator] = None,
    ):
        self._shifts = shifts
        self._wages = wages
        self._aggregator = aggregator or PayrollAggregator()

    def _wages_by_employee(self, employee_ids: list[int]) -> dict[int, list[WageRecord]]:
        grouped: dict[int, list[WageRecord]] = {i: [] for i in employee_ids}
        if not employee_ids:
            return grouped
        for record in self._wages.list_for_employees(employee_ids):
            grouped.setdefault(record.employee_id, []).append(record)
        return grouped

    def calculate_monthly(self, *, year: int, month: int) -> list[PayrollResult]:
        """All employees with shifts in the month; empty list when there are none."""
        start, end = month_bounds(year, month)
        shifts = self._shifts.list_range(start=start, end=end)
        logger.debug("payroll %s..%s: %d shifts", start, end, len(shifts))

        employee_ids = sorted({s.employee_id for s in shifts})
        return self._aggregator.aggregate(shifts, self._wages_by_employee(employee_ids))

    def calculate_employee(self, *, employee_id: int, year: int, month: int) -> PayrollResult:
        start, end = month_bounds(year, month)
        shifts = self._shifts.list_range(start=start, end=end, employee_id=employee_id)
        logger.debug("payroll employee=%s %s..%s: %d shifts", employee_id, start, end, len(shifts))

        result = None
        if shifts:
            history = self._wages_by_employee([employee_id])[employee_id]
            result = self._aggregator.aggregate_employee(employee_id, shifts, history)
        if result is None:
            raise NotFoundError("No shift data found for the requested month")
        return result
