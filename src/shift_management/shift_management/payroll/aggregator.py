from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ..shifts.model import ShiftRecord
from ..wages.history import WageHistory
from ..wages.resolver import WageResolver
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .model import PayrollResult

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    employee_id: int
    employee_name: str
    total_hours: float = 0.0
    total_break_time: int = 0
    net_hours: float = 0.0
    hourly_wage: int = 0
    shift_count: int = 0

    def add(self, *, gross: float, net: float, break_minutes: int, wage: int) -> None:
        self.total_hours += gross
        self.total_break_time += break_minutes
        self.net_hours += net
        self.shift_count += 1
        # Highest wage seen in the window is the one paid.
        if wage > self.hourly_wage:
            self.hourly_wage = wage

    def finalize(self) -> PayrollResult:
        return PayrollResult(
            employee_id=self.employee_id,
            employee_name=self.employee_name,
            total_hours=self.total_hours,
            total_break_time=self.total_break_time,
            net_hours=self.net_hours,
            hourly_wage=self.hourly_wage,
            # int() truncates toward zero, also for negative net hours.
            total_salary=int(self.net_hours * self.hourly_wage),
            shift_count=self.shift_count,
        )


class PayrollAggregator:
    """Folds shift records into per-employee payroll totals.

    Stateless between calls: every invocation allocates its own accumulators,
    so separate aggregations can run concurrently.
    """

    def __init__(
        self,
        *,
        calculator: Optional[HoursCalculator] = None,
        resolver: Optional[WageResolver] = None,
    ):
        self._calculator = calculator or StandardHoursCalculator()
        self._resolver = resolver or WageResolver()

    def aggregate(
        self,
        shifts: Iterable[ShiftRecord],
        wage_history_by_employee: Mapping[int, Iterable],
    ) -> list[PayrollResult]:
        """One PayrollResult per distinct employee in ``shifts``, ordered by employee_id."""
        histories: dict[int, WageHistory] = {}
        accumulators: dict[int, _Accumulator] = {}

        for shift in shifts:
            hours = self._calculator.compute(shift.start_time, shift.end_time, shift.break_minutes)

            history = histories.get(shift.employee_id)
            if history is None:
                history = WageHistory(wage_history_by_employee.get(shift.employee_id, ()))
                histories[shift.employee_id] = history
            wage = self._resolver.resolve(history, shift.work_date)

            acc = accumulators.get(shift.employee_id)
            if acc is None:
                acc = _Accumulator(employee_id=shift.employee_id, employee_name=shift.employee_name)
                accumulators[shift.employee_id] = acc
            acc.add(gross=hours.gross_hours, net=hours.net_hours, break_minutes=int(shift.break_minutes or 0), wage=wage)

        results = [accumulators[k].finalize() for k in sorted(accumulators)]
        for r in results:
            if r.net_hours < 0:
                logger.warning("negative net hours for employee=%s: %.2f", r.employee_id, r.net_hours)
        return results

    def aggregate_employee(
        self,
        employee_id: int,
        shifts: Iterable[ShiftRecord],
        wage_history: Iterable,
    ) -> Optional[PayrollResult]:
        """Totals for a single employee, or None when none of ``shifts`` are theirs."""
        own = [s for s in shifts if s.employee_id == employee_id]
        if not own:
            return None
        return self.aggregate(own, {employee_id: wage_history})[0]
