from __future__ import annotations

from datetime import time

from ...common.datetime_utils import hours_between
from ...core.constants import MINUTES_PER_HOUR
from .base import HoursCalculator, ShiftHours


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: gross = end - start, net = gross - break.

    Net hours are not clamped; a break longer than the shift yields a
    negative value so the anomaly shows up in the payroll output.
    """

    def compute(self, start: time, end: time, break_minutes: int) -> ShiftHours:
        gross = hours_between(start, end)
        net = gross - int(break_minutes or 0) / MINUTES_PER_HOUR
        return ShiftHours(gross_hours=gross, net_hours=net)
