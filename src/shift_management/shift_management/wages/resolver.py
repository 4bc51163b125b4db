from __future__ import annotations

from datetime import date
from typing import Iterable, Union

from ..core.constants import DEFAULT_HOURLY_WAGE
from .history import WageHistory
from .model import WageRecord


class WageResolver:
    """Point lookup of the hourly wage in force on a given date.

    Employees without a qualifying record fall back to ``default_wage`` so
    payroll stays computable for them.
    """

    def __init__(self, *, default_wage: int = DEFAULT_HOURLY_WAGE):
        if default_wage <= 0:
            raise ValueError("default_wage must be positive")
        self.default_wage = int(default_wage)

    def resolve(self, history: Union[WageHistory, Iterable[WageRecord]], on_date: date) -> int:
        if not isinstance(history, WageHistory):
            history = WageHistory(history)
        record = history.effective_on(on_date)
        if record is None:
            return self.default_wage
        return record.hourly_wage
