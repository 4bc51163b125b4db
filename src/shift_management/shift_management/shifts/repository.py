from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ShiftRecord


class ShiftRepository(Protocol):
    def list_range(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[ShiftRecord]:
        """Shifts with start <= work_date <= end, ordered by employee then date."""

        raise NotImplementedError
