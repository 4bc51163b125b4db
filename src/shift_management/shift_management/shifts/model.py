from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class ShiftRecord:
    """Read-model of one worked shift, joined with the employee's name.

    End time is on the same day as start time; overnight shifts are not modelled.
    """

    shift_id: int
    employee_id: int
    employee_name: str
    work_date: date
    start_time: time
    end_time: time
    break_minutes: int = 0
