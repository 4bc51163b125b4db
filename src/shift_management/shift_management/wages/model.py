from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class WageRecord:
    """An hourly wage (smallest currency unit) applying from effective_date onward."""

    wage_id: int
    employee_id: int
    hourly_wage: int
    effective_date: date
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.wage_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "hourly_wage": self.hourly_wage,
            "effective_date": self.effective_date.strftime("%Y-%m-%d"),
        }
