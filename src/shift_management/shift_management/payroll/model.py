from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PayrollResult:
    """Per-employee payroll totals for one aggregation window."""

    employee_id: int
    employee_name: str
    total_hours: float
    total_break_time: int
    net_hours: float
    hourly_wage: int
    total_salary: int
    shift_count: int

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "total_hours": self.total_hours,
            "total_break_time": self.total_break_time,
            "net_hours": self.net_hours,
            "hourly_wage": self.hourly_wage,
            "total_salary": self.total_salary,
            "shift_count": self.shift_count,
        }
