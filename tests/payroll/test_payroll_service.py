from __future__ import annotations

from datetime import date, time

import pytest

from src.shift_management.shift_management.core.exceptions import NotFoundError
from src.shift_management.shift_management.payroll.service import PayrollService
from src.shift_management.shift_management.shifts.model import ShiftRecord
from src.shift_management.shift_management.wages.model import WageRecord


class FakeShiftRepo:
    def __init__(self, shifts):
        self._shifts = shifts
        self.last_args = None

    def list_range(self, *, start: date, end: date, employee_id=None):
        self.last_args = {"start": start, "end": end, "employee_id": employee_id}
        return [
            s
            for s in self._shifts
            if start <= s.work_date <= end and (employee_id is None or s.employee_id == employee_id)
        ]


class FakeWageRepo:
    def __init__(self, records):
        self._records = records
        self.requested_ids = None

    def list_for_employee(self, employee_id):
        return [r for r in self._records if r.employee_id == employee_id]

    def list_for_employees(self, employee_ids):
        self.requested_ids = list(employee_ids)
        return [r for r in self._records if r.employee_id in set(employee_ids)]


class FailingShiftRepo:
    def list_range(self, *, start, end, employee_id=None):
        raise ConnectionError("store unavailable")


SHIFTS = [
    ShiftRecord(1, 1, "Aoki", date(2024, 2, 1), time(9, 0), time(17, 0), 60),
    ShiftRecord(2, 1, "Aoki", date(2024, 2, 29), time(10, 0), time(14, 0), 0),
    ShiftRecord(3, 2, "Baba", date(2024, 2, 10), time(13, 0), time(18, 0), 30),
    ShiftRecord(4, 2, "Baba", date(2024, 3, 1), time(13, 0), time(18, 0), 30),
]
WAGES = [
    WageRecord(wage_id=1, employee_id=1, hourly_wage=1100, effective_date=date(2023, 12, 1)),
    WageRecord(wage_id=2, employee_id=2, hourly_wage=1200, effective_date=date(2024, 3, 1)),
]


def test_monthly_payroll_uses_leap_february_bounds():
    shifts = FakeShiftRepo(SHIFTS)
    svc = PayrollService(shifts, FakeWageRepo(WAGES))

    results = svc.calculate_monthly(year=2024, month=2)

    assert shifts.last_args == {"start": date(2024, 2, 1), "end": date(2024, 2, 29), "employee_id": None}
    assert [r.employee_id for r in results] == [1, 2]
    aoki, baba = results
    assert aoki.shift_count == 2
    assert aoki.net_hours == 11.0
    assert aoki.total_salary == 12100
    # Baba's 1200 starts in March; February falls back to the default wage
    assert baba.hourly_wage == 1000
    assert baba.total_salary == 4500


def test_monthly_payroll_only_fetches_wages_for_present_employees():
    wages = FakeWageRepo(WAGES)
    PayrollService(FakeShiftRepo(SHIFTS), wages).calculate_monthly(year=2024, month=3)

    assert wages.requested_ids == [2]


def test_monthly_payroll_empty_month_is_empty_list():
    svc = PayrollService(FakeShiftRepo(SHIFTS), FakeWageRepo(WAGES))

    assert svc.calculate_monthly(year=2023, month=2) == []


def test_employee_payroll():
    svc = PayrollService(FakeShiftRepo(SHIFTS), FakeWageRepo(WAGES))

    result = svc.calculate_employee(employee_id=2, year=2024, month=3)

    assert result.employee_name == "Baba"
    assert result.hourly_wage == 1200
    assert result.total_break_time == 30
    assert result.total_salary == 5400


def test_employee_payroll_without_shifts_is_not_found():
    svc = PayrollService(FakeShiftRepo(SHIFTS), FakeWageRepo(WAGES))

    with pytest.raises(NotFoundError):
        svc.calculate_employee(employee_id=1, year=2024, month=3)


def test_fetch_failure_propagates():
    svc = PayrollService(FailingShiftRepo(), FakeWageRepo(WAGES))

    with pytest.raises(ConnectionError):
        svc.calculate_monthly(year=2024, month=2)
