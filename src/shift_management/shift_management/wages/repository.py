from __future__ import annotations

from typing import Protocol, Sequence

from .model import WageRecord


class WageRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[WageRecord]:
        raise NotImplementedError

    def list_for_employees(self, employee_ids: Sequence[int]) -> Sequence[WageRecord]:
        """Wage records of every listed employee, in no particular order."""

        raise NotImplementedError
