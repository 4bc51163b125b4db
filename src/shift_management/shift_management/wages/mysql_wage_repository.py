from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, placeholders
from .model import WageRecord
from .repository import WageRepository

_SELECT = """
    SELECT hw.id, hw.employee_id, e.name AS employee_name, hw.hourly_wage, hw.effective_date
    FROM hourly_wages hw
    JOIN employees e ON e.id = hw.employee_id
"""


def _to_record(row: dict) -> WageRecord:
    return WageRecord(
        wage_id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        hourly_wage=int(row["hourly_wage"]),
        effective_date=normalize_mysql_date(row["effective_date"]),
        employee_name=row.get("employee_name"),
    )


class MySQLWageRepository(WageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[WageRecord]:
        return self.list_for_employees([employee_id])

    def list_for_employees(self, employee_ids: Sequence[int]) -> Sequence[WageRecord]:
        ids = sorted({int(i) for i in employee_ids})
        if not ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE hw.employee_id IN ({placeholders(len(ids))}) ORDER BY hw.employee_id, hw.effective_date, hw.id",
                tuple(ids),
            )
            return [_to_record(r) for r in fetchall(cur)]
