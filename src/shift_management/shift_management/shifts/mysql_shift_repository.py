from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_time
from .model import ShiftRecord
from .repository import ShiftRepository


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[ShiftRecord]:
        sql = """
            SELECT s.id, s.employee_id, e.name AS employee_name,
                   s.date, s.start_time, s.end_time, s.break_time
            FROM shifts s
            JOIN employees e ON e.id = s.employee_id
            WHERE s.date >= %s AND s.date <= %s
        """
        params: list = [start, end]
        if employee_id is not None:
            sql += " AND s.employee_id = %s"
            params.append(employee_id)
        sql += " ORDER BY s.employee_id, s.date"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                ShiftRecord(
                    shift_id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    work_date=normalize_mysql_date(r["date"]),
                    start_time=normalize_mysql_time(r["start_time"]),
                    end_time=normalize_mysql_time(r["end_time"]),
                    break_minutes=int(r.get("break_time") or 0),
                )
                for r in rows
            ]
