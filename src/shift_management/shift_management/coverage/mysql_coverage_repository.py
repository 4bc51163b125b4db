from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_time
from .model import CoverageObservation, StaffingRequirement
from .repository import CoverageRepository, TimeSlotRepository


class MySQLTimeSlotRepository(TimeSlotRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_day_of_week(self, day_of_week: int) -> Sequence[StaffingRequirement]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, day_of_week, start_time, end_time, position, required_count
                FROM time_slots
                WHERE day_of_week=%s
                ORDER BY start_time, position
                """,
                (day_of_week,),
            )
            return [
                StaffingRequirement(
                    time_slot_id=int(r["id"]),
                    day_of_week=int(r["day_of_week"]),
                    start_time=normalize_mysql_time(r["start_time"]),
                    end_time=normalize_mysql_time(r["end_time"]),
                    position=r["position"],
                    required_count=int(r["required_count"]),
                )
                for r in fetchall(cur)
            ]


class MySQLCoverageRepository(CoverageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, work_date: date) -> Sequence[CoverageObservation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT date, time_slot_id, actual_count FROM shift_coverage WHERE date=%s",
                (work_date,),
            )
            return [
                CoverageObservation(
                    work_date=normalize_mysql_date(r["date"]),
                    time_slot_id=int(r["time_slot_id"]),
                    actual_count=int(r.get("actual_count") or 0),
                )
                for r in fetchall(cur)
            ]
