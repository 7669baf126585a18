from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_one
from .model import ShiftSchedule
from .repository import ShiftScheduleRepository


def shift_start_from_column(value) -> time:
    """TIME columns arrive as timedelta from the C extension and as time or str elsewhere."""
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        return (datetime.min + value).time()
    if isinstance(value, str):
        return time.fromisoformat(value.strip())
    raise TypeError(f"Unsupported TIME value: {value!r}")


class MySQLShiftScheduleRepository(ShiftScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[ShiftSchedule]:
        r = query_one(
            self._conn_factory,
            """
            SELECT employee_id, work_date, start_time
            FROM shift_schedules
            WHERE employee_id=%s AND work_date=%s
            """,
            (str(employee_id), work_date),
        )
        if not r or r["start_time"] is None:
            return None
        return ShiftSchedule(
            employee_id=str(r["employee_id"]),
            work_date=r["work_date"],
            start_time=shift_start_from_column(r["start_time"]),
        )
