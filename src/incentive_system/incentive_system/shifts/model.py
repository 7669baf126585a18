from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class ShiftSchedule:
    """Scheduled shift start for one employee on one work day."""

    employee_id: str
    work_date: date
    start_time: time
