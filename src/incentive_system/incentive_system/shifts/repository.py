from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import ShiftSchedule


class ShiftScheduleRepository(Protocol):
    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[ShiftSchedule]:
        raise NotImplementedError
