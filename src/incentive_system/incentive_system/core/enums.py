from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Check-in status reported to the attendance log."""

    PRESENT = "PRESENT"
    LATE = "LATE"


class PointType(str, Enum):
    """Kinds of point-awarding events stored in the ledger."""

    EARLY_BIRD = "EARLY_BIRD"
    TASK_MASTER = "TASK_MASTER"
    PERFECT_AUDIT = "PERFECT_AUDIT"
    MANUAL_ADJUSTMENT = "MANUAL_ADJUSTMENT"
    EOTM_BONUS = "EOTM_BONUS"

    @property
    def fixed_amount(self) -> Optional[int]:
        """Point value fixed by the type, or None when any signed value is allowed."""
        return FIXED_POINT_VALUES.get(self)


FIXED_POINT_VALUES = {
    PointType.EARLY_BIRD: 2,
    PointType.TASK_MASTER: 3,
    PointType.PERFECT_AUDIT: 5,
}


class EmploymentCategory(str, Enum):
    """Employment classification owned by the employee registry."""

    PERMANENT = "PERMANENT"
    PROBATION = "PROBATION"
    DAILY_WORKER = "DAILY_WORKER"

    @classmethod
    def parse(cls, value) -> Optional["EmploymentCategory"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return None
