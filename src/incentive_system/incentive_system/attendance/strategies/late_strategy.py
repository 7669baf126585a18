from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import CheckInDecision
from .base import CheckInStrategy


class LateStrategy(CheckInStrategy):
    """Late check-in."""

    def decide_checkin(self, *, now: datetime, shift_start: Optional[time]) -> CheckInDecision:
        note = f"Shift started {shift_start.strftime('%H:%M')}" if shift_start else None
        return CheckInDecision(status=AttendanceStatus.LATE, note=note)
