from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import CheckInDecision
from .base import CheckInStrategy


class OnTimeStrategy(CheckInStrategy):
    """Within the late tolerance, but not early enough for a bonus."""

    def decide_checkin(self, *, now: datetime, shift_start: Optional[time]) -> CheckInDecision:
        return CheckInDecision(status=AttendanceStatus.PRESENT)
