from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from ...core.constants import DEFAULT_SHIFT_START
from ...core.enums import AttendanceStatus
from ..model import CheckInDecision
from .base import CheckInStrategy


class NoScheduleStrategy(CheckInStrategy):
    """No shift scheduled: late only from the hour after the default start.

    Early bird is never signalled without a schedule.
    """

    def decide_checkin(self, *, now: datetime, shift_start: Optional[time]) -> CheckInDecision:
        if now.hour > DEFAULT_SHIFT_START.hour:
            return CheckInDecision(status=AttendanceStatus.LATE, note="No shift scheduled")
        return CheckInDecision(status=AttendanceStatus.PRESENT, note="No shift scheduled")
