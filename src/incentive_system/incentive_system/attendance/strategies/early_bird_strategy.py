from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from ...core.constants import EARLY_BIRD_REASON
from ...core.enums import AttendanceStatus
from ..model import CheckInDecision
from .base import CheckInStrategy


class EarlyBirdStrategy(CheckInStrategy):
    """Checked in at least the early-bird window before shift start."""

    def decide_checkin(self, *, now: datetime, shift_start: Optional[time]) -> CheckInDecision:
        return CheckInDecision(status=AttendanceStatus.PRESENT, early_bird=True, note=EARLY_BIRD_REASON)
