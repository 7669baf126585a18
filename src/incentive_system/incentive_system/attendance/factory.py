from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Optional

from ..core.constants import DEFAULT_EARLY_BIRD_MINUTES, DEFAULT_LATE_TOLERANCE_MINUTES
from .strategies.base import CheckInStrategy
from .strategies.early_bird_strategy import EarlyBirdStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.no_schedule_strategy import NoScheduleStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    late_tolerance_minutes: int = DEFAULT_LATE_TOLERANCE_MINUTES
    early_bird_minutes: int = DEFAULT_EARLY_BIRD_MINUTES

    def for_checkin(self, *, now: datetime, shift_start: Optional[time]) -> CheckInStrategy:
        if shift_start is None:
            return NoScheduleStrategy()

        start = datetime.combine(now.date(), shift_start)
        if now > start + timedelta(minutes=self.late_tolerance_minutes):
            return LateStrategy()
        if now <= start - timedelta(minutes=self.early_bird_minutes):
            return EarlyBirdStrategy()
        return OnTimeStrategy()
