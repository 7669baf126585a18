from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, time
from typing import Optional

from ..model import CheckInDecision


class CheckInStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a check-in status."""

    @abstractmethod
    def decide_checkin(self, *, now: datetime, shift_start: Optional[time]) -> CheckInDecision:
        raise NotImplementedError
