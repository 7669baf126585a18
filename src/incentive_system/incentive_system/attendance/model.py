from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus
from ..points.model import PointTransaction


@dataclass(frozen=True)
class CheckInDecision:
    """Outcome of classifying one check-in."""

    status: AttendanceStatus
    early_bird: bool = False
    note: Optional[str] = None
    award: Optional[PointTransaction] = None

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "early_bird": self.early_bird,
            "note": self.note,
            "award": self.award.to_dict() if self.award else None,
        }
