from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.enums import EmploymentCategory


class BonusCalculator(ABC):
    """Calculator interface (Strategy Pattern for incentive bonuses)."""

    @abstractmethod
    def bonus_for(self, total_points: int, category: Optional[EmploymentCategory]) -> float | int:
        raise NotImplementedError
