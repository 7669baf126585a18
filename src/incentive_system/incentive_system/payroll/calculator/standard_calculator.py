from __future__ import annotations

from typing import Optional

from ...core.enums import EmploymentCategory
from ..bonus_config import BonusRateConfig
from .base import BonusCalculator


class StandardBonusCalculator(BonusCalculator):
    """Standard rule: total_points * category rate, nothing for totals <= 0."""

    def __init__(self, rates: BonusRateConfig):
        self._rates = rates

    def bonus_for(self, total_points: int, category: Optional[EmploymentCategory]) -> float | int:
        if total_points <= 0:
            return 0
        return total_points * self._rates.rate_for(category)
