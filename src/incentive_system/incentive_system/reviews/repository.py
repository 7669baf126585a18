from __future__ import annotations

from typing import Protocol, Sequence

from .model import PerformanceReview


class ReviewRepository(Protocol):
    """Source of performance reviews consumed by the EOTM scorer."""

    def list_for_employee_period(self, *, employee_id: str, month: int, year: int) -> Sequence[PerformanceReview]:
        raise NotImplementedError
