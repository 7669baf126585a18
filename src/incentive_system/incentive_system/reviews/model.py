from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PerformanceReview:
    """Manager review summary owned by the review store.

    Only finalized reviews count towards Employee of the Month.
    """

    review_id: str
    employee_id: str
    period_month: int
    period_year: int
    overall_score: float
    is_finalized: bool = False
