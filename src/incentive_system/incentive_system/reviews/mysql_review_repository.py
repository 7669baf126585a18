from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_all
from .model import PerformanceReview
from .repository import ReviewRepository


class MySQLReviewRepository(ReviewRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee_period(self, *, employee_id: str, month: int, year: int) -> Sequence[PerformanceReview]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT review_id, employee_id, period_month, period_year, overall_score, is_finalized
            FROM performance_reviews
            WHERE employee_id=%s AND period_month=%s AND period_year=%s
            ORDER BY review_id
            """,
            (str(employee_id), int(month), int(year)),
        )
        return [
            PerformanceReview(
                review_id=str(r["review_id"]),
                employee_id=str(r["employee_id"]),
                period_month=int(r["period_month"]),
                period_year=int(r["period_year"]),
                overall_score=float(r["overall_score"]),
                is_finalized=bool(r["is_finalized"]),
            )
            for r in rows
        ]
