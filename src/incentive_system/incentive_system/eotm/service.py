"""Employee of the Month scoring.

final_score = total_points * 0.5 + avg_review_score * 10 * 0.5

Ledger activity and manager-assessed quality are weighted equally on a
comparable scale (a 0-5 review score is scaled x10), so an employee with few
points but excellent reviews can still win.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_int, require_period
from ..core.constants import (
    EOTM_BONUS_REASON,
    EOTM_POINTS_WEIGHT,
    EOTM_REVIEW_SCALE,
    EOTM_REVIEW_WEIGHT,
)
from ..core.enums import PointType
from ..core.exceptions import ValidationError
from ..leaderboard.service import LeaderboardService
from ..points.ledger import PointLedger
from ..points.model import PointTransaction
from ..reviews.model import PerformanceReview
from ..reviews.repository import ReviewRepository
from .model import EOTMResult

logger = logging.getLogger(__name__)


def average_review_score(reviews: Sequence[PerformanceReview], *, month: int, year: int) -> float:
    """Mean overall score of finalized reviews for the period; 0 when there are none."""
    scores = [
        float(r.overall_score)
        for r in reviews
        if r.is_finalized and r.period_month == month and r.period_year == year
    ]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def final_score(total_points: int, avg_review_score: float) -> float:
    return total_points * EOTM_POINTS_WEIGHT + avg_review_score * EOTM_REVIEW_SCALE * EOTM_REVIEW_WEIGHT


class EOTMService:
    def __init__(self, leaderboard: LeaderboardService, reviews: ReviewRepository, ledger: PointLedger):
        self._leaderboard = leaderboard
        self._reviews = reviews
        self._ledger = ledger

    def rank_candidates(self, month: int, year: int) -> list[EOTMResult]:
        """Every leaderboard entry scored, best first.

        Ties on final score go to more ledger points, then to the lower
        employee id.
        """
        month, year = require_period(month, year)
        candidates: list[EOTMResult] = []
        for entry in self._leaderboard.build_leaderboard(month, year):
            reviews = self._reviews.list_for_employee_period(employee_id=entry.employee_id, month=month, year=year)
            avg = average_review_score(reviews, month=month, year=year)
            candidates.append(
                EOTMResult(
                    employee_id=entry.employee_id,
                    name=entry.name,
                    avatar_url=entry.avatar_url,
                    final_score=final_score(entry.total_points, avg),
                    total_points=entry.total_points,
                    avg_review_score=avg,
                )
            )

        candidates.sort(key=lambda c: (-c.final_score, -c.total_points, c.employee_id))
        return candidates

    def compute_eotm(self, month: int, year: int) -> Optional[EOTMResult]:
        candidates = self.rank_candidates(month, year)
        if not candidates:
            logger.info("[EOTM] no ledger activity for %02d/%d", month, year)
            return None
        winner = candidates[0]
        logger.info(
            "[EOTM] %02d/%d winner=%s score=%.2f (points=%d, reviews=%.2f)",
            month,
            year,
            winner.employee_id,
            winner.final_score,
            winner.total_points,
            winner.avg_review_score,
        )
        return winner

    def award_eotm_bonus(self, month: int, year: int, *, points: int) -> Optional[PointTransaction]:
        """Append an EOTM_BONUS for the period winner, at most once per period.

        Like every transaction, the bonus is dated when it is appended, not
        in the period it rewards: awarding March in April credits April's
        totals, bonus and EOTM race.

        Scoring runs outside the ledger lock; only the duplicate check and
        the append are atomic.
        """
        points = require_int(points, "points")
        if points <= 0:
            raise ValidationError("EOTM bonus points must be positive")
        month, year = require_period(month, year)
        reason = EOTM_BONUS_REASON.format(month=month, year=year)

        winner = self.compute_eotm(month, year)
        if winner is None:
            return None

        with self._ledger.transaction():
            already = any(t.type == PointType.EOTM_BONUS and t.reason == reason for t in self._ledger.snapshot())
            if already:
                raise ValidationError(f"EOTM bonus for {month:02d}/{year} was already awarded")
            return self._ledger.append(winner.employee_id, points, PointType.EOTM_BONUS, reason)
