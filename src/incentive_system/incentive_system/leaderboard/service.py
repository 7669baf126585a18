from __future__ import annotations

from ..core.constants import PLACEHOLDER_AVATAR_URL, UNKNOWN_EMPLOYEE_NAME
from ..employees.repository import EmployeeRepository
from ..points.aggregator import PeriodAggregator
from .model import LeaderboardEntry


class LeaderboardService:
    def __init__(self, aggregator: PeriodAggregator, employees: EmployeeRepository):
        self._aggregator = aggregator
        self._employees = employees

    def build_leaderboard(self, month: int, year: int) -> list[LeaderboardEntry]:
        """Rank everyone with ledger activity in the period.

        Order is total points descending, then employee id ascending, so
        equal totals always come out in the same order. Ranks run 1..N
        without gaps.
        """
        totals = self._aggregator.totals_by_employee(month, year)
        ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))

        board: list[LeaderboardEntry] = []
        for rank, (employee_id, points) in enumerate(ordered, start=1):
            employee = self._employees.get_by_id(employee_id)
            board.append(
                LeaderboardEntry(
                    employee_id=employee_id,
                    name=employee.name if employee else UNKNOWN_EMPLOYEE_NAME,
                    avatar_url=(employee.avatar_url if employee else None) or PLACEHOLDER_AVATAR_URL,
                    total_points=points,
                    rank=rank,
                )
            )
        return board
