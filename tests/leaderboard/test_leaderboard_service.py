from __future__ import annotations

from datetime import datetime

from src.incentive_system.incentive_system.core.constants import PLACEHOLDER_AVATAR_URL
from src.incentive_system.incentive_system.core.enums import PointType
from src.incentive_system.incentive_system.leaderboard.service import LeaderboardService
from src.incentive_system.incentive_system.points.aggregator import PeriodAggregator


def _board(ledger, employees, month=3, year=2026):
    return LeaderboardService(PeriodAggregator(ledger), employees).build_leaderboard(month, year)


def test_leaderboard_sorted_with_gapless_ranks(ledger, employees):
    ledger.append("A", 2, PointType.EARLY_BIRD, "x")
    ledger.append("B", 5, PointType.PERFECT_AUDIT, "x")
    ledger.append("B", 3, PointType.TASK_MASTER, "x")
    ledger.append("C", 3, PointType.TASK_MASTER, "x")

    board = _board(ledger, employees)

    assert [(e.employee_id, e.total_points, e.rank) for e in board] == [("B", 8, 1), ("C", 3, 2), ("A", 2, 3)]
    assert board[0].name == "Budi"
    assert board[0].avatar_url == "https://img/b.png"


def test_equal_totals_ordered_by_employee_id(ledger, employees):
    # Append order deliberately opposite to id order.
    ledger.append("C", 3, PointType.TASK_MASTER, "x")
    ledger.append("B", 3, PointType.TASK_MASTER, "x")
    ledger.append("A", 3, PointType.TASK_MASTER, "x")

    board = _board(ledger, employees)

    assert [e.employee_id for e in board] == ["A", "B", "C"]
    assert [e.rank for e in board] == [1, 2, 3]


def test_unknown_employee_gets_placeholder_identity(ledger, employees):
    ledger.append("ghost", 2, PointType.EARLY_BIRD, "x")
    ledger.append("C", 2, PointType.EARLY_BIRD, "x")

    board = _board(ledger, employees)
    by_id = {e.employee_id: e for e in board}

    assert by_id["ghost"].name == "Unknown"
    assert by_id["ghost"].avatar_url == PLACEHOLDER_AVATAR_URL
    assert by_id["C"].avatar_url == PLACEHOLDER_AVATAR_URL


def test_leaderboard_only_counts_the_period(ledger, employees, clock):
    ledger.append("A", 2, PointType.EARLY_BIRD, "march")
    clock.now = datetime(2026, 4, 3, 7, 0)
    ledger.append("B", 3, PointType.TASK_MASTER, "april")

    assert [e.employee_id for e in _board(ledger, employees, 3, 2026)] == ["A"]
    assert [e.employee_id for e in _board(ledger, employees, 4, 2026)] == ["B"]
    assert _board(ledger, employees, 5, 2026) == []


def test_negative_totals_still_ranked(ledger, employees):
    ledger.append("A", -3, PointType.MANUAL_ADJUSTMENT, "x")
    ledger.append("B", 2, PointType.EARLY_BIRD, "x")

    board = _board(ledger, employees)
    assert [(e.employee_id, e.total_points) for e in board] == [("B", 2), ("A", -3)]


def test_leaderboard_is_idempotent(ledger, employees):
    ledger.append("A", 2, PointType.EARLY_BIRD, "x")
    ledger.append("B", 2, PointType.EARLY_BIRD, "x")
    assert _board(ledger, employees) == _board(ledger, employees)
