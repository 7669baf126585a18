from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Mapping, Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_EARLY_BIRD_MINUTES, DEFAULT_LATE_TOLERANCE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .eotm.service import EOTMService
from .leaderboard.service import LeaderboardService
from .payroll.bonus_config import BonusRateConfig
from .payroll.service import BonusService
from .points.aggregator import PeriodAggregator
from .points.ledger import PointLedger
from .points.mysql_point_repository import MySQLPointRepository
from .points.repository import LedgerRepository
from .points.service import PointsService
from .reviews.mysql_review_repository import MySQLReviewRepository
from .reviews.repository import ReviewRepository
from .shifts.mysql_schedule_repository import MySQLShiftScheduleRepository
from .shifts.repository import ShiftScheduleRepository


@dataclass(frozen=True)
class Container:
    """Explicit object graph: one ledger, injected into every service that needs it."""

    employees_repo: EmployeeRepository
    schedules_repo: ShiftScheduleRepository
    reviews_repo: ReviewRepository

    ledger: PointLedger
    aggregator: PeriodAggregator
    bonus_rates: BonusRateConfig

    points_service: PointsService
    attendance_service: AttendanceService
    bonus_service: BonusService
    leaderboard_service: LeaderboardService
    eotm_service: EOTMService


def wire_container(
    *,
    employees: EmployeeRepository,
    schedules: ShiftScheduleRepository,
    reviews: ReviewRepository,
    ledger_repo: Optional[LedgerRepository] = None,
    bonus_rates: Optional[Mapping] = None,
    late_tolerance_minutes: int = DEFAULT_LATE_TOLERANCE_MINUTES,
    early_bird_minutes: int = DEFAULT_EARLY_BIRD_MINUTES,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    ledger = PointLedger(ledger_repo, clock=clock)
    aggregator = PeriodAggregator(ledger)
    rates = BonusRateConfig(bonus_rates)

    leaderboard_service = LeaderboardService(aggregator, employees)
    attendance_service = AttendanceService(
        schedules,
        ledger,
        strategy_factory=AttendanceStrategyFactory(
            late_tolerance_minutes=int(late_tolerance_minutes),
            early_bird_minutes=int(early_bird_minutes),
        ),
        clock=clock,
    )

    return Container(
        employees_repo=employees,
        schedules_repo=schedules,
        reviews_repo=reviews,
        ledger=ledger,
        aggregator=aggregator,
        bonus_rates=rates,
        points_service=PointsService(ledger, aggregator),
        attendance_service=attendance_service,
        bonus_service=BonusService(aggregator, employees, rates),
        leaderboard_service=leaderboard_service,
        eotm_service=EOTMService(leaderboard_service, reviews, ledger),
    )


def build_container(*, db_config: dict, **options) -> Container:
    """MySQL-backed container; `options` are forwarded to wire_container."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire_container(
        employees=MySQLEmployeeRepository(conn),
        schedules=MySQLShiftScheduleRepository(conn),
        reviews=MySQLReviewRepository(conn),
        ledger_repo=MySQLPointRepository(conn),
        **options,
    )
