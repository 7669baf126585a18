from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.incentive_system.incentive_system.core.enums import EmploymentCategory
from src.incentive_system.incentive_system.employees.model import Employee
from src.incentive_system.incentive_system.points.ledger import PointLedger
from src.incentive_system.incentive_system.points.memory_repository import InMemoryLedgerRepository
from src.incentive_system.incentive_system.reviews.model import PerformanceReview
from src.incentive_system.incentive_system.shifts.model import ShiftSchedule


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@dataclass
class InMemoryEmployees:
    employees_by_id: dict[str, Employee] = field(default_factory=dict)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.employees_by_id.get(employee_id)


@dataclass
class InMemorySchedules:
    by_employee_date: dict[tuple[str, date], ShiftSchedule] = field(default_factory=dict)

    def add(self, schedule: ShiftSchedule) -> None:
        self.by_employee_date[(schedule.employee_id, schedule.work_date)] = schedule

    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[ShiftSchedule]:
        return self.by_employee_date.get((employee_id, work_date))


@dataclass
class InMemoryReviews:
    reviews: list[PerformanceReview] = field(default_factory=list)
    calls: int = 0

    def list_for_employee_period(self, *, employee_id: str, month: int, year: int):
        self.calls += 1
        return [
            r
            for r in self.reviews
            if r.employee_id == employee_id and r.period_month == month and r.period_year == year
        ]


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 3, 10, 8, 0, 0))


@pytest.fixture
def ledger_repo() -> InMemoryLedgerRepository:
    return InMemoryLedgerRepository()


@pytest.fixture
def ledger(ledger_repo, clock) -> PointLedger:
    return PointLedger(ledger_repo, clock=clock)


@pytest.fixture
def employees() -> InMemoryEmployees:
    return InMemoryEmployees(
        {
            "A": Employee(employee_id="A", name="Ayu", avatar_url="https://img/a.png", category=EmploymentCategory.PERMANENT),
            "B": Employee(employee_id="B", name="Budi", avatar_url="https://img/b.png", category=EmploymentCategory.PROBATION),
            "C": Employee(employee_id="C", name="Citra", avatar_url=None, category=EmploymentCategory.DAILY_WORKER),
            "D": Employee(employee_id="D", name="Dewi", avatar_url=None, category=None),
        }
    )


@pytest.fixture
def schedules() -> InMemorySchedules:
    return InMemorySchedules()


@pytest.fixture
def reviews() -> InMemoryReviews:
    return InMemoryReviews()
