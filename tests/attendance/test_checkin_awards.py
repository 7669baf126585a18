from __future__ import annotations

from datetime import date, datetime, time

from src.incentive_system.incentive_system.attendance.service import AttendanceService
from src.incentive_system.incentive_system.core.enums import AttendanceStatus, PointType
from src.incentive_system.incentive_system.points.aggregator import PeriodAggregator
from src.incentive_system.incentive_system.shifts.model import ShiftSchedule


def test_early_checkin_appends_early_bird_points(schedules, ledger):
    schedules.add(ShiftSchedule(employee_id="A", work_date=date(2026, 3, 10), start_time=time(8, 0)))
    svc = AttendanceService(schedules, ledger)

    decision = svc.check_in("A", now=datetime(2026, 3, 10, 7, 20))

    assert decision.status == AttendanceStatus.PRESENT
    assert decision.early_bird is True
    assert decision.award is not None
    assert decision.award.type == PointType.EARLY_BIRD
    assert PeriodAggregator(ledger).aggregate("A", 3, 2026) == 2


def test_on_time_and_late_checkins_award_nothing(schedules, ledger):
    schedules.add(ShiftSchedule(employee_id="A", work_date=date(2026, 3, 10), start_time=time(8, 0)))
    svc = AttendanceService(schedules, ledger)

    on_time = svc.check_in("A", now=datetime(2026, 3, 10, 7, 55))
    late = svc.check_in("A", now=datetime(2026, 3, 10, 8, 11))

    assert on_time.status == AttendanceStatus.PRESENT
    assert late.status == AttendanceStatus.LATE
    assert on_time.award is None and late.award is None
    assert len(ledger) == 0


def test_schedule_for_other_day_is_ignored(schedules, ledger):
    schedules.add(ShiftSchedule(employee_id="A", work_date=date(2026, 3, 9), start_time=time(8, 0)))
    svc = AttendanceService(schedules, ledger)

    decision = svc.check_in("A", now=datetime(2026, 3, 10, 6, 0))

    assert decision.status == AttendanceStatus.PRESENT
    assert decision.early_bird is False
    assert len(ledger) == 0


def test_check_in_defaults_to_clock(schedules, ledger, clock):
    clock.now = datetime(2026, 3, 10, 10, 30)
    svc = AttendanceService(schedules, ledger, clock=clock)

    assert svc.check_in("A").status == AttendanceStatus.LATE
