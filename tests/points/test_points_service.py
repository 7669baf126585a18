from __future__ import annotations

from datetime import datetime

import pytest

from src.incentive_system.incentive_system.core.enums import PointType
from src.incentive_system.incentive_system.core.exceptions import ValidationError
from src.incentive_system.incentive_system.points.service import PointsService


def test_task_master_requires_every_task(ledger):
    svc = PointsService(ledger)

    assert svc.award_task_master("A", completed=4, total=5) is None
    assert svc.award_task_master("A", completed=0, total=0) is None

    tx = svc.award_task_master("A", completed=5, total=5)
    assert tx is not None
    assert tx.type == PointType.TASK_MASTER
    assert tx.amount == 3
    assert len(ledger) == 1


def test_perfect_audit_only_for_score_five(ledger):
    svc = PointsService(ledger)

    assert svc.award_perfect_audit("A", overall_score=4.9) is None
    tx = svc.award_perfect_audit("A", overall_score=5.0)

    assert tx.type == PointType.PERFECT_AUDIT
    assert tx.amount == 5


def test_adjust_requires_reason_and_non_zero_amount(ledger):
    svc = PointsService(ledger)

    with pytest.raises(ValidationError):
        svc.adjust("A", 0, "nothing")
    with pytest.raises(ValidationError):
        svc.adjust("A", -2, "  ")

    tx = svc.adjust("A", -2, "Broke a plate")
    assert tx.type == PointType.MANUAL_ADJUSTMENT
    assert svc.get_employee_points("A", 3, 2026) == -2


def test_history_is_newest_first_and_filtered_by_period(ledger, clock):
    svc = PointsService(ledger)
    first = svc.adjust("A", 1, "one")
    clock.advance(hours=1)
    second = svc.adjust("A", 2, "two")
    clock.now = datetime(2026, 4, 1, 9, 0)
    april = svc.adjust("A", 3, "three")

    assert svc.history("A") == [april, second, first]
    assert svc.history("A", month=3, year=2026) == [second, first]


@pytest.mark.parametrize("point_type", [PointType.EOTM_BONUS, "EOTM_BONUS", " eotm_bonus "])
def test_record_refuses_eotm_bonus(ledger, point_type):
    with pytest.raises(ValidationError):
        PointsService(ledger).record("B", 50, point_type, "Employee of the Month 03/2026")
    assert len(ledger) == 0


def test_record_appends_other_types(ledger):
    tx = PointsService(ledger).record("A", -4, "MANUAL_ADJUSTMENT", "late twice")
    assert tx.type == PointType.MANUAL_ADJUSTMENT
    assert ledger.transactions("A") == (tx,)
