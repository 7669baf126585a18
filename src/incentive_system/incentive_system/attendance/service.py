from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_employee_id
from ..core.constants import EARLY_BIRD_REASON, MAX_EMPLOYEE_ID_LENGTH
from ..core.enums import FIXED_POINT_VALUES, PointType
from ..points.ledger import PointLedger
from ..shifts.repository import ShiftScheduleRepository
from .factory import AttendanceStrategyFactory
from .model import CheckInDecision

logger = logging.getLogger(__name__)


class AttendanceService:
    """Classifies check-ins and triggers the Early Bird award.

    Storing the attendance record itself belongs to the attendance log, not here.
    """

    def __init__(
        self,
        schedules: ShiftScheduleRepository,
        ledger: PointLedger,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._schedules = schedules
        self._ledger = ledger
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._clock = clock or now_local

    def classify(self, employee_id: str, *, now: datetime) -> CheckInDecision:
        schedule = self._schedules.get_for_employee_and_date(employee_id=employee_id, work_date=now.date())
        shift_start = schedule.start_time if schedule else None
        strategy = self._factory.for_checkin(now=now, shift_start=shift_start)
        return strategy.decide_checkin(now=now, shift_start=shift_start)

    def check_in(self, employee_id: str, *, now: datetime | None = None) -> CheckInDecision:
        employee_id = require_employee_id(employee_id, max_length=MAX_EMPLOYEE_ID_LENGTH)
        now = now or self._clock()

        decision = self.classify(employee_id, now=now)
        logger.info("[Attendance] %s checked in at %s: %s", employee_id, now.strftime("%H:%M"), decision.status.value)
        if not decision.early_bird:
            return decision

        tx = self._ledger.append(
            employee_id, FIXED_POINT_VALUES[PointType.EARLY_BIRD], PointType.EARLY_BIRD, EARLY_BIRD_REASON
        )
        return dataclasses.replace(decision, award=tx)
