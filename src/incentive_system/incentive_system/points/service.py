from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import in_period
from ..common.validators import require_int, require_non_empty, require_non_negative_number, require_period
from ..core.constants import PERFECT_AUDIT_REASON, PERFECT_AUDIT_SCORE, TASK_MASTER_REASON
from ..core.enums import FIXED_POINT_VALUES, PointType
from ..core.exceptions import ValidationError
from .aggregator import PeriodAggregator
from .ledger import PointLedger
from .model import PointTransaction

logger = logging.getLogger(__name__)


class PointsService:
    """Award operations triggered by jobdesk, audits and HR."""

    def __init__(self, ledger: PointLedger, aggregator: Optional[PeriodAggregator] = None):
        self._ledger = ledger
        self._aggregator = aggregator or PeriodAggregator(ledger)

    def record(self, employee_id: str, amount: int, point_type: PointType | str, reason: str) -> PointTransaction:
        """Generic append for callers outside the award flows.

        EOTM_BONUS is refused here; it is only written by the EOTM award,
        which enforces one bonus per period.
        """
        raw = point_type.value if isinstance(point_type, PointType) else point_type
        if isinstance(raw, str) and raw.strip().upper() == PointType.EOTM_BONUS.value:
            logger.warning("[Points] refused direct EOTM_BONUS append for %r", employee_id)
            raise ValidationError("EOTM_BONUS can only be granted through the EOTM award")
        return self._ledger.append(employee_id, amount, point_type, reason)

    def award_task_master(self, employee_id: str, *, completed: int, total: int) -> Optional[PointTransaction]:
        """All-or-nothing: points only when every daily task is done."""
        completed = require_int(completed, "completed")
        total = require_int(total, "total")
        if total <= 0 or completed < total:
            logger.info("[Points] %s completed %d/%d tasks, no Task Master award", employee_id, completed, total)
            return None
        return self._ledger.append(
            employee_id, FIXED_POINT_VALUES[PointType.TASK_MASTER], PointType.TASK_MASTER, TASK_MASTER_REASON
        )

    def award_perfect_audit(self, employee_id: str, *, overall_score: float) -> Optional[PointTransaction]:
        overall_score = require_non_negative_number(overall_score, "overall_score")
        if overall_score != PERFECT_AUDIT_SCORE:
            return None
        return self._ledger.append(
            employee_id, FIXED_POINT_VALUES[PointType.PERFECT_AUDIT], PointType.PERFECT_AUDIT, PERFECT_AUDIT_REASON
        )

    def adjust(self, employee_id: str, amount: int, reason: str) -> PointTransaction:
        """Manual HR correction; may be negative."""
        amount = require_int(amount, "amount")
        if amount == 0:
            raise ValidationError("adjustment amount must not be zero")
        reason = require_non_empty(reason, "reason")
        return self._ledger.append(employee_id, amount, PointType.MANUAL_ADJUSTMENT, reason)

    def get_employee_points(self, employee_id: str, month: int, year: int) -> int:
        return self._aggregator.aggregate(employee_id, month, year)

    def history(
        self,
        employee_id: str,
        *,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Sequence[PointTransaction]:
        """Newest first, optionally limited to one period."""
        items = list(self._ledger.transactions(employee_id))
        if month is not None or year is not None:
            month, year = require_period(month, year)
            items = [t for t in items if in_period(t.date, month=month, year=year)]
        items.reverse()
        return items
