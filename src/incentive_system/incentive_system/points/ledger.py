"""Append-only point ledger.

The ledger is the single source of truth for incentive data. Every other
number (period totals, bonuses, leaderboards, EOTM) is recomputed from it.
"""
from __future__ import annotations

import logging
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_employee_id, require_int, require_max_length
from ..core.constants import MAX_EMPLOYEE_ID_LENGTH, MAX_REASON_LENGTH
from ..core.enums import PointType
from ..core.exceptions import ValidationError
from .memory_repository import InMemoryLedgerRepository
from .model import PointTransaction
from .repository import LedgerRepository

logger = logging.getLogger(__name__)


def _coerce_point_type(value) -> PointType:
    if isinstance(value, PointType):
        return value
    try:
        return PointType(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Unknown point type: {value!r}") from None


class PointLedger:
    """Append-only sequence of point transactions.

    Appends are serialized by one writer lock and reads snapshot under the
    same lock, so a reader sees every append that completed before it
    started and none that started after.
    """

    def __init__(
        self,
        repository: Optional[LedgerRepository] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._repository = repository if repository is not None else InMemoryLedgerRepository()
        self._clock = clock or now_local
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._lock = threading.RLock()
        self._transactions: list[PointTransaction] = list(self._repository.load_ledger())
        self._last_timestamp: Optional[datetime] = max(
            (t.timestamp for t in self._transactions), default=None
        )

    @contextmanager
    def transaction(self) -> Iterator["PointLedger"]:
        """Hold the writer lock across a read-then-append sequence."""
        with self._lock:
            yield self

    def append(self, employee_id: str, amount: int, point_type: PointType | str, reason: str) -> PointTransaction:
        try:
            employee_id = require_employee_id(employee_id, max_length=MAX_EMPLOYEE_ID_LENGTH)
            amount = require_int(amount, "amount")
            point_type = _coerce_point_type(point_type)
            if not isinstance(reason, str):
                raise ValidationError("reason must be a string")
            reason = require_max_length(reason.strip(), "reason", max_length=MAX_REASON_LENGTH)
            fixed = point_type.fixed_amount
            if fixed is not None and amount != fixed:
                raise ValidationError(f"{point_type.value} is always worth {fixed} points, got {amount}")
        except ValidationError as exc:
            logger.warning("[Ledger] rejected append for %r: %s", employee_id, exc)
            raise

        with self._lock:
            timestamp = self._clock()
            if self._last_timestamp is not None and timestamp < self._last_timestamp:
                timestamp = self._last_timestamp
            tx = PointTransaction(
                transaction_id=self._id_factory(),
                employee_id=employee_id,
                amount=amount,
                type=point_type,
                reason=reason,
                timestamp=timestamp,
                date=timestamp.date(),
            )
            self._repository.append_and_persist(tx)
            self._transactions.append(tx)
            self._last_timestamp = timestamp

        logger.info(
            "[Ledger] %s %+d for %s (%s) id=%s",
            tx.type.value,
            tx.amount,
            tx.employee_id,
            tx.reason,
            tx.transaction_id,
        )
        return tx

    def snapshot(self) -> tuple[PointTransaction, ...]:
        with self._lock:
            return tuple(self._transactions)

    def transactions(self, employee_id: Optional[str] = None) -> Sequence[PointTransaction]:
        """Audit history in append order, optionally for one employee."""
        items = self.snapshot()
        if employee_id is None:
            return items
        return tuple(t for t in items if t.employee_id == employee_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
