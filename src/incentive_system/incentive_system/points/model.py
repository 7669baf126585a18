from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import PointType


@dataclass(frozen=True)
class PointTransaction:
    """One immutable point-awarding event in the ledger."""

    transaction_id: str
    employee_id: str
    amount: int
    type: PointType
    reason: str
    timestamp: datetime
    date: date

    def to_dict(self) -> dict:
        return {
            "id": self.transaction_id,
            "employee_id": self.employee_id,
            "amount": self.amount,
            "type": self.type.value,
            "reason": self.reason,
            "timestamp": self.timestamp.isoformat(),
            "date": self.date.isoformat(),
        }
