from __future__ import annotations

from ..common.datetime_utils import in_period
from ..common.validators import require_period
from .ledger import PointLedger


class PeriodAggregator:
    """Sums ledger amounts per calendar month, on demand.

    Periods are matched against each transaction's stored local `date`.
    Nothing is cached, so results always reflect the current ledger.
    """

    def __init__(self, ledger: PointLedger):
        self._ledger = ledger

    def aggregate(self, employee_id: str, month: int, year: int) -> int:
        month, year = require_period(month, year)
        return sum(
            t.amount
            for t in self._ledger.snapshot()
            if t.employee_id == employee_id and in_period(t.date, month=month, year=year)
        )

    def totals_by_employee(self, month: int, year: int) -> dict[str, int]:
        month, year = require_period(month, year)
        totals: dict[str, int] = {}
        for t in self._ledger.snapshot():
            if in_period(t.date, month=month, year=year):
                totals[t.employee_id] = totals.get(t.employee_id, 0) + t.amount
        return totals
