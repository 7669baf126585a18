from __future__ import annotations

from typing import Sequence

from ..core.enums import PointType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, query_all
from .model import PointTransaction
from .repository import LedgerRepository


class MySQLPointRepository(LedgerRepository):
    """Insert-only store; `seq` keeps the append order across restarts."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_ledger(self) -> Sequence[PointTransaction]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT transaction_id, employee_id, amount, point_type, reason, created_at, tx_date
            FROM point_transactions
            ORDER BY seq
            """,
        )
        return [
            PointTransaction(
                transaction_id=str(r["transaction_id"]),
                employee_id=str(r["employee_id"]),
                amount=int(r["amount"]),
                type=PointType(r["point_type"]),
                reason=r.get("reason") or "",
                timestamp=r["created_at"],
                date=r["tx_date"],
            )
            for r in rows
        ]

    def append_and_persist(self, transaction: PointTransaction) -> None:
        execute(
            self._conn_factory,
            """
            INSERT INTO point_transactions(transaction_id, employee_id, amount, point_type, reason, created_at, tx_date)
            VALUES(%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                transaction.transaction_id,
                transaction.employee_id,
                int(transaction.amount),
                transaction.type.value,
                transaction.reason,
                transaction.timestamp,
                transaction.date,
            ),
        )
