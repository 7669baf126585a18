from __future__ import annotations

from typing import Protocol, Sequence

from .model import PointTransaction


class LedgerRepository(Protocol):
    """Durable storage behind the point ledger.

    Implementations only ever insert; there is no update or delete.
    """

    def load_ledger(self) -> Sequence[PointTransaction]:
        """All stored transactions in append order."""
        raise NotImplementedError

    def append_and_persist(self, transaction: PointTransaction) -> None:
        raise NotImplementedError
