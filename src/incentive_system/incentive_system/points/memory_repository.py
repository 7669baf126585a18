from __future__ import annotations

from typing import Iterable, Sequence

from .model import PointTransaction
from .repository import LedgerRepository


class InMemoryLedgerRepository(LedgerRepository):
    """Process-local store; used for development and tests."""

    def __init__(self, seed: Iterable[PointTransaction] = ()):
        self._rows: list[PointTransaction] = list(seed)

    def load_ledger(self) -> Sequence[PointTransaction]:
        return tuple(self._rows)

    def append_and_persist(self, transaction: PointTransaction) -> None:
        self._rows.append(transaction)
