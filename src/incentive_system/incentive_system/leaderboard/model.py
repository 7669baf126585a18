from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LeaderboardEntry:
    """Read-model: one employee's standing in a period. Never persisted."""

    employee_id: str
    name: str
    avatar_url: str
    total_points: int
    rank: int

    def to_dict(self) -> dict:
        return asdict(self)
