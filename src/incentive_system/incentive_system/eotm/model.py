from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class EOTMResult:
    """Employee of the Month candidate with the inputs of its score."""

    employee_id: str
    name: str
    avatar_url: str
    final_score: float
    total_points: int = 0
    avg_review_score: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)
