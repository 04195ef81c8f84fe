from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class LeaderboardEntry(BaseGolfModel):
    """Running totals for one player across finished rounds."""
    name: str = Field(..., min_length=1)
    handicap: float = Field(0.0, ge=0)
    rounds: int = Field(0, ge=0)
    total_points: int = 0
    best_points: int = 0
    best_net: Optional[int] = None

    @property
    def average_points(self) -> Optional[float]:
        if not self.rounds:
            return None
        return self.total_points / self.rounds
