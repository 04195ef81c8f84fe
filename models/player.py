from pydantic import Field
from typing import Annotated, List

from .base import BaseGolfModel

# 0 marks a hole that has not been played yet.
GrossScore = Annotated[int, Field(ge=0, le=15)]


class Player(BaseGolfModel):
    """A golfer in a round with their raw handicap and gross scores per hole."""
    name: str = Field(..., min_length=1)
    handicap: float = Field(0.0, ge=0)
    scores: List[GrossScore] = Field(default_factory=list)

    @property
    def holes_played(self) -> int:
        return sum(1 for s in self.scores if s > 0)
