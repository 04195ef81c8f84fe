from pydantic import BaseModel, ConfigDict, Field
from typing import List


class PlayerResult(BaseModel):
    """Snapshot of a player's finished round. Never changes after creation."""
    model_config = ConfigDict(frozen=True)

    name: str
    handicap: float
    stableford: int
    gross: int
    net: int
    to_par: int
    front_nine: int
    back_nine: int
    scores: List[int] = Field(default_factory=list)
