from datetime import datetime
from pydantic import Field, model_validator
from typing import List, Literal, Optional

from .base import BaseGolfModel
from .course import Course
from .exceptions import HoleOutOfRangeError, PlayerNotFoundError, RoundCompleteError
from .hole import Hole
from .player import Player
from .player_result import PlayerResult
from .scoring_type import ScoringType

MIN_STROKES = 1
MAX_STROKES = 15
MAX_PLAYERS = 4


class Round(BaseGolfModel):
    """A round being scored (or already finished) by a group of players."""
    id: Optional[str] = None
    date: Optional[datetime] = None
    course: Course
    players: List[Player] = Field(default_factory=list, max_length=MAX_PLAYERS)
    scoring_type: ScoringType = ScoringType.STABLEFORD
    holes: Literal[9, 18] = 18
    complete: bool = False
    player_results: List[PlayerResult] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_holes_against_course(self):
        if self.course.holes and self.holes > len(self.course.holes):
            raise ValueError(
                f"Round of {self.holes} holes on a course with only "
                f"{len(self.course.holes)} holes"
            )
        for player in self.players:
            if len(player.scores) > self.holes:
                raise ValueError(
                    f"{player.name} has {len(player.scores)} scores for a "
                    f"{self.holes}-hole round"
                )
        return self

    @property
    def holes_in_play(self) -> List[Hole]:
        return self.course.holes[:self.holes]

    @property
    def course_in_play(self) -> Course:
        """The course cut down to the holes being played."""
        if len(self.course.holes) <= self.holes:
            return self.course
        return self.course.model_copy(update={"holes": self.holes_in_play, "par": None})

    def get_player(self, index: int) -> Player:
        """Get a player by position in the group (0-based)."""
        if not 0 <= index < len(self.players):
            raise PlayerNotFoundError(f"No player at position {index}")
        return self.players[index]

    def _hole_for_entry(self, hole_number: int) -> Hole:
        if self.complete:
            raise RoundCompleteError("Round is already complete")
        if not 1 <= hole_number <= self.holes:
            raise HoleOutOfRangeError(f"Hole {hole_number} is not in play (1-{self.holes})")
        hole = self.course.get_hole(hole_number)
        if hole is None:
            raise HoleOutOfRangeError(f"Course has no hole {hole_number}")
        return hole

    def set_score(self, player_index: int, hole_number: int, strokes: int) -> int:
        """Record gross strokes for a hole, clamped to 1-15. Returns the stored value."""
        self._hole_for_entry(hole_number)
        player = self.get_player(player_index)
        value = max(MIN_STROKES, min(MAX_STROKES, strokes))
        scores = list(player.scores)
        if len(scores) < hole_number:
            scores.extend([0] * (hole_number - len(scores)))
        scores[hole_number - 1] = value
        player.scores = scores
        return value

    def adjust_score(self, player_index: int, hole_number: int, delta: int) -> int:
        """Step a hole's score up or down. An unplayed hole starts from its par."""
        hole = self._hole_for_entry(hole_number)
        player = self.get_player(player_index)
        current = 0
        if hole_number <= len(player.scores):
            current = player.scores[hole_number - 1]
        return self.set_score(player_index, hole_number, (current or hole.par) + delta)

    def is_fully_scored(self) -> bool:
        """Check every player has a score on every hole in play."""
        if not self.players:
            return False
        for player in self.players:
            scores = player.scores[:self.holes]
            if len(scores) < self.holes or any(s <= 0 for s in scores):
                return False
        return True
