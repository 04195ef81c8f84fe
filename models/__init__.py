from .base import BaseGolfModel
from .course import Course
from .exceptions import HoleOutOfRangeError, PlayerNotFoundError, RoundCompleteError, RoundError
from .hole import Hole
from .leaderboard import LeaderboardEntry
from .player import Player
from .player_result import PlayerResult
from .round import Round
from .scoring_type import ScoringType

__all__ = [
    "BaseGolfModel",
    "Course",
    "Hole",
    "LeaderboardEntry",
    "Player",
    "PlayerResult",
    "Round",
    "ScoringType",
    "RoundError",
    "RoundCompleteError",
    "PlayerNotFoundError",
    "HoleOutOfRangeError",
]
