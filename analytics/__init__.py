from .courses import courses_by_province, provinces, search_courses
from .leaderboard import update_leaderboard
from .results import (
    build_player_result,
    finish_round,
    hole_breakdown,
    round_summary,
)

__all__ = [
    "build_player_result",
    "courses_by_province",
    "finish_round",
    "hole_breakdown",
    "provinces",
    "round_summary",
    "search_courses",
    "update_leaderboard",
]
