from .engine import (
    course_handicap,
    handicap_strokes_on_hole,
    net_score,
    playing_handicap,
    rank_players,
    score_class,
    score_label,
    stableford_points,
    to_par,
    total_gross,
    total_stableford,
)

__all__ = [
    "playing_handicap",
    "course_handicap",
    "handicap_strokes_on_hole",
    "stableford_points",
    "score_label",
    "score_class",
    "total_stableford",
    "total_gross",
    "to_par",
    "net_score",
    "rank_players",
]
