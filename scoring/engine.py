"""Handicap-adjusted scoring for a round of golf.

Every function here is pure: it reads the player and course it is given and
returns a freshly computed value. Inputs are trusted, so nothing raises.
"""
from __future__ import annotations

import math
from typing import Iterable, List, Optional

from models.course import Course
from models.player import Player
from models.scoring_type import ScoringType

PLAYING_HANDICAP_ALLOWANCE = 0.95
STANDARD_SLOPE = 113
HOLES_PER_ALLOCATION = 18

# Keyed by net score relative to par. Diffs outside the table are clamped.
STABLEFORD_POINTS = {
    -3: 5,
    -2: 4,
    -1: 3,
    0: 2,
    1: 1,
    2: 0,
}

# Keyed by gross score relative to par. Anything over +3 is rendered as "+N".
SCORE_LABELS = {
    -3: "Albatross",
    -2: "Eagle",
    -1: "Birdie",
    0: "Par",
    1: "Bogey",
    2: "Double",
    3: "Triple",
}

SCORE_CLASSES = {
    -2: "score-eagle",
    -1: "score-birdie",
    0: "score-par",
    1: "score-bogey",
    2: "score-double",
    3: "score-worse",
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(diff: int, table: dict) -> int:
    return max(min(table), min(max(table), diff))


def _holes_in_range(player: Player, course: Course):
    """Pair each gross score with its hole, dropping scores past the last hole."""
    return zip(player.scores, course.holes)


def playing_handicap(raw_handicap: float) -> int:
    """Playing handicap: 95% of the raw handicap, rounded half up."""
    return _round_half_up(raw_handicap * PLAYING_HANDICAP_ALLOWANCE)


def course_handicap(
    handicap_index: float,
    slope: float,
    course_rating: float,
    par: int,
) -> int:
    """Slope/rating course handicap.

    Alternate model kept for callers that rate by tee. The aggregates below
    always use playing_handicap() and never this value.
    """
    return _round_half_up(handicap_index * slope / STANDARD_SLOPE + (course_rating - par))


def handicap_strokes_on_hole(playing_hcp: int, stroke_index: int) -> int:
    """Strokes received on a hole: one per full 18, plus one on the hardest remaining holes."""
    if playing_hcp <= 0:
        return 0
    full_rounds, remainder = divmod(playing_hcp, HOLES_PER_ALLOCATION)
    return full_rounds + (1 if stroke_index <= remainder else 0)


def stableford_points(gross: int, par: int, handicap_strokes: int) -> Optional[int]:
    """Stableford points for a hole, or None when the hole has not been played."""
    if gross <= 0:
        return None
    diff = gross - handicap_strokes - par
    return STABLEFORD_POINTS[_clamp(diff, STABLEFORD_POINTS)]


def score_label(gross: int, par: int) -> str:
    diff = gross - par
    if diff > max(SCORE_LABELS):
        return f"+{diff}"
    return SCORE_LABELS[_clamp(diff, SCORE_LABELS)]


def score_class(gross: int, par: int) -> str:
    """Style tag for a gross score. Eagle and better share one tag."""
    return SCORE_CLASSES[_clamp(gross - par, SCORE_CLASSES)]


def total_gross(player: Player) -> int:
    """Sum of recorded gross scores. Unplayed holes count as 0."""
    return sum(player.scores)


def total_stableford(player: Player, course: Course) -> int:
    phcp = playing_handicap(player.handicap)
    total = 0
    for gross, hole in _holes_in_range(player, course):
        strokes = handicap_strokes_on_hole(phcp, hole.stroke_index)
        total += stableford_points(gross, hole.par, strokes) or 0
    return total


def to_par(player: Player, course: Course) -> Optional[int]:
    """Gross score relative to the par of the holes covered by the score list.

    Returns None before any score has been recorded.
    """
    if not player.scores:
        return None
    par = sum(hole.par for _, hole in _holes_in_range(player, course))
    return total_gross(player) - par


def net_score(player: Player, course: Course) -> int:
    """Gross minus the handicap strokes allocated on each in-range hole."""
    phcp = playing_handicap(player.handicap)
    return sum(
        gross - handicap_strokes_on_hole(phcp, hole.stroke_index)
        for gross, hole in _holes_in_range(player, course)
    )


def rank_players(
    players: Iterable[Player],
    course: Course,
    scoring_type: ScoringType,
) -> List[Player]:
    """
    Order players for a leaderboard without touching the input.

    - Stableford: most points first
    - Stroke play: lowest net score first
    - Ties: player name, case-insensitive, then input order
    """
    if scoring_type == ScoringType.STABLEFORD:
        def key(player):
            return (-total_stableford(player, course), player.name.casefold())
    else:
        def key(player):
            return (net_score(player, course), player.name.casefold())
    return sorted(players, key=key)
