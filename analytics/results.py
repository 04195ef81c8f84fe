from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from models.course import Course
from models.exceptions import RoundCompleteError
from models.player import Player
from models.player_result import PlayerResult
from models.round import Round
from models.scoring_type import ScoringType
from scoring.engine import (
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

logger = logging.getLogger(__name__)


def build_player_result(player: Player, course: Course) -> PlayerResult:
    """Freeze a player's round into a result snapshot."""
    relative = to_par(player, course)
    return PlayerResult(
        name=player.name,
        handicap=player.handicap,
        stableford=total_stableford(player, course),
        gross=total_gross(player),
        net=net_score(player, course),
        to_par=relative if relative is not None else 0,
        front_nine=sum(player.scores[:9]),
        back_nine=sum(player.scores[9:18]),
        scores=list(player.scores),
    )


def _ranked_results(round_obj: Round) -> List[PlayerResult]:
    """Results for the holes in play, best first under the round's scoring type."""
    course = round_obj.course_in_play
    players = [
        p.model_copy(update={"scores": p.scores[:round_obj.holes]})
        for p in round_obj.players
    ]
    ranked = rank_players(players, course, round_obj.scoring_type)
    return [build_player_result(player, course) for player in ranked]


def finish_round(round_obj: Round) -> Round:
    """
    Complete a round and attach ranked player results.

    The given round is left untouched; a completed copy is returned with
    player_results ordered by the round's scoring type. Only the holes in
    play are scored.
    """
    if round_obj.complete:
        raise RoundCompleteError("Round is already complete")

    results = _ranked_results(round_obj)
    finished = round_obj.model_copy(
        deep=True,
        update={"complete": True, "player_results": results},
    )
    if results:
        logger.info(
            "Finished round %s on %s: %s wins (%s)",
            round_obj.id or "<unsaved>",
            round_obj.course.name or "<unnamed course>",
            results[0].name,
            round_obj.scoring_type.value,
        )
    return finished


def hole_breakdown(player: Player, course: Course) -> List[Dict[str, Any]]:
    """
    Per-hole scoring detail for a player.

    Output rows:
    - hole, par, stroke_index
    - gross: recorded strokes (0 = not played)
    - handicap_strokes: strokes received on the hole
    - net, points, label, css_class: None when the hole is not played
    """
    phcp = playing_handicap(player.handicap)
    rows: List[Dict[str, Any]] = []
    for gross, hole in zip(player.scores, course.holes):
        strokes = handicap_strokes_on_hole(phcp, hole.stroke_index)
        played = gross > 0
        rows.append(
            {
                "hole": hole.number,
                "par": hole.par,
                "stroke_index": hole.stroke_index,
                "gross": gross,
                "handicap_strokes": strokes,
                "net": gross - strokes if played else None,
                "points": stableford_points(gross, hole.par, strokes),
                "label": score_label(gross, hole.par) if played else None,
                "css_class": score_class(gross, hole.par) if played else None,
            }
        )
    return rows


def _ranking_value(result: PlayerResult, scoring_type: ScoringType) -> int:
    if scoring_type == ScoringType.STABLEFORD:
        return result.stableford
    return result.net


def round_summary(round_obj: Round) -> List[Dict[str, Any]]:
    """
    Ranked result rows for a round, finished or still in progress.

    Players level on the ranking value share a position.
    """
    results = round_obj.player_results
    if not round_obj.complete:
        results = _ranked_results(round_obj)

    rows: List[Dict[str, Any]] = []
    position = 0
    previous: Optional[int] = None
    for index, result in enumerate(results, start=1):
        value = _ranking_value(result, round_obj.scoring_type)
        if value != previous:
            position = index
            previous = value
        rows.append(
            {
                "position": position,
                "name": result.name,
                "stableford": result.stableford,
                "gross": result.gross,
                "net": result.net,
                "to_par": result.to_par,
            }
        )
    return rows
