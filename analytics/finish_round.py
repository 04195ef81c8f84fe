"""Finish a scored round from a JSON file and print the results table.

    python -m analytics.finish_round data/sample_round.json
    python -m analytics.finish_round data/sample_round.json --scoring-type strokeplay --holes
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from analytics.results import finish_round, hole_breakdown, round_summary
from models.exceptions import RoundError
from models.round import Round
from models.scoring_type import ScoringType

logger = logging.getLogger(__name__)


# --- Configuration ---

def _default_scoring_type() -> ScoringType:
    value = os.environ.get("GOLF_SCORING_TYPE", ScoringType.STABLEFORD.value)
    try:
        return ScoringType(value.strip().lower())
    except ValueError:
        logger.warning("Unknown GOLF_SCORING_TYPE %r; using stableford", value)
        return ScoringType.STABLEFORD


def _configure_logging() -> None:
    level = os.environ.get("GOLF_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Finish a golf round stored as JSON and print the ranked results."
    )
    parser.add_argument("round_file", type=Path, help="Path to the round JSON file")
    parser.add_argument(
        "--scoring-type",
        choices=[t.value for t in ScoringType],
        default=None,
        help="Override the round's scoring type",
    )
    parser.add_argument(
        "--holes",
        action="store_true",
        help="Also print the hole-by-hole breakdown for each player",
    )
    return parser.parse_args(argv)


# --- Loading ---

def load_round(path: Path, scoring_type: Optional[ScoringType] = None) -> Round:
    """Read and validate a round file. Falls back to GOLF_SCORING_TYPE when unset."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    if scoring_type is not None:
        data["scoring_type"] = scoring_type.value
    elif "scoring_type" not in data:
        data["scoring_type"] = _default_scoring_type().value
    return Round.model_validate(data)


# --- Output ---

def _format_to_par(value: int) -> str:
    if value == 0:
        return "E"
    return f"{value:+d}"


def _par_line(round_obj: Round) -> str:
    course = round_obj.course_in_play
    line = f"Par {course.get_par()}"
    if course.back_nine_par is not None:
        line += f" (out {course.front_nine_par}, in {course.back_nine_par})"
    return line


def print_results(round_obj: Round, show_holes: bool = False) -> None:
    course = round_obj.course_in_play
    print(f"{course.name or 'Course'} ({round_obj.holes} holes, {round_obj.scoring_type.value})")
    print(_par_line(round_obj))
    print("Pos  Player               Pts  Gross  Net  ToPar")
    for row in round_summary(round_obj):
        print(
            f"{row['position']:<4} {row['name']:<20} {row['stableford']:>3}"
            f"  {row['gross']:>5}  {row['net']:>3}  {_format_to_par(row['to_par']):>5}"
        )

    if not show_holes:
        return
    for player in round_obj.players:
        print(f"\n{player.name}")
        print("Hole  Par  SI  Gross  Strokes  Pts  Score")
        for row in hole_breakdown(player, course):
            points = "-" if row["points"] is None else row["points"]
            print(
                f"{row['hole']:<5} {row['par']:>3}  {row['stroke_index']:>2}  {row['gross']:>5}"
                f"  {row['handicap_strokes']:>7}  {points:>3}  {row['label'] or ''}"
            )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    _configure_logging()
    args = _parse_args(argv)
    override = ScoringType(args.scoring_type) if args.scoring_type else None

    try:
        round_obj = load_round(args.round_file, override)
        if not round_obj.is_fully_scored():
            for player in round_obj.players:
                if player.holes_played < round_obj.holes:
                    logger.warning(
                        "%s played %d of %d holes; unplayed holes score no points",
                        player.name, player.holes_played, round_obj.holes,
                    )
        finished = finish_round(round_obj)
    except FileNotFoundError:
        print(f"Round file not found: {args.round_file}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {args.round_file}: {e.strerror or e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in {args.round_file}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Invalid round data: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid round data: {e}", file=sys.stderr)
        return 1
    except RoundError as e:
        print(f"Cannot finish round: {e}", file=sys.stderr)
        return 1

    print_results(finished, show_holes=args.holes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
