from __future__ import annotations

from typing import Dict, Iterable, List

from models.leaderboard import LeaderboardEntry
from models.player_result import PlayerResult


def update_leaderboard(
    entries: Iterable[LeaderboardEntry],
    results: Iterable[PlayerResult],
) -> List[LeaderboardEntry]:
    """
    Fold a finished round's results into the leaderboard.

    Entries are matched by player name. Returns a new list ordered by best
    points (highest first), then name; the inputs are not modified.
    """
    by_name: Dict[str, LeaderboardEntry] = {
        entry.name: entry.model_copy() for entry in entries
    }

    for result in results:
        entry = by_name.get(result.name)
        if entry is None:
            by_name[result.name] = LeaderboardEntry(
                name=result.name,
                handicap=result.handicap,
                rounds=1,
                total_points=result.stableford,
                best_points=result.stableford,
                best_net=result.net,
            )
            continue

        entry.rounds += 1
        entry.total_points += result.stableford
        entry.best_points = max(entry.best_points, result.stableford)
        entry.best_net = result.net if entry.best_net is None else min(entry.best_net, result.net)
        entry.handicap = result.handicap

    return sorted(by_name.values(), key=lambda e: (-e.best_points, e.name.casefold()))
