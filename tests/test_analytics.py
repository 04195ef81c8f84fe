from datetime import datetime

import pytest

from analytics.courses import courses_by_province, provinces, search_courses
from analytics.leaderboard import update_leaderboard
from analytics.results import build_player_result, finish_round, hole_breakdown, round_summary
from models import Course, Hole, LeaderboardEntry, Player, Round, RoundCompleteError, ScoringType


def _build_course() -> Course:
    holes = []
    for i in range(1, 19):
        if i <= 4:
            par = 3
        elif i <= 14:
            par = 4
        else:
            par = 5
        holes.append(Hole(number=i, par=par, stroke_index=i))
    return Course(id="course-1", name="Demo Course", par=72, holes=holes)


def _build_round(scoring_type=ScoringType.STABLEFORD) -> Round:
    course = _build_course()
    pars = [h.par for h in course.holes]
    players = [
        Player(name="Scratch", handicap=0, scores=list(pars)),              # 36 pts, net 72
        Player(name="Bogey", handicap=18, scores=[p + 1 for p in pars]),    # 35 pts, net 73
        Player(name="Hacker", handicap=30, scores=[p + 3 for p in pars]),   # 11 pts, net 97
    ]
    return Round(
        id="r1",
        date=datetime(2026, 2, 1),
        course=course,
        players=players,
        scoring_type=scoring_type,
    )


# ================================================================
# Player results
# ================================================================

def test_build_player_result():
    course = _build_course()
    player = Player(name="Bogey", handicap=18, scores=[h.par + 1 for h in course.holes])

    result = build_player_result(player, course)

    assert result.name == "Bogey"
    assert result.handicap == 18
    assert result.gross == 90
    assert result.net == 73
    assert result.to_par == 18
    assert result.stableford == 35
    assert result.front_nine == 3 * 4 + 4 * 5 + 9
    assert result.back_nine == 90 - result.front_nine
    assert result.scores == player.scores


def test_build_player_result_without_scores():
    result = build_player_result(Player(name="New"), _build_course())
    assert result.to_par == 0
    assert result.gross == 0
    assert result.stableford == 0
    assert result.front_nine == 0
    assert result.back_nine == 0


def test_result_scores_are_a_copy():
    course = _build_course()
    player = Player(name="A", scores=[4, 4])
    result = build_player_result(player, course)
    player.scores.append(5)
    assert result.scores == [4, 4]


# ================================================================
# Finishing a round
# ================================================================

def test_finish_round_stableford_order():
    round_obj = _build_round()
    finished = finish_round(round_obj)

    assert finished.complete
    assert [r.name for r in finished.player_results] == ["Scratch", "Bogey", "Hacker"]
    assert [r.stableford for r in finished.player_results] == [36, 35, 11]


def test_finish_round_stroke_play_order():
    round_obj = _build_round(ScoringType.STROKE_PLAY)
    # A big handicap turns Hacker's net into the best of the group
    round_obj.players[2].handicap = 60          # playing handicap 57
    finished = finish_round(round_obj)

    assert [r.name for r in finished.player_results] == ["Hacker", "Scratch", "Bogey"]
    assert [r.net for r in finished.player_results] == [126 - 57, 72, 73]


def test_finish_round_leaves_input_untouched():
    round_obj = _build_round()
    finish_round(round_obj)
    assert not round_obj.complete
    assert round_obj.player_results == []


def test_finish_round_twice_fails():
    finished = finish_round(_build_round())
    with pytest.raises(RoundCompleteError):
        finish_round(finished)


def test_finish_round_without_players():
    round_obj = Round(course=_build_course())
    finished = finish_round(round_obj)
    assert finished.complete
    assert finished.player_results == []


def test_nine_hole_round_scores_only_holes_in_play():
    course = _build_course()
    front_pars = [h.par for h in course.holes[:9]]
    round_obj = Round(course=course, holes=9, players=[Player(name="A", scores=list(front_pars))])
    # Scores edited on the player directly skip the round's own check
    round_obj.players[0].scores = [h.par for h in course.holes]

    result = finish_round(round_obj).player_results[0]

    assert result.gross == 32
    assert result.stableford == 18
    assert result.to_par == 0
    assert result.front_nine == 32
    assert result.back_nine == 0
    assert result.scores == front_pars
    assert round_summary(round_obj)[0]["gross"] == 32


def test_nine_hole_round_net_uses_front_nine_allocation():
    course = _build_course()
    round_obj = Round(
        course=course,
        holes=9,
        scoring_type=ScoringType.STROKE_PLAY,
        players=[Player(name="A", handicap=18, scores=[h.par + 1 for h in course.holes[:9]])],
    )
    result = finish_round(round_obj).player_results[0]
    # playing handicap 17, SI 1-9 on the front nine each get a stroke
    assert result.gross == 41
    assert result.net == 32
    assert result.stableford == 18


# ================================================================
# Hole breakdown
# ================================================================

def test_hole_breakdown_rows():
    course = _build_course()
    player = Player(name="A", handicap=20, scores=[3, 0, 5])   # playing handicap 19

    rows = hole_breakdown(player, course)

    assert len(rows) == 3
    assert rows[0] == {
        "hole": 1,
        "par": 3,
        "stroke_index": 1,
        "gross": 3,
        "handicap_strokes": 2,
        "net": 1,
        "points": 4,
        "label": "Par",
        "css_class": "score-par",
    }
    assert rows[1]["gross"] == 0
    assert rows[1]["handicap_strokes"] == 1
    assert rows[1]["net"] is None
    assert rows[1]["points"] is None
    assert rows[1]["label"] is None
    assert rows[2]["label"] == "Double"
    assert rows[2]["points"] == 1


def test_hole_breakdown_stops_at_last_hole():
    holes = [Hole(number=i, par=4, stroke_index=i) for i in range(1, 10)]
    course = Course(holes=holes)
    player = Player(name="A", scores=[4] * 11)
    assert [row["hole"] for row in hole_breakdown(player, course)] == list(range(1, 10))


# ================================================================
# Round summary
# ================================================================

def test_round_summary_in_progress_and_finished_match():
    round_obj = _build_round()
    live = round_summary(round_obj)
    final = round_summary(finish_round(round_obj))

    assert live == final
    assert [row["position"] for row in final] == [1, 2, 3]
    assert final[0] == {
        "position": 1,
        "name": "Scratch",
        "stableford": 36,
        "gross": 72,
        "net": 72,
        "to_par": 0,
    }


def test_round_summary_shares_positions_on_ties():
    course = _build_course()
    pars = [h.par for h in course.holes]
    round_obj = Round(course=course, players=[
        Player(name="Cara", scores=list(pars)),
        Player(name="Abe", scores=list(pars)),
        Player(name="Ben", scores=[p + 1 for p in pars]),
    ])

    rows = round_summary(round_obj)

    assert [(row["position"], row["name"]) for row in rows] == [(1, "Abe"), (1, "Cara"), (3, "Ben")]


# ================================================================
# Leaderboard
# ================================================================

def test_update_leaderboard_adds_and_merges():
    first = finish_round(_build_round())
    board = update_leaderboard([], first.player_results)

    assert [e.name for e in board] == ["Scratch", "Bogey", "Hacker"]
    assert all(e.rounds == 1 for e in board)
    assert board[0].best_net == 72

    better = _build_round()
    better.players[1].scores = [h.par for h in better.course.holes]   # Bogey plays to par
    second = finish_round(better)
    board = update_leaderboard(board, second.player_results)

    bogey = board[0]
    assert bogey.name == "Bogey"
    assert bogey.rounds == 2
    assert bogey.total_points == 35 + 53
    assert bogey.best_points == 53
    assert bogey.best_net == 55
    assert bogey.average_points == 44


def test_update_leaderboard_does_not_mutate_entries():
    entry = LeaderboardEntry(name="Scratch", rounds=3, total_points=100, best_points=38, best_net=70)
    results = finish_round(_build_round()).player_results

    board = update_leaderboard([entry], results)

    assert entry.rounds == 3
    merged = next(e for e in board if e.name == "Scratch")
    assert merged.rounds == 4
    assert merged.best_points == 38
    assert merged.best_net == 70


# ================================================================
# Course catalog
# ================================================================

def _catalog():
    return [
        Course(id="rj", name="Royal Johannesburg East", city="Johannesburg", province="Gauteng"),
        Course(id="gl", name="Glendower", city="Johannesburg", province="Gauteng"),
        Course(id="ar", name="Arabella", city="Kleinmond", province="Western Cape"),
        Course(id="nn", name="Unlisted Nine"),
    ]


def test_search_courses_by_name_or_city():
    catalog = _catalog()
    assert [c.id for c in search_courses(catalog, "johannesburg")] == ["rj", "gl"]
    assert [c.id for c in search_courses(catalog, "ARAB")] == ["ar"]
    assert [c.id for c in search_courses(catalog, "klein")] == ["ar"]
    assert search_courses(catalog, "nowhere") == []
    assert len(search_courses(catalog, "  ")) == 4


def test_courses_by_province():
    catalog = _catalog()
    assert [c.id for c in courses_by_province(catalog, "gauteng")] == ["rj", "gl"]
    assert [c.id for c in courses_by_province(catalog, "Western Cape")] == ["ar"]
    assert courses_by_province(catalog, "Limpopo") == []
    assert len(courses_by_province(catalog, None)) == 4


def test_provinces_are_distinct_and_sorted():
    assert provinces(_catalog()) == ["Gauteng", "Western Cape"]
