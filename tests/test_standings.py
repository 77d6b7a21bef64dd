from conftest import game_result

from tourneyresolve.models import Player
from tourneyresolve.tournament.standings import (
    calculate_standings,
    format_record,
    sort_standings,
    win_rate,
)


def _roster():
    return [
        {"player_id": 1, "name": "bob", "rank": 2, "wins": 3, "losses": 1, "spread": 50},
        {"player_id": 2, "name": "Alice", "wins": 0, "losses": 0, "spread": 0},
        {
            "player_id": 3,
            "name": "carol",
            "rank": 1,
            "wins": 2,
            "losses": 1,
            "ties": 1,
            "spread": -20,
        },
    ]


def _names(players):
    return [p.name for p in players]


# ========== Sorting ==========


def test_sort_by_rank_puts_unranked_last():
    assert _names(sort_standings(_roster(), "rank", "asc")) == ["carol", "bob", "Alice"]


def test_sort_by_rank_descending_flips_direction():
    assert _names(sort_standings(_roster(), "rank", "desc")) == ["Alice", "bob", "carol"]


def test_sort_by_name_is_case_insensitive():
    assert _names(sort_standings(_roster(), "name", "asc")) == ["Alice", "bob", "carol"]


def test_sort_by_win_rate_descending():
    assert _names(sort_standings(_roster(), "winRate", "desc")) == [
        "bob",
        "carol",
        "Alice",
    ]


def test_sort_by_draws_accepts_ties_alias():
    by_draws = _names(sort_standings(_roster(), "draws", "desc"))
    by_ties = _names(sort_standings(_roster(), "ties", "desc"))

    assert by_draws == by_ties
    assert by_draws[0] == "carol"


def test_sort_by_spread_and_losses():
    assert _names(sort_standings(_roster(), "spread", "desc")) == [
        "bob",
        "Alice",
        "carol",
    ]
    assert _names(sort_standings(_roster(), "losses", "asc")) == [
        "Alice",
        "bob",
        "carol",
    ]


def test_equal_values_keep_input_order():
    players = [
        {"player_id": "x", "name": "X", "wins": 2},
        {"player_id": "y", "name": "Y", "wins": 5},
        {"player_id": "z", "name": "Z", "wins": 2},
    ]

    assert _names(sort_standings(players, "wins", "asc")) == ["X", "Z", "Y"]
    assert _names(sort_standings(players, "wins", "desc")) == ["Y", "X", "Z"]


def test_sort_by_match_wins():
    players = [
        {"player_id": "x", "name": "X", "match_wins": "1"},
        {"player_id": "y", "name": "Y", "match_wins": 3},
    ]

    assert _names(sort_standings(players, "matchWins", "desc")) == ["Y", "X"]


def test_unknown_sort_key_falls_back_to_rank():
    assert _names(sort_standings(_roster(), "shoe_size", "asc")) == [
        "carol",
        "bob",
        "Alice",
    ]


def test_sorting_does_not_mutate_input():
    roster = [Player.from_dict(p) for p in _roster()]
    original = list(roster)

    sort_standings(roster, "name", "asc")

    assert roster == original


def test_empty_roster_sorts_to_empty_list():
    assert sort_standings(None) == []


# ========== Win rate and record ==========


def test_win_rate_without_games_is_zero():
    assert win_rate(Player(id="p")) == 0.0


def test_win_rate_counts_draws_as_games():
    assert win_rate(Player(id="p", wins=3, losses=1, ties=0)) == 0.75
    assert win_rate(Player(id="p", wins=2, losses=1, ties=1)) == 0.5


def test_format_record_without_draws():
    assert format_record(Player(id="p", wins=3, losses=2)) == "3-2"


def test_format_record_splits_draws():
    assert format_record(Player(id="p", wins=3, losses=2, ties=1)) == "3.5-2.5"


def test_format_record_accepts_records():
    assert format_record({"wins": 0, "losses": 0, "ties": 2}) == "1.0-1.0"


# ========== Derived standings ==========


def test_calculate_standings_single_game():
    players = [
        {"player_id": "b", "name": "B"},
        {"player_id": "c", "name": "C"},
        {"player_id": "a", "name": "A"},
    ]
    results = [
        game_result("a", "b", 400, 300),
        game_result("a", "c", 350, 350, round_number=2),
        game_result("c", "b", 410, 400, round_number=3),
    ]

    standings = calculate_standings(players, results, "single_game")

    assert _names(standings) == ["A", "C", "B"]
    assert [p.rank for p in standings] == [1, 2, 3]
    first = standings[0]
    assert (first.wins, first.losses, first.ties, first.spread) == (1, 0, 1, 100)
    assert format_record(first) == "1.5-0.5"
    assert standings[2].spread == -110


def test_calculate_standings_best_of_league_counts_match_wins():
    players = [
        {"player_id": "a", "name": "A"},
        {"player_id": "b", "name": "B"},
        {"player_id": "c", "name": "C"},
        {"player_id": "d", "name": "D"},
    ]
    results = [
        game_result("a", "b", 21, 15),
        game_result("b", "a", 21, 18),
        game_result("a", "b", 21, 10),
        game_result("c", "d", 20, 10),
    ]

    standings = calculate_standings(players, results, "best_of_league", best_of_value=3)

    assert _names(standings) == ["A", "C", "B", "D"]
    a, c, b, d = standings
    assert (a.match_wins, a.match_losses) == (1, 0)
    assert (b.match_wins, b.match_losses) == (0, 1)
    assert (c.match_wins, d.match_losses) == (0, 0)
    assert a.spread == 14


def test_calculate_standings_uses_seed_as_last_tiebreak():
    players = [
        {"player_id": "x", "name": "X", "seed": 2},
        {"player_id": "y", "name": "Y", "seed": 1},
        {"player_id": "z", "name": "Z"},
    ]

    standings = calculate_standings(players, [], "single_game")

    assert _names(standings) == ["Y", "X", "Z"]


def test_calculate_standings_skips_results_without_scores():
    players = [{"player_id": "a", "name": "A"}, {"player_id": "b", "name": "B"}]
    results = [game_result("a", "b", 400, None), game_result("a", None, 400, 300)]

    standings = calculate_standings(players, results, "single_game")

    assert all(p.games_played == 0 for p in standings)


def test_calculate_standings_does_not_mutate_players():
    players = [Player(id="a", name="A", wins=9), Player(id="b", name="B")]

    calculate_standings(players, [game_result("b", "a", 10, 0)], "single_game")

    assert players[0].wins == 9
    assert players[0].rank is None
