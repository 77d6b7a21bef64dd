from conftest import game_result

from tourneyresolve.models import Pairing
from tourneyresolve.tournament.round_state import expected_results, round_complete


def _five_player_round():
    return [
        {"round": 1, "player1": {"player_id": "a"}, "player2": {"player_id": "b"}},
        {"round": 1, "player1": {"player_id": "c"}, "player2": {"player_id": "d"}},
        {"round": 1, "player1": {"player_id": "e"}, "player2": {"name": "BYE"}},
    ]


def test_bye_is_not_an_expected_result():
    pairings = [Pairing.from_dict(p) for p in _five_player_round()]

    assert expected_results(1, pairings) == 2


def test_single_game_round_with_bye_completes_after_two_results():
    results = [game_result("a", "b"), game_result("c", "d")]

    assert round_complete(1, _five_player_round(), results, "single_game", 5)


def test_single_game_round_incomplete_with_one_result():
    results = [game_result("a", "b")]

    assert not round_complete(1, _five_player_round(), results, "single_game", 5)


def test_results_from_other_rounds_do_not_count():
    results = [
        game_result("a", "b", round_number=2),
        game_result("c", "d", round_number=2),
    ]

    assert not round_complete(1, _five_player_round(), results, "single_game", 5)


def test_best_of_league_counts_matches_from_roster_size():
    results = [game_result("a", "b")]

    assert not round_complete(1, [], results, "best_of_league", 4)
    assert round_complete(1, [], results + [game_result("c", "d")], "best_of_league", 4)


def test_best_of_league_odd_roster_needs_rounded_up_matches():
    results = [game_result("a", "b"), game_result("c", "d")]

    # 5 players -> 2.5 match slots
    assert not round_complete(1, [], results, "best_of_league", 5)
    assert round_complete(1, [], results + [game_result("a", "b")], "best_of_league", 5)


def test_unknown_format_is_treated_as_single_game():
    results = [game_result("a", "b"), game_result("c", "d")]

    assert round_complete(1, _five_player_round(), results, "individual", 5)
