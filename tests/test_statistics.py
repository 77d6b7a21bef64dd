from conftest import game_result

from tourneyresolve import EngineConfig
from tourneyresolve.tournament.statistics import extract_statistics

PLAYERS = [
    {"player_id": "a", "name": "Alice", "rating": 1500},
    {"player_id": "b", "name": "Bob", "rating": 1700},
    {"player_id": "c", "name": "Carol", "rating": 1600},
    {"player_id": "d", "name": "Dave", "rating": 1400},
]



def test_empty_results_give_placeholders():
    summary = extract_statistics([], PLAYERS)

    assert summary.high_game.value == "N/A"
    assert summary.low_game.value == "N/A"
    assert summary.high_combined.value == "N/A"
    assert summary.largest_blowout.value == "N/A"
    assert summary.biggest_upset.value == "N/A"


def test_missing_collections_give_placeholders():
    summary = extract_statistics(None, None)

    assert summary.to_dict()["highGame"]["value"] == "N/A"


def test_placeholder_is_configurable():
    summary = extract_statistics([], PLAYERS, EngineConfig(placeholder="-"))

    assert summary.low_game.value == "-"


def test_extracts_all_five_statistics():
    results = [
        game_result("a", "b", 400, 350),
        game_result("c", "d", 500, 300),
        game_result("b", "d", 280, 290),
    ]

    summary = extract_statistics(results, PLAYERS)

    assert summary.high_game.value == 500
    assert (summary.high_game.player, summary.high_game.opponent) == ("Carol", "Dave")

    assert summary.low_game.value == 280
    assert summary.low_game.player == "Bob"
    assert summary.low_game.detail == "280-290"

    assert summary.high_combined.value == 800
    assert summary.high_combined.detail == "500-300"

    assert summary.largest_blowout.value == 200
    assert (summary.largest_blowout.player, summary.largest_blowout.opponent) == (
        "Carol",
        "Dave",
    )

    assert summary.biggest_upset.value == 300
    assert summary.biggest_upset.player == "Dave"
    assert summary.biggest_upset.opponent == "Bob"
    assert summary.biggest_upset.detail == "1400 vs 1700"


def test_both_sides_of_a_result_are_scanned():
    summary = extract_statistics([game_result("a", "b", 200, 450)], PLAYERS)

    assert summary.high_game.value == 450
    assert summary.high_game.player == "Bob"
    assert summary.high_game.detail == "450-200"
    assert summary.low_game.value == 200
    assert summary.low_game.player == "Alice"


def test_ties_keep_first_seen_record():
    results = [game_result("a", "b", 400, 300), game_result("c", "d", 300, 400)]

    summary = extract_statistics(results, PLAYERS)

    assert summary.high_game.player == "Alice"
    assert summary.high_combined.player == "Alice"
    assert summary.largest_blowout.player == "Alice"


def test_blowout_labels_winner_when_side2_scores_higher():
    summary = extract_statistics([game_result("a", "b", 250, 480)], PLAYERS)

    assert summary.largest_blowout.value == 230
    assert summary.largest_blowout.player == "Bob"
    assert summary.largest_blowout.opponent == "Alice"


def test_drawn_games_are_not_blowouts():
    summary = extract_statistics([game_result("a", "b", 350, 350)], PLAYERS)

    assert summary.largest_blowout.value == "N/A"
    assert summary.high_combined.value == 700


def test_higher_rated_winner_is_never_an_upset():
    players = [
        {"player_id": "g", "name": "Giant", "rating": 2200},
        {"player_id": "m", "name": "Minnow", "rating": 800},
    ]

    summary = extract_statistics([game_result("g", "m", 500, 200)], players)

    assert summary.biggest_upset.value == "N/A"


def test_unresolvable_players_are_skipped_for_upsets():
    results = [game_result("a", "zz", 300, 400, player2_name="Stranger")]

    summary = extract_statistics(results, PLAYERS)

    assert summary.biggest_upset.value == "N/A"
    assert summary.high_game.player == "Stranger"


def test_unrated_players_are_skipped_for_upsets():
    players = [{"player_id": "a", "name": "Alice"}, {"player_id": "b", "rating": 1900}]

    summary = extract_statistics([game_result("a", "b", 400, 300)], players)

    assert summary.biggest_upset.value == "N/A"


def test_names_fall_back_to_roster_then_unknown():
    results = [game_result("c", "nobody", 410, 390)]

    summary = extract_statistics(results, PLAYERS)

    assert summary.high_game.player == "Carol"
    assert summary.high_game.opponent == "Unknown Player"


def test_results_with_missing_scores_are_skipped():
    results = [game_result("a", "b", 600, None), game_result("c", "d", 400, 390)]

    summary = extract_statistics(results, PLAYERS)

    assert summary.high_game.value == 400
    assert summary.low_game.value == 390
