"""Every public derivation answers missing records with placeholders."""

import pytest
from conftest import game_result

from tourneyresolve.tournament.result_resolver import resolve_match
from tourneyresolve.tournament.round_state import round_complete
from tourneyresolve.tournament.standings import (
    calculate_standings,
    format_record,
    sort_standings,
)
from tourneyresolve.tournament.statistics import extract_statistics
from tourneyresolve.tournament.tournament_state import (
    TournamentState,
    compute_tournament_state,
)

MALFORMED = [None, 42, "junk", ["a", "b"]]


@pytest.mark.parametrize("pairing", MALFORMED)
def test_resolve_match_never_raises(pairing):
    outcome = resolve_match(pairing, [None, game_result("a", "b")], "single_game")

    assert outcome.is_pending


def test_statistics_skip_missing_records():
    summary = extract_statistics([None, 42], [None])

    assert summary.high_game.value == "N/A"


def test_statistics_keep_valid_records_next_to_missing_ones():
    summary = extract_statistics([None, game_result("a", "b", 410, 380)], [None])

    assert summary.high_game.value == 410


def test_sort_standings_skips_missing_players():
    standings = sort_standings([None, {"player_id": "a", "name": "A"}], "rank", "asc")

    assert [p.name for p in standings] == ["A"]


def test_tournament_state_skips_missing_players():
    state = compute_tournament_state(
        {"status": "draft"}, [None, {"id": 1}, {"id": 2}], []
    )

    assert state is TournamentState.ROSTER_READY


def test_tournament_state_with_malformed_tournament():
    assert compute_tournament_state("junk", [], []) is TournamentState.NO_TOURNAMENT


def test_round_complete_skips_missing_records():
    pairings = [None, {"round": 1, "player1_id": "a", "player2_id": "b"}]

    assert round_complete(1, pairings, [None, game_result("a", "b")], "single_game", 2)


def test_standings_helpers_skip_missing_records():
    assert format_record(None) == "0-0"
    assert calculate_standings([None], [None], "single_game") == []
