from datetime import datetime, timezone

import pytest

from tourneyresolve.config import EngineConfig
from tourneyresolve.exceptions import (
    InvalidConfigurationException,
    InvalidRecordException,
)
from tourneyresolve.models import (
    GameResult,
    Pairing,
    Player,
    Side,
    Tournament,
    TournamentType,
    coerce,
    coerce_many,
    coerce_or_none,
)
from tourneyresolve.utils import format_score, to_number
from tourneyresolve.utils.timestamps import parse_timestamp, timestamp_sort_key


def test_player_reads_roster_row():
    player = Player.from_dict(
        {
            "id": 99,
            "player_id": 7,
            "name": "Alice",
            "rating": "1650",
            "wins": None,
            "losses": 2,
            "ties": "1",
            "rank": 0,
            "initial_seed": 4,
        }
    )

    assert player.id == "7"
    assert player.rating == 1650
    assert (player.wins, player.losses, player.ties) == (0, 2, 1)
    assert player.rank is None
    assert player.seed == 4
    assert player.games_played == 3


def test_player_without_name_displays_as_unknown():
    assert Player.from_dict({"id": 1}).display_name == "Unknown Player"


def test_pairing_reads_nested_schedule_shape():
    pairing = Pairing.from_dict(
        {
            "table": 3,
            "player1": {"player_id": 1, "name": "Alice", "team_id": 10},
            "player2": {"player_id": 2, "name": "Bob"},
        }
    )

    assert pairing.player1_id == "1"
    assert pairing.player2_name == "Bob"
    assert pairing.player1_team_id == "10"
    assert pairing.side_id(Side.PLAYER2) == "2"
    assert not pairing.is_bye()


def test_pairing_detects_flagged_bye():
    pairing = Pairing.from_dict(
        {"player1": {"player_id": 1}, "player2": {"name": None, "isBye": True}}
    )

    assert pairing.bye_side() is Side.PLAYER2


def test_tournament_type_parsing():
    assert TournamentType.parse("best_of_league") is TournamentType.BEST_OF_LEAGUE
    assert TournamentType.parse("individual") is TournamentType.SINGLE_GAME
    assert TournamentType.parse(None) is TournamentType.SINGLE_GAME


def test_tournament_schedule_keys_become_ints():
    tournament = Tournament.from_dict(
        {
            "currentRound": "2",
            "type": "best_of_league",
            "pairing_schedule": {
                "1": [{"player1_id": "a", "player2_id": "b"}],
                "2": [],
            },
        }
    )

    assert tournament.current_round == 2
    assert tournament.type is TournamentType.BEST_OF_LEAGUE
    assert tournament.pairings_for_round(1)[0].round == 1
    assert tournament.pairings_for_round(2) == []
    assert tournament.pairings_for_round(3) is None


def test_tournament_drops_malformed_schedule_entries():
    tournament = Tournament.from_dict(
        {"currentRound": -1, "pairing_schedule": {"zero": [], "1": 5, "2": [None]}}
    )

    assert tournament.current_round == 1
    assert tournament.pairing_schedule == {2: []}


def test_tournament_ignores_non_mapping_schedule():
    assert Tournament.from_dict({"pairing_schedule": ["x"]}).pairing_schedule == {}


def test_coerce_rejects_non_records():
    with pytest.raises(InvalidRecordException):
        coerce(Player, ["p1", "Alice"])


def test_coerce_or_none_returns_none_for_missing_record():
    assert coerce_or_none(Pairing, None) is None
    assert coerce_or_none(Pairing, 42) is None
    assert coerce_or_none(Pairing, {"player1_id": "a"}).player1_id == "a"


def test_coerce_many_drops_malformed_entries():
    results = coerce_many(
        GameResult,
        [None, {"round": 1, "player1_id": "a", "player2_id": "b"}, "junk", 7],
    )

    assert len(results) == 1
    assert results[0].player1_id == "a"


def test_coerce_many_ignores_non_collections():
    assert coerce_many(Player, None) == []
    assert coerce_many(Player, 5) == []
    assert coerce_many(Player, "abc") == []
    assert coerce_many(Player, {"player_id": "a"}) == []


def test_config_round_trip():
    config = EngineConfig(unranked_rank=500, order_results_by_timestamp=True)

    assert EngineConfig.from_dict(config.to_dict()) == config
    assert EngineConfig.from_dict(None) == EngineConfig()


def test_config_rejects_wrong_types():
    with pytest.raises(InvalidConfigurationException):
        EngineConfig.from_dict({"unranked_rank": "999"})
    with pytest.raises(InvalidConfigurationException):
        EngineConfig.from_dict({"unranked_rank": True})


def test_number_coercion():
    assert to_number("21") == 21
    assert to_number("0.5") == 0.5
    assert to_number(True) is None
    assert to_number("abc") is None
    assert to_number(float("nan")) is None


def test_score_formatting():
    assert format_score(21.0) == "21"
    assert format_score(0.5) == "0.5"
    assert format_score(7) == "7"


def test_timestamp_parsing():
    parsed = parse_timestamp("2025-03-01T12:00:00")

    assert parsed == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert parse_timestamp("not a date") is None
    assert parse_timestamp(None) is None
    assert timestamp_sort_key(None) < timestamp_sort_key("2025-03-01T12:00:00+02:00")
