"""Pairing data model."""

# Tourney Resolve
# Copyright (C) 2025  Tourney Resolve developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from tourneyresolve.constants import BYE_MARKER
from tourneyresolve.type_hints import Number, Record
from tourneyresolve.utils import normalize_id, to_number, to_optional_int


class Side(Enum):
    """One side of a pairing, in the pairing's own orientation."""

    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def other(self) -> "Side":
        return Side.PLAYER2 if self is Side.PLAYER1 else Side.PLAYER1


@dataclass
class Pairing:
    """A scheduled matchup for one round, played or not.

    Each side is identified by a player id, a team id, or only a display
    name when no id is available. The optional outcome fields are whatever
    the data store embedded on the pairing row itself.

    Attributes:
        round: Round number, or None when implied by the schedule key
        player1_id: Side 1 player id
        player2_id: Side 2 player id
        player1_name: Side 1 display name
        player2_name: Side 2 display name
        player1_team_id: Side 1 team id
        player2_team_id: Side 2 team id
        player1_is_bye: Side 1 flagged as the synthetic bye entry
        player2_is_bye: Side 2 flagged as the synthetic bye entry
        score1: Embedded score for side 1
        score2: Embedded score for side 2
        player1_wins: Series games won so far by side 1 (best-of-league)
        player2_wins: Series games won so far by side 2 (best-of-league)
        winner_id: Declared winner without a numeric score
        table: Table assignment, if any
    """

    round: Optional[int] = None
    player1_id: Optional[str] = None
    player2_id: Optional[str] = None
    player1_name: Optional[str] = None
    player2_name: Optional[str] = None
    player1_team_id: Optional[str] = None
    player2_team_id: Optional[str] = None
    player1_is_bye: bool = False
    player2_is_bye: bool = False
    score1: Optional[Number] = None
    score2: Optional[Number] = None
    player1_wins: Optional[int] = None
    player2_wins: Optional[int] = None
    winner_id: Optional[str] = None
    table: Optional[Any] = None

    def side_id(self, side: Side) -> Optional[str]:
        return self.player1_id if side is Side.PLAYER1 else self.player2_id

    def side_name(self, side: Side) -> Optional[str]:
        return self.player1_name if side is Side.PLAYER1 else self.player2_name

    def side_team_id(self, side: Side) -> Optional[str]:
        return self.player1_team_id if side is Side.PLAYER1 else self.player2_team_id

    def bye_side(self, bye_marker: str = BYE_MARKER) -> Optional[Side]:
        """Return the side holding the synthetic bye entry, if any."""
        if self.player2_is_bye or self.player2_name == bye_marker:
            return Side.PLAYER2
        if self.player1_is_bye or self.player1_name == bye_marker:
            return Side.PLAYER1
        return None

    def is_bye(self, bye_marker: str = BYE_MARKER) -> bool:
        return self.bye_side(bye_marker) is not None

    def has_embedded_scores(self) -> bool:
        return self.score1 is not None and self.score2 is not None

    def series_games(self) -> int:
        """Number of series games recorded on the pairing itself."""
        return (self.player1_wins or 0) + (self.player2_wins or 0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "round": self.round,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "player1_name": self.player1_name,
            "player2_name": self.player2_name,
            "player1_team_id": self.player1_team_id,
            "player2_team_id": self.player2_team_id,
            "score1": self.score1,
            "score2": self.score2,
            "player1_wins": self.player1_wins,
            "player2_wins": self.player2_wins,
            "winner_id": self.winner_id,
            "table": self.table,
        }

    @classmethod
    def from_dict(cls, data: Record) -> "Pairing":
        """Deserialize a pairing.

        Accepts flat rows (``player1_id``, ``player1_name``) as well as the
        nested schedule shape (``player1: {player_id, name, team_id}``).
        ``player1_score``/``player2_score`` are read as aliases of
        ``score1``/``score2``.
        """
        side1 = _read_side(data, "player1")
        side2 = _read_side(data, "player2")

        return cls(
            round=to_optional_int(data.get("round")),
            player1_id=side1["id"],
            player2_id=side2["id"],
            player1_name=side1["name"],
            player2_name=side2["name"],
            player1_team_id=side1["team_id"],
            player2_team_id=side2["team_id"],
            player1_is_bye=side1["is_bye"],
            player2_is_bye=side2["is_bye"],
            score1=to_number(_first_present(data, "score1", "player1_score")),
            score2=to_number(_first_present(data, "score2", "player2_score")),
            player1_wins=to_optional_int(data.get("player1_wins")),
            player2_wins=to_optional_int(data.get("player2_wins")),
            winner_id=normalize_id(data.get("winner_id")),
            table=data.get("table"),
        )


def _first_present(data: Record, *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _read_side(data: Record, prefix: str) -> Dict[str, Any]:
    nested = data.get(prefix)
    if not isinstance(nested, Mapping):
        nested = {}

    player_id = _first_present(data, f"{prefix}_id")
    if player_id is None:
        player_id = _first_present(nested, "player_id", "id")

    name = _first_present(data, f"{prefix}_name")
    if name is None:
        name = nested.get("name")

    team_id = _first_present(data, f"{prefix}_team_id")
    if team_id is None:
        team_id = nested.get("team_id")

    return {
        "id": normalize_id(player_id),
        "name": name,
        "team_id": normalize_id(team_id),
        "is_bye": bool(nested.get("isBye") or nested.get("is_bye")),
    }
