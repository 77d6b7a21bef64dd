"""Game result data model."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tourneyresolve.type_hints import Number, Record
from tourneyresolve.utils import normalize_id, to_number, to_optional_int


@dataclass
class GameResult:
    """One recorded game with its final score.

    Records are appended as games are reported and never modified here.

    Attributes:
        round: Round the game belongs to
        player1_id: Id of the player reported as side 1
        player2_id: Id of the player reported as side 2
        score1: Points scored by side 1
        score2: Points scored by side 2
        player1_name: Side 1 name as captured on the result row
        player2_name: Side 2 name as captured on the result row
        created_at: Insertion timestamp (raw, parsed on demand)
        id: Result id
    """

    round: Optional[int]
    player1_id: Optional[str]
    player2_id: Optional[str]
    score1: Optional[Number] = None
    score2: Optional[Number] = None
    player1_name: Optional[str] = None
    player2_name: Optional[str] = None
    created_at: Optional[Any] = None
    id: Optional[str] = None

    @property
    def has_scores(self) -> bool:
        return self.score1 is not None and self.score2 is not None

    def involves(self, player_a: Optional[str], player_b: Optional[str]) -> bool:
        """Check whether this game was between the two players, either order."""
        if player_a is None or player_b is None:
            return False
        return (self.player1_id == player_a and self.player2_id == player_b) or (
            self.player1_id == player_b and self.player2_id == player_a
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "id": self.id,
            "round": self.round,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "score1": self.score1,
            "score2": self.score2,
            "player1_name": self.player1_name,
            "player2_name": self.player2_name,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Record) -> "GameResult":
        """Deserialize result from a storage record."""
        return cls(
            round=to_optional_int(data.get("round")),
            player1_id=normalize_id(data.get("player1_id")),
            player2_id=normalize_id(data.get("player2_id")),
            score1=to_number(data.get("score1")),
            score2=to_number(data.get("score2")),
            player1_name=data.get("player1_name"),
            player2_name=data.get("player2_name"),
            created_at=data.get("created_at"),
            id=normalize_id(data.get("id")),
        )
