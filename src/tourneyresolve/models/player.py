"""Player data model."""

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

from tourneyresolve.constants import UNKNOWN_PLAYER_NAME
from tourneyresolve.type_hints import Number, Record
from tourneyresolve.utils import normalize_id, to_int, to_number, to_optional_int


@dataclass
class Player:
    """A tournament entrant together with its accumulated counters.

    Attributes:
        id: Player id (normalised to str)
        name: Display name
        rating: Rating, or None when unrated
        team_id: Team the player belongs to, if any
        seed: Initial seed, if any
        photo_url: Photo reference, if any
        wins: Games won
        losses: Games lost
        ties: Games drawn
        spread: Cumulative point differential
        rank: Current 1-based rank, or None when unranked
        match_wins: Series won (best-of-league format)
        match_losses: Series lost (best-of-league format)
    """

    id: Optional[str]
    name: Optional[str] = None
    rating: Optional[int] = None
    team_id: Optional[str] = None
    seed: Optional[int] = None
    photo_url: Optional[str] = None
    wins: int = 0
    losses: int = 0
    ties: int = 0
    spread: Number = 0
    rank: Optional[int] = None
    match_wins: int = 0
    match_losses: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def display_name(self) -> str:
        return self.name or UNKNOWN_PLAYER_NAME

    @property
    def is_rated(self) -> bool:
        return self.rating is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "player_id": self.id,
            "name": self.name,
            "rating": self.rating,
            "team_id": self.team_id,
            "seed": self.seed,
            "photo_url": self.photo_url,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "spread": self.spread,
            "rank": self.rank,
            "match_wins": self.match_wins,
            "match_losses": self.match_losses,
        }

    @classmethod
    def from_dict(cls, data: Record) -> "Player":
        """Deserialize player from a storage record.

        Roster rows carry the player's id as ``player_id``; plain player rows
        use ``id``. Counters that are missing or non-numeric become 0.
        """
        player_id = data.get("player_id")
        if player_id is None:
            player_id = data.get("id")

        seed = data.get("seed")
        if seed is None:
            seed = data.get("initial_seed")

        ties = data.get("ties")
        if ties is None:
            ties = data.get("draws")

        rank = to_optional_int(data.get("rank"))
        if rank is not None and rank < 1:
            rank = None

        return cls(
            id=normalize_id(player_id),
            name=data.get("name"),
            rating=to_optional_int(data.get("rating")),
            team_id=normalize_id(data.get("team_id")),
            seed=to_optional_int(seed),
            photo_url=data.get("photo_url"),
            wins=max(0, to_int(data.get("wins"))),
            losses=max(0, to_int(data.get("losses"))),
            ties=max(0, to_int(ties)),
            spread=to_number(data.get("spread")) or 0,
            rank=rank,
            match_wins=max(0, to_int(data.get("match_wins"))),
            match_losses=max(0, to_int(data.get("match_losses"))),
        )
