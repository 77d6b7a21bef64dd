"""Mapping of prizes onto the players currently holding their rank."""

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
from typing import Any, Dict, Iterable, List, Optional, Union

from tourneyresolve.models import Player, Prize, coerce_many


@dataclass(frozen=True)
class PrizeAward:
    prize: Prize
    player: Optional[Player] = None

    @property
    def is_awarded(self) -> bool:
        return self.player is not None


def assign_prizes(
    prizes: Optional[Iterable[Union[Prize, Any]]],
    players: Optional[Iterable[Union[Player, Any]]],
) -> List[PrizeAward]:
    """Pair each prize with the player holding its rank right now.

    The first roster entry with a matching rank wins the prize; prizes whose
    rank nobody holds are returned unawarded.
    """
    holders: Dict[int, Player] = {}
    for player in coerce_many(Player, players):
        if player.rank is not None and player.rank not in holders:
            holders[player.rank] = player

    return [
        PrizeAward(prize, holders.get(prize.rank) if prize.rank is not None else None)
        for prize in coerce_many(Prize, prizes)
    ]
