"""Data models consumed by the resolution engine."""

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

from tourneyresolve.models.coercion import coerce, coerce_many, coerce_or_none
from tourneyresolve.models.pairing import Pairing, Side
from tourneyresolve.models.player import Player
from tourneyresolve.models.prize import Prize
from tourneyresolve.models.result import GameResult
from tourneyresolve.models.tournament import Tournament, TournamentType

__all__ = [
    "GameResult",
    "Pairing",
    "Player",
    "Prize",
    "Side",
    "Tournament",
    "TournamentType",
    "coerce",
    "coerce_many",
    "coerce_or_none",
]
