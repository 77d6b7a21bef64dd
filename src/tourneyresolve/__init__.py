"""Tourney Resolve: derive tournament progress, standings and statistics."""

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

from tourneyresolve.config import EngineConfig
from tourneyresolve.models import (
    GameResult,
    Pairing,
    Player,
    Prize,
    Side,
    Tournament,
    TournamentType,
)
from tourneyresolve.tournament import (
    MatchResult,
    MatchStatus,
    PrizeAward,
    ResolutionSource,
    StatisticsSummary,
    StatRecord,
    TournamentState,
    assign_prizes,
    calculate_standings,
    compute_tournament_state,
    extract_statistics,
    format_record,
    resolve_match,
    round_complete,
    sort_standings,
    win_rate,
)

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "GameResult",
    "MatchResult",
    "MatchStatus",
    "Pairing",
    "Player",
    "Prize",
    "PrizeAward",
    "ResolutionSource",
    "Side",
    "StatRecord",
    "StatisticsSummary",
    "Tournament",
    "TournamentState",
    "TournamentType",
    "assign_prizes",
    "calculate_standings",
    "compute_tournament_state",
    "extract_statistics",
    "format_record",
    "resolve_match",
    "round_complete",
    "sort_standings",
    "win_rate",
]
