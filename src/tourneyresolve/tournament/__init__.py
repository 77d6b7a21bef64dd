"""Tournament progress and result-resolution engine.

This package derives every piece of tournament state from the stored
pairings, results and roster: pairing outcomes, round and tournament
completion, standings and statistics.
"""

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

from tourneyresolve.tournament.prizes import PrizeAward, assign_prizes
from tourneyresolve.tournament.result_resolver import (
    MatchResult,
    MatchStatus,
    ResolutionSource,
    ResultResolver,
    resolve_match,
)
from tourneyresolve.tournament.round_state import is_round_complete, round_complete
from tourneyresolve.tournament.standings import (
    StandingsCalculator,
    calculate_standings,
    format_record,
    sort_standings,
    win_rate,
)
from tourneyresolve.tournament.statistics import (
    StatisticsExtractor,
    StatisticsSummary,
    StatRecord,
    extract_statistics,
)
from tourneyresolve.tournament.tournament_state import (
    TournamentState,
    compute_tournament_state,
    get_status_message,
)

__all__ = [
    "MatchResult",
    "MatchStatus",
    "PrizeAward",
    "ResolutionSource",
    "ResultResolver",
    "StandingsCalculator",
    "StatRecord",
    "StatisticsExtractor",
    "StatisticsSummary",
    "TournamentState",
    "assign_prizes",
    "calculate_standings",
    "compute_tournament_state",
    "extract_statistics",
    "format_record",
    "get_status_message",
    "is_round_complete",
    "resolve_match",
    "round_complete",
    "sort_standings",
    "win_rate",
]
