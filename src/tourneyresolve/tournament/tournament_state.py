"""
Tournament lifecycle state.

The state is never stored: it is derived from the tournament, its roster and
the recorded results every time it is asked for.
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

from enum import Enum
from typing import Any, Iterable, Optional, Union

from tourneyresolve.config import EngineConfig
from tourneyresolve.constants import DEFAULT_ROUND
from tourneyresolve.models import (
    GameResult,
    Player,
    Tournament,
    TournamentType,
    coerce_many,
    coerce_or_none,
)
from tourneyresolve.tournament.round_state import is_round_complete
from tourneyresolve.utils import setup_logger

logger = setup_logger(__name__)


class TournamentState(Enum):
    """
    Lifecycle state of a tournament.

    Flat on purpose: each value is computed directly from current data.
    """

    NO_TOURNAMENT = "NO_TOURNAMENT"  # No tournament loaded
    EMPTY_ROSTER = "EMPTY_ROSTER"  # Fewer than two players
    ROSTER_READY = "ROSTER_READY"  # Enough players, current round not paired
    ROUND_IN_PROGRESS = "ROUND_IN_PROGRESS"  # Current round awaiting results
    ROUND_COMPLETE = "ROUND_COMPLETE"  # Current round fully resolved
    TOURNAMENT_COMPLETE = "TOURNAMENT_COMPLETE"  # Terminal


MIN_ROSTER_SIZE = 2


def compute_tournament_state(
    tournament: Union[Tournament, Any, None],
    players: Optional[Iterable[Union[Player, Any]]],
    results: Optional[Iterable[Union[GameResult, Any]]],
    config: Optional[EngineConfig] = None,
) -> TournamentState:
    """
    Compute the lifecycle state of a tournament.

    Parameters
    ----------
    tournament : Tournament, mapping or None
        The tournament, or None if no tournament is loaded
    players : iterable
        Roster entries (instances or records)
    results : iterable
        Recorded game results (instances or records)
    config : EngineConfig, optional
        Engine configuration

    Returns
    -------
    TournamentState
        The state derived from the given data
    """
    if tournament is None:
        return TournamentState.NO_TOURNAMENT

    tournament = coerce_or_none(Tournament, tournament)
    if tournament is None:
        return TournamentState.NO_TOURNAMENT
    if tournament.is_completed:
        return TournamentState.TOURNAMENT_COMPLETE

    roster = coerce_many(Player, players)
    round_number = tournament.current_round
    pairings = tournament.pairings_for_round(round_number)

    # Best-of-league rounds may run without an explicit schedule entry
    if pairings is not None or tournament.type is TournamentType.BEST_OF_LEAGUE:
        complete = is_round_complete(
            round_number,
            pairings or [],
            coerce_many(GameResult, results),
            tournament.type,
            len(roster),
            config,
        )
        state = (
            TournamentState.ROUND_COMPLETE
            if complete
            else TournamentState.ROUND_IN_PROGRESS
        )
    elif len(roster) >= MIN_ROSTER_SIZE:
        state = TournamentState.ROSTER_READY
    else:
        state = TournamentState.EMPTY_ROSTER

    logger.debug(
        "Tournament %s round %d -> %s", tournament.id, round_number, state.value
    )
    return state


def get_status_message(
    state: TournamentState, tournament: Optional[Tournament] = None
) -> str:
    """
    Get a human-readable status message for a state.

    Parameters
    ----------
    state : TournamentState
        The computed state
    tournament : Tournament, optional
        Used for round numbers in the message

    Returns
    -------
    str
        A message describing what the director should do next
    """
    round_number = tournament.current_round if tournament else DEFAULT_ROUND
    total_rounds = tournament.rounds if tournament else None

    if state == TournamentState.NO_TOURNAMENT:
        return "No tournament loaded."
    elif state == TournamentState.EMPTY_ROSTER:
        return "Add at least two players to begin."
    elif state == TournamentState.ROSTER_READY:
        return f"Roster ready. Pair round {round_number} to begin."
    elif state == TournamentState.ROUND_IN_PROGRESS:
        return f"Round {round_number} in progress: waiting for results."
    elif state == TournamentState.ROUND_COMPLETE:
        if total_rounds is not None and round_number >= total_rounds:
            return f"Round {round_number} complete. Ready to finish the tournament."
        return (
            f"Round {round_number} complete. "
            f"Ready to proceed to round {round_number + 1}."
        )
    elif state == TournamentState.TOURNAMENT_COMPLETE:
        return "Tournament complete."
    return ""
