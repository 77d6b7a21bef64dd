"""Completion check for a single round."""

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

from typing import Any, Iterable, Optional, Sequence, Union

from tourneyresolve.config import DEFAULT_CONFIG, EngineConfig
from tourneyresolve.models import GameResult, Pairing, TournamentType, coerce_many
from tourneyresolve.utils import setup_logger

logger = setup_logger(__name__)


def expected_results(
    round_number: int,
    pairings: Sequence[Pairing],
    bye_marker: str = DEFAULT_CONFIG.bye_marker,
) -> int:
    """Number of results a single-game round needs: its non-bye pairings."""
    return sum(
        1
        for pairing in pairings
        if not pairing.is_bye(bye_marker)
        and (pairing.round is None or pairing.round == round_number)
    )


def results_in_round(round_number: int, results: Iterable[GameResult]) -> int:
    return sum(1 for result in results if result.round == round_number)


def is_round_complete(
    round_number: int,
    pairings: Sequence[Pairing],
    results: Sequence[GameResult],
    tournament_type: TournamentType,
    roster_size: int,
    config: Optional[EngineConfig] = None,
) -> bool:
    """Decide whether a round is fully resolved.

    Single-game rounds are complete once there are at least as many results
    as non-bye pairings. Best-of-league rounds count finished matches rather
    than games: they are complete once the round holds at least
    ``roster_size / 2`` results.
    """
    config = config or DEFAULT_CONFIG
    recorded = results_in_round(round_number, results)

    if tournament_type is TournamentType.BEST_OF_LEAGUE:
        needed = max(roster_size, 0) / 2
    else:
        needed = expected_results(round_number, pairings, config.bye_marker)

    complete = recorded >= needed
    logger.debug(
        "Round %d (%s): %d result(s) recorded, %s needed, complete=%s",
        round_number,
        tournament_type.value,
        recorded,
        needed,
        complete,
    )
    return complete


def round_complete(
    round_number: int,
    pairings: Optional[Iterable[Union[Pairing, Any]]],
    results: Optional[Iterable[Union[GameResult, Any]]],
    tournament_type: Union[TournamentType, str, None],
    roster_size: int,
    config: Optional[EngineConfig] = None,
) -> bool:
    """Record-accepting wrapper around :func:`is_round_complete`."""
    return is_round_complete(
        round_number,
        coerce_many(Pairing, pairings),
        coerce_many(GameResult, results),
        TournamentType.parse(tournament_type),
        roster_size,
        config,
    )
