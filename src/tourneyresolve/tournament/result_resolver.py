"""Outcome resolution for a single pairing.

A pairing can be decided by several competing sources of truth. They are
consulted in a fixed order and the first one that yields an outcome wins:

1. scores embedded on the pairing itself
2. best-of-league series counts embedded on the pairing
3. recorded game results for the pairing's round
4. a declared winner without a numeric score

Anything else is pending. Byes are decided before any of these.
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

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from tourneyresolve.config import DEFAULT_CONFIG, EngineConfig
from tourneyresolve.constants import DECLARED_LOSS_SCORE, DECLARED_WIN_SCORE
from tourneyresolve.models import (
    GameResult,
    Pairing,
    Side,
    TournamentType,
    coerce_many,
    coerce_or_none,
)
from tourneyresolve.type_hints import Number
from tourneyresolve.utils import format_score, setup_logger, to_optional_int
from tourneyresolve.utils.timestamps import timestamp_sort_key

logger = setup_logger(__name__)


class MatchStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    DRAW = "draw"


class ResolutionSource(Enum):
    """Which piece of data decided a pairing."""

    BYE = "bye"
    EMBEDDED_SCORE = "embedded_score"
    SERIES_COUNT = "series_count"
    RECORDED_RESULTS = "recorded_results"
    DECLARED_WINNER = "declared_winner"
    NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """The resolved outcome of one pairing.

    Attributes:
        status: Pending, completed or draw
        winner: Winning side for completed pairings, else None
        display_score: ``"<side1>-<side2>"`` in the pairing's orientation,
            None while pending
        source: Which resolution tier produced the outcome
    """

    status: MatchStatus
    winner: Optional[Side] = None
    display_score: Optional[str] = None
    source: ResolutionSource = ResolutionSource.NONE

    @property
    def is_pending(self) -> bool:
        return self.status is MatchStatus.PENDING

    def winner_score(self) -> Optional[str]:
        """Display score from the winner's point of view."""
        if self.display_score is None or self.winner is not Side.PLAYER2:
            return self.display_score
        first, sep, second = self.display_score.partition("-")
        return f"{second}{sep}{first}" if sep else self.display_score

    def describe(self, pairing: Pairing, config: Optional[EngineConfig] = None) -> str:
        """Human-readable label such as ``"Alice wins 2-1"``."""
        if self.status is MatchStatus.PENDING:
            return "Pending"
        if self.status is MatchStatus.DRAW:
            return f"Draw {self.display_score}" if self.display_score else "Draw"

        name = side_label(pairing, self.winner, config)
        if self.source is ResolutionSource.BYE:
            return f"{name} (bye)"
        return f"{name} wins {self.winner_score()}"


PENDING = MatchResult(status=MatchStatus.PENDING)


def side_label(
    pairing: Pairing, side: Optional[Side], config: Optional[EngineConfig] = None
) -> str:
    """Best available label for one side of a pairing."""
    unknown_name = (config or DEFAULT_CONFIG).unknown_player_name
    if side is None:
        return unknown_name
    return (
        pairing.side_name(side)
        or pairing.side_id(side)
        or pairing.side_team_id(side)
        or unknown_name
    )


def compare_sides(
    value1: Number, value2: Number, source: ResolutionSource
) -> MatchResult:
    """Decide an outcome from two comparable per-side values.

    Values are compared as numbers, never as display strings.
    """
    display_score = f"{format_score(value1)}-{format_score(value2)}"
    if value1 > value2:
        return MatchResult(MatchStatus.COMPLETED, Side.PLAYER1, display_score, source)
    if value2 > value1:
        return MatchResult(MatchStatus.COMPLETED, Side.PLAYER2, display_score, source)
    return MatchResult(MatchStatus.DRAW, None, display_score, source)


def orient_result(result: GameResult, pairing: Pairing) -> Tuple[Number, Number]:
    """Return ``(side1_score, side2_score)`` seen from the pairing's orientation.

    A result reported with the players the other way round has its scores
    swapped.
    """
    if (
        result.player1_id == pairing.player2_id
        and result.player1_id != pairing.player1_id
    ):
        return result.score2, result.score1
    return result.score1, result.score2


Rule = Callable[[Pairing, Sequence[GameResult], TournamentType], Optional[MatchResult]]


class ResultResolver:
    """Resolves pairings against the recorded results.

    The resolver holds no state besides its configuration; every call
    derives the outcome from the arguments alone.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        # Order is significant: the first rule returning an outcome wins
        self._rules: Tuple[Rule, ...] = (
            self._from_embedded_score,
            self._from_series_count,
            self._from_recorded_results,
            self._from_declared_winner,
        )

    def resolve(
        self,
        pairing: Pairing,
        results: Sequence[GameResult],
        tournament_type: TournamentType,
        round_number: Optional[int] = None,
    ) -> MatchResult:
        """Resolve one pairing.

        Args:
            pairing: The pairing to resolve
            results: Every recorded result of the tournament
            tournament_type: Competition format
            round_number: Round the pairing is scheduled in, used when the
                pairing record carries no round of its own

        Returns:
            The pairing's outcome; pending if nothing decides it
        """
        if pairing.round is None and round_number is not None:
            pairing = replace(pairing, round=round_number)

        bye_outcome = self._from_bye(pairing)
        if bye_outcome is not None:
            return bye_outcome

        for rule in self._rules:
            outcome = rule(pairing, results, tournament_type)
            if outcome is not None:
                logger.debug(
                    "Round %s %s vs %s resolved by %s: %s %s",
                    pairing.round,
                    side_label(pairing, Side.PLAYER1, self.config),
                    side_label(pairing, Side.PLAYER2, self.config),
                    outcome.source.value,
                    outcome.status.value,
                    outcome.display_score,
                )
                return outcome

        return PENDING

    def _from_bye(self, pairing: Pairing) -> Optional[MatchResult]:
        bye_side = pairing.bye_side(self.config.bye_marker)
        if bye_side is None:
            return None

        winner = bye_side.other
        display_score = (
            DECLARED_WIN_SCORE if winner is Side.PLAYER1 else DECLARED_LOSS_SCORE
        )
        return MatchResult(
            MatchStatus.COMPLETED, winner, display_score, ResolutionSource.BYE
        )

    def _from_embedded_score(
        self,
        pairing: Pairing,
        results: Sequence[GameResult],
        tournament_type: TournamentType,
    ) -> Optional[MatchResult]:
        if not pairing.has_embedded_scores():
            return None
        return compare_sides(
            pairing.score1, pairing.score2, ResolutionSource.EMBEDDED_SCORE
        )

    def _from_series_count(
        self,
        pairing: Pairing,
        results: Sequence[GameResult],
        tournament_type: TournamentType,
    ) -> Optional[MatchResult]:
        if tournament_type is not TournamentType.BEST_OF_LEAGUE:
            return None
        if pairing.player1_wins is None and pairing.player2_wins is None:
            return None
        if pairing.series_games() <= 0:
            return None
        return compare_sides(
            pairing.player1_wins or 0,
            pairing.player2_wins or 0,
            ResolutionSource.SERIES_COUNT,
        )

    def _from_recorded_results(
        self,
        pairing: Pairing,
        results: Sequence[GameResult],
        tournament_type: TournamentType,
    ) -> Optional[MatchResult]:
        matching = self.matching_results(pairing, results)
        if not matching:
            return None

        if tournament_type is TournamentType.BEST_OF_LEAGUE:
            side1_wins = 0
            side2_wins = 0
            for result in matching:
                score1, score2 = orient_result(result, pairing)
                if score1 > score2:
                    side1_wins += 1
                elif score2 > score1:
                    side2_wins += 1
            return compare_sides(
                side1_wins, side2_wins, ResolutionSource.RECORDED_RESULTS
            )

        # Single game: later entries supersede earlier corrections
        latest = matching[-1]
        if len(matching) > 1:
            logger.debug(
                "Round %s %s vs %s has %d results; using the most recent",
                pairing.round,
                side_label(pairing, Side.PLAYER1, self.config),
                side_label(pairing, Side.PLAYER2, self.config),
                len(matching),
            )
        score1, score2 = orient_result(latest, pairing)
        return compare_sides(score1, score2, ResolutionSource.RECORDED_RESULTS)

    def _from_declared_winner(
        self,
        pairing: Pairing,
        results: Sequence[GameResult],
        tournament_type: TournamentType,
    ) -> Optional[MatchResult]:
        if pairing.winner_id is None:
            return None

        if pairing.winner_id in (pairing.player1_id, pairing.player1_team_id):
            return MatchResult(
                MatchStatus.COMPLETED,
                Side.PLAYER1,
                DECLARED_WIN_SCORE,
                ResolutionSource.DECLARED_WINNER,
            )
        if pairing.winner_id in (pairing.player2_id, pairing.player2_team_id):
            return MatchResult(
                MatchStatus.COMPLETED,
                Side.PLAYER2,
                DECLARED_LOSS_SCORE,
                ResolutionSource.DECLARED_WINNER,
            )

        logger.warning(
            "Declared winner %s is not part of pairing %s vs %s",
            pairing.winner_id,
            side_label(pairing, Side.PLAYER1, self.config),
            side_label(pairing, Side.PLAYER2, self.config),
        )
        return None

    def matching_results(
        self, pairing: Pairing, results: Iterable[GameResult]
    ) -> List[GameResult]:
        """Scored results for this pairing's players and round, oldest first."""
        if pairing.player1_id is None or pairing.player2_id is None:
            return []
        if pairing.round is None:
            logger.warning(
                "Pairing %s vs %s has no round; recorded results cannot be matched",
                side_label(pairing, Side.PLAYER1, self.config),
                side_label(pairing, Side.PLAYER2, self.config),
            )
            return []

        matching = [
            result
            for result in results
            if result.round == pairing.round
            and result.has_scores
            and result.involves(pairing.player1_id, pairing.player2_id)
        ]

        if self.config.order_results_by_timestamp:
            matching.sort(key=lambda result: timestamp_sort_key(result.created_at))
        return matching


def resolve_match(
    pairing: Union[Pairing, Any],
    results: Optional[Iterable[Union[GameResult, Any]]],
    tournament_type: Union[TournamentType, str, None],
    config: Optional[EngineConfig] = None,
    round_number: Optional[int] = None,
) -> MatchResult:
    """Resolve the outcome of one pairing.

    Args:
        pairing: Pairing instance or pairing record
        results: All recorded results (instances or records)
        tournament_type: ``single_game`` / ``best_of_league`` or the enum
        config: Engine configuration, defaults apply when omitted
        round_number: Schedule round of the pairing, for pairing records
            stored without a ``round`` key

    Returns:
        MatchResult describing status, winner and display score; pending
        when the pairing record is missing or malformed
    """
    resolved_pairing = coerce_or_none(Pairing, pairing)
    if resolved_pairing is None:
        return PENDING

    return ResultResolver(config).resolve(
        resolved_pairing,
        coerce_many(GameResult, results),
        TournamentType.parse(tournament_type),
        to_optional_int(round_number),
    )
