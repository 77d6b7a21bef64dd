"""Standings: sorting, record formatting and derivation from results.

This module handles the ordered standings view shown to players and
directors, plus recomputation of every player's counters from the raw
result set.
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

import functools
from collections import defaultdict
from dataclasses import replace
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from tourneyresolve.config import DEFAULT_CONFIG, EngineConfig
from tourneyresolve.constants import (
    SORT_ASC,
    SORT_DESC,
    SORT_DRAWS,
    SORT_KEY_ALIASES,
    SORT_LOSSES,
    SORT_MATCH_WINS,
    SORT_NAME,
    SORT_RANK,
    SORT_SPREAD,
    SORT_WIN_RATE,
    SORT_WINS,
    STANDINGS_SORT_KEYS,
)
from tourneyresolve.models import (
    GameResult,
    Player,
    TournamentType,
    coerce_many,
    coerce_or_none,
)
from tourneyresolve.type_hints import Number, SortKey, SortOrder
from tourneyresolve.utils import setup_logger

logger = setup_logger(__name__)


# ========== Sorting ==========


def win_rate(player: Player) -> float:
    """Fraction of games won; 0.0 when no games have been played."""
    games = player.wins + player.losses + player.ties
    if games <= 0:
        return 0.0
    return player.wins / games


def game_score(player: Player) -> float:
    """Wins plus half a point per draw."""
    return player.wins + 0.5 * player.ties


def normalize_sort_key(sort_key: Optional[str]) -> str:
    """Resolve aliases; unknown keys fall back to rank."""
    key = SORT_KEY_ALIASES.get(sort_key, sort_key) if sort_key else SORT_RANK
    if key not in STANDINGS_SORT_KEYS:
        logger.warning("Unknown standings sort key %r, sorting by rank", sort_key)
        return SORT_RANK
    return key


def sort_value(
    player: Player, sort_key: str, config: EngineConfig = DEFAULT_CONFIG
) -> Union[Number, str]:
    """The comparable value of ``player`` under ``sort_key``."""
    if sort_key == SORT_RANK:
        return player.rank if player.rank is not None else config.unranked_rank
    if sort_key == SORT_NAME:
        return (player.name or "").casefold()
    if sort_key == SORT_MATCH_WINS:
        return player.match_wins
    if sort_key == SORT_WINS:
        return player.wins
    if sort_key == SORT_LOSSES:
        return player.losses
    if sort_key == SORT_DRAWS:
        return player.ties
    if sort_key == SORT_WIN_RATE:
        return win_rate(player)
    if sort_key == SORT_SPREAD:
        return player.spread
    return player.rank if player.rank is not None else config.unranked_rank


def compare_players(
    a: Player,
    b: Player,
    sort_key: str,
    descending: bool = False,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    """Two-way comparator: 1 if a sorts after b, -1 if before, 0 if equal."""
    value_a = sort_value(a, sort_key, config)
    value_b = sort_value(b, sort_key, config)

    if value_a > value_b:
        result = 1
    elif value_a < value_b:
        result = -1
    else:
        result = 0

    return -result if descending else result


def sort_standings(
    players: Optional[Iterable[Union[Player, Any]]],
    sort_key: Optional[SortKey] = SORT_RANK,
    sort_order: Optional[SortOrder] = SORT_ASC,
    config: Optional[EngineConfig] = None,
) -> List[Player]:
    """Return the players ordered for the standings table.

    Args:
        players: Roster entries (instances or records)
        sort_key: One of rank, name, matchWins, wins, losses, draws,
            winRate, spread (snake_case aliases accepted)
        sort_order: ``asc`` or ``desc``; anything else sorts ascending
        config: Engine configuration

    Returns:
        New list; players with equal values keep their input order
    """
    config = config or DEFAULT_CONFIG
    roster = coerce_many(Player, players)
    key = normalize_sort_key(sort_key)
    descending = (sort_order or "").lower() == SORT_DESC

    return sorted(
        roster,
        key=functools.cmp_to_key(
            lambda a, b: compare_players(a, b, key, descending, config)
        ),
    )


def format_record(player: Union[Player, Any]) -> str:
    """Win-loss record with draws split evenly between the two columns.

    ``3-2`` without draws, ``3.5-2.5`` for 3 wins, 2 losses and 1 draw.
    A missing player record formats as ``0-0``.
    """
    player = coerce_or_none(Player, player)
    if player is None:
        return "0-0"

    if player.ties == 0:
        return f"{player.wins}-{player.losses}"

    adjusted_wins = player.wins + 0.5 * player.ties
    adjusted_losses = player.losses + 0.5 * player.ties
    return f"{adjusted_wins:.1f}-{adjusted_losses:.1f}"


# ========== Derived Standings ==========


class _Counters:
    __slots__ = ("wins", "losses", "ties", "spread", "match_wins", "match_losses")

    def __init__(self) -> None:
        self.wins = 0
        self.losses = 0
        self.ties = 0
        self.spread: Number = 0
        self.match_wins = 0
        self.match_losses = 0


class StandingsCalculator:
    """Recomputes player counters and ranks from the result set.

    Ordering, strongest first:
    - Match wins (best-of-league only)
    - Game score (wins + half a point per draw)
    - Spread
    - Head-to-head games won between the two players
    - Seed (unseeded players last)
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def calculate(
        self,
        players: List[Player],
        results: List[GameResult],
        tournament_type: TournamentType,
        best_of_value: Optional[int] = None,
    ) -> List[Player]:
        """Derive counters and ranks for every player.

        Args:
            players: Roster; not modified
            results: All recorded results
            tournament_type: Competition format
            best_of_value: Series length for best-of-league matches

        Returns:
            New Player instances in rank order with ``rank`` set
        """
        scored = [
            r
            for r in results
            if r.player1_id is not None and r.player2_id is not None and r.has_scores
        ]
        counters = self._game_counters(scored)

        if tournament_type is TournamentType.BEST_OF_LEAGUE:
            best_of = best_of_value or self.config.default_best_of
            self._match_counters(scored, counters, best_of)

        head_to_head = self._head_to_head_wins(scored)
        is_league = tournament_type is TournamentType.BEST_OF_LEAGUE

        enriched = []
        for player in players:
            stats = counters.get(player.id) if player.id is not None else None
            stats = stats or _Counters()
            enriched.append(
                replace(
                    player,
                    wins=stats.wins,
                    losses=stats.losses,
                    ties=stats.ties,
                    spread=stats.spread,
                    match_wins=stats.match_wins if is_league else player.match_wins,
                    match_losses=(
                        stats.match_losses if is_league else player.match_losses
                    ),
                )
            )

        ordered = sorted(
            enriched,
            key=functools.cmp_to_key(
                lambda a, b: self._compare(a, b, is_league, head_to_head)
            ),
        )
        logger.debug(
            "Calculated standings for %d players from %d results",
            len(ordered),
            len(scored),
        )
        return [replace(player, rank=index + 1) for index, player in enumerate(ordered)]

    def _game_counters(self, results: List[GameResult]) -> Dict[str, _Counters]:
        counters: Dict[str, _Counters] = defaultdict(_Counters)
        for result in results:
            side1 = counters[result.player1_id]
            side2 = counters[result.player2_id]

            if result.score1 > result.score2:
                side1.wins += 1
                side2.losses += 1
            elif result.score2 > result.score1:
                side2.wins += 1
                side1.losses += 1
            else:
                side1.ties += 1
                side2.ties += 1

            side1.spread += result.score1 - result.score2
            side2.spread += result.score2 - result.score1
        return counters

    def _match_counters(
        self, results: List[GameResult], counters: Dict[str, _Counters], best_of: int
    ) -> None:
        majority = best_of // 2 + 1
        series: Dict[FrozenSet[str], Dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )

        for result in results:
            key = frozenset((result.player1_id, result.player2_id))
            if result.score1 > result.score2:
                series[key][result.player1_id] += 1
            elif result.score2 > result.score1:
                series[key][result.player2_id] += 1

        for pair, game_wins in series.items():
            if len(pair) != 2:
                continue
            first, second = sorted(pair)
            if game_wins[first] >= majority:
                counters[first].match_wins += 1
                counters[second].match_losses += 1
            elif game_wins[second] >= majority:
                counters[second].match_wins += 1
                counters[first].match_losses += 1

    def _head_to_head_wins(self, results: List[GameResult]) -> Dict[Tuple[str, str], int]:
        wins: Dict[Tuple[str, str], int] = defaultdict(int)
        for result in results:
            if result.score1 > result.score2:
                wins[(result.player1_id, result.player2_id)] += 1
            elif result.score2 > result.score1:
                wins[(result.player2_id, result.player1_id)] += 1
        return wins

    def _compare(
        self,
        a: Player,
        b: Player,
        is_league: bool,
        head_to_head: Dict[Tuple[str, str], int],
    ) -> int:
        if is_league and a.match_wins != b.match_wins:
            return b.match_wins - a.match_wins

        score_a, score_b = game_score(a), game_score(b)
        if score_a != score_b:
            return -1 if score_a > score_b else 1

        if a.spread != b.spread:
            return -1 if a.spread > b.spread else 1

        a_wins = head_to_head.get((a.id, b.id), 0)
        b_wins = head_to_head.get((b.id, a.id), 0)
        if a_wins != b_wins:
            return b_wins - a_wins

        seed_a = a.seed if a.seed is not None else self.config.unseeded_seed
        seed_b = b.seed if b.seed is not None else self.config.unseeded_seed
        return seed_a - seed_b


def calculate_standings(
    players: Optional[Iterable[Union[Player, Any]]],
    results: Optional[Iterable[Union[GameResult, Any]]],
    tournament_type: Union[TournamentType, str, None],
    best_of_value: Optional[int] = None,
    config: Optional[EngineConfig] = None,
) -> List[Player]:
    """Derive ranked standings purely from the recorded results."""
    return StandingsCalculator(config).calculate(
        coerce_many(Player, players),
        coerce_many(GameResult, results),
        TournamentType.parse(tournament_type),
        best_of_value,
    )
