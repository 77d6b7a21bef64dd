"""Tournament-wide extremal statistics (high game, biggest upset, ...)."""

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
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Union

from tourneyresolve.config import DEFAULT_CONFIG, EngineConfig
from tourneyresolve.models import GameResult, Player, coerce_many
from tourneyresolve.type_hints import StatValue
from tourneyresolve.utils import format_score, setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class StatRecord:
    """One extremal statistic.

    Attributes:
        value: The extreme value, or the placeholder when nothing qualified
        player: Scoring player / first player / winner, depending on the stat
        opponent: Opponent / second player / loser, depending on the stat
        detail: Score line, or ``"<winner rating> vs <loser rating>"``
    """

    value: StatValue
    player: str = ""
    opponent: str = ""
    detail: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "player": self.player,
            "opponent": self.opponent,
            "detail": self.detail,
        }


@dataclass(frozen=True)
class StatisticsSummary:
    high_game: StatRecord
    low_game: StatRecord
    high_combined: StatRecord
    largest_blowout: StatRecord
    biggest_upset: StatRecord

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {
            "highGame": self.high_game.to_dict(),
            "lowGame": self.low_game.to_dict(),
            "highCombined": self.high_combined.to_dict(),
            "largestBlowout": self.largest_blowout.to_dict(),
            "biggestUpset": self.biggest_upset.to_dict(),
        }


@dataclass(frozen=True)
class _Extremes:
    high_game: Optional[StatRecord] = None
    low_game: Optional[StatRecord] = None
    high_combined: Optional[StatRecord] = None
    largest_blowout: Optional[StatRecord] = None
    biggest_upset: Optional[StatRecord] = None


class StatisticsExtractor:
    """Folds the result set into five independent running extrema.

    Ties keep the first record seen: every update requires a strictly
    better value.
    """

    def __init__(
        self, players: Iterable[Player], config: Optional[EngineConfig] = None
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.roster: Dict[str, Player] = {}
        for player in players:
            if player.id is not None and player.id not in self.roster:
                self.roster[player.id] = player

    def extract(self, results: Iterable[GameResult]) -> StatisticsSummary:
        extremes = functools.reduce(self._step, results, _Extremes())
        placeholder = StatRecord(self.config.placeholder)
        return StatisticsSummary(
            high_game=extremes.high_game or placeholder,
            low_game=extremes.low_game or placeholder,
            high_combined=extremes.high_combined or placeholder,
            largest_blowout=extremes.largest_blowout or placeholder,
            biggest_upset=extremes.biggest_upset or placeholder,
        )

    def _name(self, result_name: Optional[str], player_id: Optional[str]) -> str:
        if result_name:
            return result_name
        player = self.roster.get(player_id) if player_id is not None else None
        if player is not None and player.name:
            return player.name
        return self.config.unknown_player_name

    def _step(self, acc: _Extremes, result: GameResult) -> _Extremes:
        updates: Dict[str, StatRecord] = {}

        if result.has_scores:
            score1, score2 = result.score1, result.score2
            name1 = self._name(result.player1_name, result.player1_id)
            name2 = self._name(result.player2_name, result.player2_id)
            line = f"{format_score(score1)}-{format_score(score2)}"
            reverse_line = f"{format_score(score2)}-{format_score(score1)}"

            high = acc.high_game
            if high is None or score1 > high.value:
                high = StatRecord(score1, name1, name2, line)
            if score2 > high.value:
                high = StatRecord(score2, name2, name1, reverse_line)
            updates["high_game"] = high

            low = acc.low_game
            if low is None or score1 < low.value:
                low = StatRecord(score1, name1, name2, line)
            if score2 < low.value:
                low = StatRecord(score2, name2, name1, reverse_line)
            updates["low_game"] = low

            combined = score1 + score2
            if acc.high_combined is None or combined > acc.high_combined.value:
                updates["high_combined"] = StatRecord(combined, name1, name2, line)

            margin = abs(score1 - score2)
            if margin > 0 and (
                acc.largest_blowout is None or margin > acc.largest_blowout.value
            ):
                if score1 > score2:
                    updates["largest_blowout"] = StatRecord(margin, name1, name2, line)
                else:
                    updates["largest_blowout"] = StatRecord(margin, name2, name1, line)

            upset = self._upset(result)
            if upset is not None and (
                acc.biggest_upset is None or upset.value > acc.biggest_upset.value
            ):
                updates["biggest_upset"] = upset

        return replace(acc, **updates) if updates else acc

    def _upset(self, result: GameResult) -> Optional[StatRecord]:
        """Upset candidate for a scored result, if it is one."""
        player1 = self.roster.get(result.player1_id)
        player2 = self.roster.get(result.player2_id)
        if player1 is None or player2 is None:
            return None
        if not (player1.is_rated and player2.is_rated):
            return None

        if result.score1 > result.score2:
            winner, loser = player1, player2
        elif result.score2 > result.score1:
            winner, loser = player2, player1
        else:
            return None

        if winner.rating >= loser.rating:
            return None

        return StatRecord(
            loser.rating - winner.rating,
            winner.display_name,
            loser.display_name,
            f"{winner.rating} vs {loser.rating}",
        )


def extract_statistics(
    results: Optional[Iterable[Union[GameResult, Any]]],
    players: Optional[Iterable[Union[Player, Any]]],
    config: Optional[EngineConfig] = None,
) -> StatisticsSummary:
    """Extract high/low game, high combined, largest blowout and biggest upset.

    Args:
        results: All recorded results (instances or records)
        players: Roster used for names and ratings
        config: Engine configuration

    Returns:
        StatisticsSummary; statistics with no qualifying result hold the
        ``N/A`` placeholder
    """
    extractor = StatisticsExtractor(coerce_many(Player, players), config)
    summary = extractor.extract(coerce_many(GameResult, results))
    logger.debug("Extracted statistics: %s", summary)
    return summary
