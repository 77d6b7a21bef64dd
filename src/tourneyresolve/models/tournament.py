"""Tournament data model."""

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

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from tourneyresolve.constants import (
    DEFAULT_ROUND,
    FORMAT_BEST_OF_LEAGUE,
    FORMAT_SINGLE_GAME,
    STATUS_COMPLETED,
    STATUS_DRAFT,
)
from tourneyresolve.models.pairing import Pairing
from tourneyresolve.type_hints import Record
from tourneyresolve.utils import normalize_id, setup_logger, to_optional_int

logger = setup_logger(__name__)


class TournamentType(Enum):
    """The two competition formats the engine distinguishes."""

    SINGLE_GAME = FORMAT_SINGLE_GAME
    BEST_OF_LEAGUE = FORMAT_BEST_OF_LEAGUE

    @classmethod
    def parse(cls, value: Union["TournamentType", str, None]) -> "TournamentType":
        """Map a stored format name onto a TournamentType.

        Only ``best_of_league`` is treated specially; every other format
        (``individual``, ``team``, missing, ...) resolves like a single game.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == FORMAT_BEST_OF_LEAGUE:
            return cls.BEST_OF_LEAGUE
        return cls.SINGLE_GAME


PairingSchedule = Dict[int, List[Pairing]]


@dataclass
class Tournament:
    """A tournament event as far as progress tracking is concerned.

    Attributes:
        id: Tournament id
        name: Tournament name
        type: Competition format
        status: Lifecycle status as stored (``draft`` ... ``completed``)
        current_round: Round currently being played (1-based)
        rounds: Planned number of rounds, if known
        best_of_value: Series length for best-of-league events, if set
        pairing_schedule: Round number -> ordered pairings for that round
    """

    id: Optional[str] = None
    name: Optional[str] = None
    type: TournamentType = TournamentType.SINGLE_GAME
    status: str = STATUS_DRAFT
    current_round: int = DEFAULT_ROUND
    rounds: Optional[int] = None
    best_of_value: Optional[int] = None
    pairing_schedule: PairingSchedule = field(default_factory=dict)

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    def pairings_for_round(self, round_number: int) -> Optional[List[Pairing]]:
        """Return the scheduled pairings for a round, or None if unscheduled.

        An empty list means the round exists in the schedule without pairings.
        """
        return self.pairing_schedule.get(round_number)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "status": self.status,
            "currentRound": self.current_round,
            "rounds": self.rounds,
            "best_of_value": self.best_of_value,
            "pairing_schedule": {
                str(round_number): [p.to_dict() for p in pairings]
                for round_number, pairings in self.pairing_schedule.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Record) -> "Tournament":
        """Deserialize tournament from a storage record.

        Never raises on a malformed schedule: offending entries are dropped
        and logged.
        """
        current_round = to_optional_int(
            data.get("currentRound", data.get("current_round"))
        )
        if current_round is None or current_round < 1:
            current_round = DEFAULT_ROUND

        status = data.get("status")
        if not isinstance(status, str) or not status:
            status = STATUS_DRAFT

        return cls(
            id=normalize_id(data.get("id")),
            name=data.get("name"),
            type=TournamentType.parse(data.get("type")),
            status=status,
            current_round=current_round,
            rounds=to_optional_int(data.get("rounds")),
            best_of_value=to_optional_int(data.get("best_of_value")),
            pairing_schedule=parse_pairing_schedule(data.get("pairing_schedule")),
        )


def parse_pairing_schedule(raw: Any) -> PairingSchedule:
    """Build a round -> pairings mapping from a stored schedule.

    Args:
        raw: Mapping of round number (int or numeric string) to a list of
            pairing records or Pairing instances

    Returns:
        Cleaned schedule; pairings without a round take the schedule key
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        logger.warning(
            "Ignoring pairing schedule of type %s", type(raw).__name__
        )
        return {}

    schedule: PairingSchedule = {}
    for key, entries in raw.items():
        round_number = to_optional_int(key)
        if round_number is None or round_number < 1:
            logger.warning("Dropping schedule entry with invalid round key %r", key)
            continue
        if entries is None:
            continue
        if not isinstance(entries, (list, tuple)):
            logger.warning(
                "Dropping round %d schedule: expected a list, got %s",
                round_number,
                type(entries).__name__,
            )
            continue

        pairings: List[Pairing] = []
        for entry in entries:
            if isinstance(entry, Pairing):
                pairing = entry
            elif isinstance(entry, Mapping):
                pairing = Pairing.from_dict(entry)
            else:
                logger.warning(
                    "Dropping malformed pairing in round %d: %r", round_number, entry
                )
                continue

            if pairing.round is None:
                pairing = replace(pairing, round=round_number)
            pairings.append(pairing)

        schedule[round_number] = pairings

    return schedule
