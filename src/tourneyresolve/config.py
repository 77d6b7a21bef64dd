"""Engine configuration."""

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

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from tourneyresolve.constants import (
    BYE_MARKER,
    DEFAULT_BEST_OF,
    NOT_AVAILABLE,
    UNKNOWN_PLAYER_NAME,
    UNRANKED_RANK,
    UNSEEDED_SEED,
)
from tourneyresolve.exceptions import InvalidConfigurationException


@dataclass(frozen=True)
class EngineConfig:
    """Settings shared by the resolution and aggregation functions.

    Attributes:
        bye_marker: Display name that marks the synthetic bye opponent
        unranked_rank: Rank used for players without one (sorts last)
        unseeded_seed: Seed used for players without one
        placeholder: Value reported for statistics with no data
        unknown_player_name: Label for players missing from the roster
        default_best_of: Series length when a league does not define one
        order_results_by_timestamp: Decide "most recent result" by
            ``created_at`` instead of collection order
    """

    bye_marker: str = BYE_MARKER
    unranked_rank: int = UNRANKED_RANK
    unseeded_seed: int = UNSEEDED_SEED
    placeholder: str = NOT_AVAILABLE
    unknown_player_name: str = UNKNOWN_PLAYER_NAME
    default_best_of: int = DEFAULT_BEST_OF
    order_results_by_timestamp: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "EngineConfig":
        """Deserialize configuration from dictionary.

        Unknown keys are ignored; keys present with the wrong type raise.

        Raises:
            InvalidConfigurationException: If a value has the wrong type
        """
        if not data:
            return cls()

        kwargs: Dict[str, Any] = {}
        for config_field in fields(cls):
            if config_field.name not in data:
                continue
            value = data[config_field.name]
            expected = type(getattr(DEFAULT_CONFIG, config_field.name))
            # bool is an int subclass; do not let True pass as a rank
            if isinstance(value, bool) and expected is not bool:
                raise InvalidConfigurationException(
                    f"{config_field.name} must be {expected.__name__}, got bool"
                )
            if not isinstance(value, expected):
                raise InvalidConfigurationException(
                    f"{config_field.name} must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            kwargs[config_field.name] = value

        return cls(**kwargs)


DEFAULT_CONFIG = EngineConfig()
