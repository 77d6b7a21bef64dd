"""Prize data model."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tourneyresolve.type_hints import Record
from tourneyresolve.utils import normalize_id, to_optional_int


@dataclass
class Prize:
    """A prize awarded to whoever holds ``rank`` when standings are read."""

    rank: Optional[int]
    description: Optional[str] = None
    value: Optional[Any] = None
    id: Optional[str] = None

    @property
    def label(self) -> str:
        return self.description or f"Rank: {self.rank}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize prize to dictionary."""
        return {
            "id": self.id,
            "rank": self.rank,
            "description": self.description,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: Record) -> "Prize":
        """Deserialize prize from a storage record."""
        rank = to_optional_int(data.get("rank"))
        return cls(
            rank=rank if rank is not None and rank > 0 else None,
            description=data.get("description"),
            value=data.get("value"),
            id=normalize_id(data.get("id")),
        )
