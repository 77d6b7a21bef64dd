"""Coercion of raw records into model instances."""

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
from typing import Any, Iterable, List, Optional, Type, TypeVar

from tourneyresolve.exceptions import InvalidRecordException
from tourneyresolve.utils import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


def coerce(model: Type[T], value: Any) -> T:
    """Return ``value`` as an instance of ``model``.

    Args:
        model: Model class exposing a ``from_dict`` classmethod
        value: Model instance or mapping as returned by the data store

    Raises:
        InvalidRecordException: If value is neither
    """
    if isinstance(value, model):
        return value
    if isinstance(value, Mapping):
        return model.from_dict(value)  # type: ignore[attr-defined]
    raise InvalidRecordException(
        f"Expected {model.__name__} or mapping, got {type(value).__name__}"
    )


def coerce_or_none(model: Type[T], value: Any) -> Optional[T]:
    """Like :func:`coerce`, but a missing or malformed record gives None."""
    try:
        return coerce(model, value)
    except InvalidRecordException as e:
        logger.warning("Ignoring malformed record: %s", e)
        return None


def coerce_many(model: Type[T], values: Optional[Iterable[Any]]) -> List[T]:
    """Coerce every record in ``values``, dropping malformed entries.

    None is an empty collection.
    """
    if values is None:
        return []
    if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Iterable):
        logger.warning(
            "Ignoring %s collection of type %s", model.__name__, type(values).__name__
        )
        return []

    records: List[T] = []
    for value in values:
        record = coerce_or_none(model, value)
        if record is not None:
            records.append(record)
    return records
