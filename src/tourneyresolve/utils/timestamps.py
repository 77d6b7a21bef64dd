"""Parsing of ``created_at`` timestamps on result records."""

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

from datetime import datetime
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil import tz

from tourneyresolve.utils import setup_logger

logger = setup_logger(__name__)

# Records without a usable timestamp sort as the oldest
EARLIEST = datetime.min.replace(tzinfo=tz.UTC)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a ``created_at`` value into an aware datetime.

    Args:
        value: ISO-8601 string, datetime, or None

    Returns:
        Aware datetime (naive inputs are taken as UTC), or None if the
        value is missing or cannot be parsed
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            parsed = date_parser.isoparse(value.strip())
        except (ValueError, OverflowError):
            try:
                parsed = date_parser.parse(value)
            except (ValueError, OverflowError):
                logger.warning("Unparseable created_at timestamp: %r", value)
                return None
    else:
        logger.warning("Unsupported created_at type: %s", type(value).__name__)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    return parsed


def timestamp_sort_key(value: Any) -> datetime:
    """Sort key for ``created_at`` values; missing timestamps sort first."""
    parsed = parse_timestamp(value)
    return parsed if parsed is not None else EARLIEST
