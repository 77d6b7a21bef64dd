"""Shared helpers: logging setup and lenient value coercion."""

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

import logging
import math
from typing import Any, Optional

from tourneyresolve.constants import PACKAGE_LOGGER_NAME
from tourneyresolve.type_hints import Number

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package logger hierarchy.

    The package root logger gets one stream handler the first time any
    module asks for a logger; module loggers propagate to it.
    """
    root = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    return logging.getLogger(name)


# ========== Value Coercion ==========


def to_number(value: Any) -> Optional[Number]:
    """Interpret ``value`` as a real number.

    Ints and floats pass through, numeric strings are parsed. Booleans,
    NaN, infinities and anything unparseable give None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return value if math.isfinite(value) else None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None

    return None


def to_int(value: Any, default: int = 0) -> int:
    """Interpret ``value`` as an integer counter, falling back to ``default``."""
    number = to_number(value)
    if number is None:
        return default
    return int(number)


def to_optional_int(value: Any) -> Optional[int]:
    """Like :func:`to_int` but keeps absence as None."""
    number = to_number(value)
    if number is None:
        return None
    return int(number)


def normalize_id(value: Any) -> Optional[str]:
    """Normalise a surrogate id so ``1`` and ``"1"`` compare equal."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def format_score(value: Number) -> str:
    """Render a score: integral values without decimals (21, not 21.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
