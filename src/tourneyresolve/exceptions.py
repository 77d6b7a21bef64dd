"""Exceptions for use in Tourney Resolve"""

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


# ========== Base Application Exception ==========


class TourneyResolveException(Exception):
    """Base exception for all Tourney Resolve errors.

    The derivations themselves answer missing or partial data with
    placeholder values; only the record and configuration boundaries raise.
    """

    pass


# ========== Record Exceptions ==========


class RecordException(TourneyResolveException):
    """Base exception for errors in incoming records."""

    pass


class InvalidRecordException(RecordException):
    """Raised when a record is neither a model instance nor a mapping."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TourneyResolveException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
