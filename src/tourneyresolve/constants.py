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

# --- Constants ---
PACKAGE_LOGGER_NAME = "tourneyresolve"

# Tournament formats
FORMAT_SINGLE_GAME = "single_game"
FORMAT_BEST_OF_LEAGUE = "best_of_league"

# Tournament status values
STATUS_DRAFT = "draft"
STATUS_COMPLETED = "completed"

# Bye handling
BYE_MARKER = "BYE"

# Placeholders for absent data
NOT_AVAILABLE = "N/A"
UNKNOWN_PLAYER_NAME = "Unknown Player"

# Sentinel used when a player has no rank / seed yet (sorts last)
UNRANKED_RANK = 999
UNSEEDED_SEED = 999

# Default series length for best-of-league matches
DEFAULT_BEST_OF = 15

DEFAULT_ROUND = 1

# Nominal display scores for decisions without a numeric score
DECLARED_WIN_SCORE = "1-0"
DECLARED_LOSS_SCORE = "0-1"

# Sort directions
SORT_ASC = "asc"
SORT_DESC = "desc"

# Standings sort keys
SORT_RANK = "rank"
SORT_NAME = "name"
SORT_MATCH_WINS = "matchWins"
SORT_WINS = "wins"
SORT_LOSSES = "losses"
SORT_DRAWS = "draws"
SORT_WIN_RATE = "winRate"
SORT_SPREAD = "spread"

# Alternate spellings accepted for sort keys
SORT_KEY_ALIASES = {
    "match_wins": SORT_MATCH_WINS,
    "ties": SORT_DRAWS,
    "win_rate": SORT_WIN_RATE,
}

STANDINGS_SORT_KEYS = [
    SORT_RANK,
    SORT_NAME,
    SORT_MATCH_WINS,
    SORT_WINS,
    SORT_LOSSES,
    SORT_DRAWS,
    SORT_WIN_RATE,
    SORT_SPREAD,
]
