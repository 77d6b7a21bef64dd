"""Type hints used in Tourney Resolve."""

from typing import Any, Literal, Mapping, Union

# Standings sort keys (camelCase as sent by the presentation layer,
# snake_case spellings accepted as aliases)
SortKey = Literal[
    "rank",
    "name",
    "matchWins",
    "wins",
    "losses",
    "draws",
    "winRate",
    "spread",
    "match_wins",
    "ties",
    "win_rate",
]
SortOrder = Literal["asc", "desc"]

# Raw record straight from the persistence collaborator
Record = Mapping[str, Any]

Number = Union[int, float]
# A statistic is either a number or the "N/A" placeholder
StatValue = Union[int, float, str]
