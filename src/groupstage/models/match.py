"""Match data class."""

# Group Stage
# Copyright (C) 2025  Group Stage developers
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


def is_score(value: Any) -> bool:
    """True for a usable numeric score. Booleans are not scores."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Match:
    """A single group-stage fixture and, once played, its result.

    Attributes
    ----------
    id : str
        Identifier, unique within the group.
    team1_id, team2_id : str
        The two sides.
    team1_score, team2_score : int or None
        Goals scored; None until entered.
    played : bool
        Whether the result counts towards the standings.
    winner_id : str or None
        Winner of a level score decided another way, e.g. a penalty shootout.
    start_time : str or None
        Scheduled kick-off as "HH:MM".
    court : int or None
        Scheduled court, 1-based.
    """

    id: str
    team1_id: str
    team2_id: str
    team1_score: Optional[int] = None
    team2_score: Optional[int] = None
    played: bool = False
    winner_id: Optional[str] = None
    start_time: Optional[str] = None
    court: Optional[int] = None

    @property
    def has_result(self) -> bool:
        """Whether this match contributes to the standings."""
        return bool(self.played) and is_score(self.team1_score) and is_score(self.team2_score)

    def involves(self, team_id: str) -> bool:
        return team_id in (self.team1_id, self.team2_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "team1Id": self.team1_id,
            "team2Id": self.team2_id,
            "played": self.played,
        }
        # Optional fields are omitted rather than written as null
        optional = {
            "team1Score": self.team1_score,
            "team2Score": self.team2_score,
            "winnerId": self.winner_id,
            "startTime": self.start_time,
            "court": self.court,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            team1_id=data["team1Id"],
            team2_id=data["team2Id"],
            team1_score=data.get("team1Score"),
            team2_score=data.get("team2Score"),
            played=data.get("played", False),
            winner_id=data.get("winnerId"),
            start_time=data.get("startTime"),
            court=data.get("court"),
        )
