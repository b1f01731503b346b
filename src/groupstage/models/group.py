"""Group data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .match import Match
from .team import TeamStat


@dataclass
class Group:
    """One round-robin group of the preliminary round.

    Attributes
    ----------
    name : str
        Group name, unique within its league table.
    teams : list of TeamStat
        One standing per member team.
    matches : list of Match or None
        The group's fixtures. A snapshot read from elsewhere may carry None
        here; the standings code replaces it with an empty list.
    """

    name: str
    teams: List[TeamStat] = field(default_factory=list)
    matches: Optional[List[Match]] = field(default_factory=list)

    @property
    def team_ids(self) -> List[str]:
        return [stats.team.id for stats in self.teams]

    def find_team(self, team_id: str) -> Optional[TeamStat]:
        """Return the standing for ``team_id``, or None."""
        for stats in self.teams:
            if stats.team.id == team_id:
                return stats
        return None

    def find_team_index(self, team_id: str) -> int:
        """Return the position of ``team_id`` in ``teams``, or -1."""
        for index, stats in enumerate(self.teams):
            if stats.team.id == team_id:
                return index
        return -1

    def find_match_index(self, match_id: str) -> int:
        """Return the position of ``match_id`` in ``matches``, or -1."""
        if not isinstance(self.matches, list):
            return -1
        for index, match in enumerate(self.matches):
            if isinstance(match, Match) and match.id == match_id:
                return index
        return -1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        data: Dict[str, Any] = {
            "name": self.name,
            "teams": [stats.to_dict() for stats in self.teams],
        }
        if isinstance(self.matches, list):
            data["matches"] = [m.to_dict() for m in self.matches]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        """Deserialize group from dictionary.

        A missing or malformed ``matches`` entry is kept as None so the
        standings code can report and repair it.
        """
        matches = data.get("matches")
        return cls(
            name=data["name"],
            teams=[TeamStat.from_dict(t) for t in data.get("teams", [])],
            matches=[Match.from_dict(m) for m in matches] if isinstance(matches, list) else None,
        )
