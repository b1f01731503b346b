"""LeagueTable and Competition data classes."""

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

from .group import Group


@dataclass
class LeagueTable:
    """The groups of one league stage.

    Attributes
    ----------
    groups : list of Group
        Groups in display order; names are unique.
    """

    groups: List[Group] = field(default_factory=list)

    @property
    def group_names(self) -> List[str]:
        return [group.name for group in self.groups]

    def get_group(self, name: str) -> Optional[Group]:
        """Return the group called ``name``, or None."""
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def group_of_team(self, team_id: str) -> Optional[Group]:
        """Return the group currently holding ``team_id``, or None."""
        for group in self.groups:
            if group.find_team(team_id) is not None:
                return group
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize league table to dictionary."""
        return {"groups": [group.to_dict() for group in self.groups]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeagueTable":
        """Deserialize league table from dictionary."""
        return cls(groups=[Group.from_dict(g) for g in data.get("groups", [])])


@dataclass
class Competition:
    """Root of a competition snapshot.

    Attributes
    ----------
    preliminary_round : LeagueTable
        The group stage.
    name : str
        Display name.
    """

    preliminary_round: LeagueTable = field(default_factory=LeagueTable)
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competition to dictionary."""
        return {
            "name": self.name,
            "preliminaryRound": self.preliminary_round.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competition":
        """Deserialize competition from dictionary."""
        return cls(
            preliminary_round=LeagueTable.from_dict(data.get("preliminaryRound", {})),
            name=data.get("name", ""),
        )
