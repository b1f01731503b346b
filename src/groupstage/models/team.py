"""Team and TeamStat data classes."""

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
from typing import Any, Dict

from groupstage.constants import STAT_COUNTERS


@dataclass
class Team:
    """A participating team.

    Attributes
    ----------
    id : str
        Identifier, unique across the competition.
    name : str
        Display name.
    """

    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        return cls(id=data["id"], name=data.get("name", ""))


@dataclass
class TeamStat:
    """A team's standing inside one group.

    Every counter is derived from the group's matches. ``goal_difference`` is
    always ``goals_for - goals_against`` and is only ever written together
    with those two.

    Attributes
    ----------
    team : Team
        The team these standings belong to.
    played, wins, draws, losses : int
        Match counts.
    goals_for, goals_against, goal_difference : int
        Goal totals.
    points : int
        League points.
    """

    team: Team
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    @property
    def team_id(self) -> str:
        return self.team.id

    def reset(self) -> None:
        """Zero every counter."""
        for counter in STAT_COUNTERS:
            setattr(self, counter, 0)

    def add_goals(self, scored: int, conceded: int) -> None:
        """Record one played match's goals and refresh the difference."""
        self.played += 1
        self.goals_for += scored
        self.goals_against += conceded
        self.goal_difference = self.goals_for - self.goals_against

    def counters(self) -> Dict[str, int]:
        """Return the counters keyed by attribute name."""
        return {counter: getattr(self, counter) for counter in STAT_COUNTERS}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team stats to dictionary."""
        return {
            "team": self.team.to_dict(),
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goalsFor": self.goals_for,
            "goalsAgainst": self.goals_against,
            "goalDifference": self.goal_difference,
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamStat":
        """Deserialize team stats from dictionary."""
        goals_for = data.get("goalsFor", 0)
        goals_against = data.get("goalsAgainst", 0)
        return cls(
            team=Team.from_dict(data["team"]),
            played=data.get("played", 0),
            wins=data.get("wins", 0),
            draws=data.get("draws", 0),
            losses=data.get("losses", 0),
            goals_for=goals_for,
            goals_against=goals_against,
            goal_difference=goals_for - goals_against,
            points=data.get("points", 0),
        )
