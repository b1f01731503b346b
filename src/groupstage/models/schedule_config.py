"""ScheduleConfig data class."""

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

from groupstage.constants import DEFAULT_COURT_COUNT


@dataclass
class ScheduleConfig:
    """Court scheduling settings for a group's matches.

    Attributes
    ----------
    court_count : int
        Number of courts played on in parallel.
    start_time : str or None
        First kick-off on every court, "HH:MM".
    match_duration_minutes : int or None
        Length of one match.
    rest_minutes : int or None
        Gap after a match before its court is used again.
    """

    court_count: int = DEFAULT_COURT_COUNT
    start_time: Optional[str] = None
    match_duration_minutes: Optional[int] = None
    rest_minutes: Optional[int] = None

    @property
    def has_timing(self) -> bool:
        """True only when every timing value is present."""
        return (
            bool(self.start_time)
            and isinstance(self.match_duration_minutes, int)
            and isinstance(self.rest_minutes, int)
        )

    @property
    def slot_minutes(self) -> int:
        """Minutes a court is occupied per match, rest included."""
        return (self.match_duration_minutes or 0) + (self.rest_minutes or 0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "courtCount": self.court_count,
            "startTime": self.start_time,
            "matchDurationMinutes": self.match_duration_minutes,
            "restMinutes": self.rest_minutes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            court_count=data.get("courtCount", DEFAULT_COURT_COUNT),
            start_time=data.get("startTime"),
            match_duration_minutes=data.get("matchDurationMinutes"),
            rest_minutes=data.get("restMinutes"),
        )
