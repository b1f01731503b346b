"""Data models for group-stage competitions."""

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

from .edit_result import EditResult
from .group import Group
from .league_table import Competition, LeagueTable
from .match import Match, is_score
from .schedule_config import ScheduleConfig
from .team import Team, TeamStat

__all__ = [
    "Competition",
    "EditResult",
    "Group",
    "LeagueTable",
    "Match",
    "ScheduleConfig",
    "Team",
    "TeamStat",
    "is_score",
]
