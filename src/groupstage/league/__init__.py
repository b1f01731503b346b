"""Standings-consistency engine for group-stage competitions.

This package keeps group standings consistent with their matches as teams
move between groups and results are entered:

- move_team: reassign a team and rebuild both affected groups
- recalculate_group: derive all standings from the match results
- apply_match_result: record one match and recalculate its group
- the scheduler: spread a group's matches across parallel courts
"""

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

from groupstage.league.match_updater import (
    apply_match_result,
    apply_match_result_to_competition,
)
from groupstage.league.reassignment import move_team
from groupstage.league.scheduler import (
    add_minutes,
    assign_courts,
    schedule_group_matches,
    sort_matches_by_slot,
)
from groupstage.league.standings import (
    StandingsCalculator,
    rank_group,
    recalculate_group,
)

__all__ = [
    "StandingsCalculator",
    "add_minutes",
    "apply_match_result",
    "apply_match_result_to_competition",
    "assign_courts",
    "move_team",
    "rank_group",
    "recalculate_group",
    "schedule_group_matches",
    "sort_matches_by_slot",
]
