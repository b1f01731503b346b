"""Moving a team from one group to another.

A move invalidates both groups: every result involving the old line-ups is
void, so both groups get zeroed standings and a freshly generated round
robin, optionally scheduled onto courts.
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

import copy
from typing import Optional

from groupstage.exceptions import (
    GroupNotFoundException,
    InvalidMoveArgumentsException,
    InvalidScheduleException,
    TeamNotFoundException,
)
from groupstage.league.scheduler import schedule_group_matches
from groupstage.models import Competition, EditResult, Group, ScheduleConfig
from groupstage.pairing.round_robin import generate_fixtures
from groupstage.type_hints import ClockTime, FixtureGenerator, GroupName, TeamId
from groupstage.utils import setup_logger
from groupstage.utils.collation import collation_key
from groupstage.utils.validation import (
    validate_clock_time,
    validate_minutes,
    validate_move_arguments,
)

logger = setup_logger(__name__)


def move_team(
    competition: Optional[Competition],
    team_id: TeamId,
    source_group_name: GroupName,
    target_group_name: GroupName,
    court_count: int,
    start_time: Optional[ClockTime] = None,
    match_duration_minutes: Optional[int] = None,
    rest_minutes: Optional[int] = None,
    fixture_generator: FixtureGenerator = generate_fixtures,
) -> EditResult[Competition]:
    """Move a team between groups of the preliminary round.

    Both groups have their standings reset and their fixtures regenerated.
    When ``start_time``, ``match_duration_minutes`` and ``rest_minutes`` are
    all given, the new fixtures are also assigned courts and start times.

    Args:
        competition: The competition snapshot to edit
        team_id: ID of the team to move
        source_group_name: Group the team is currently in
        target_group_name: Group the team moves to
        court_count: Number of courts available
        start_time: First kick-off, "HH:MM"
        match_duration_minutes: Length of one match
        rest_minutes: Gap on a court between matches
        fixture_generator: Builds the round robin for a list of teams

    Returns:
        EditResult holding the new Competition. Moving a team to the group it
        is already in succeeds with the input object itself. On failure the
        input is left untouched and the result carries the reason.
    """
    arguments = validate_move_arguments(
        competition, team_id, source_group_name, target_group_name, court_count
    )
    if not arguments:
        logger.error(
            f"Invalid arguments for moving team: {arguments.error_message} "
            f"(team_id={team_id!r}, source={source_group_name!r}, "
            f"target={target_group_name!r}, court_count={court_count!r})"
        )
        return EditResult.failure(InvalidMoveArgumentsException(arguments.error_message))

    if source_group_name == target_group_name:
        return EditResult.success(competition)

    config = ScheduleConfig(
        court_count=court_count,
        start_time=start_time,
        match_duration_minutes=match_duration_minutes,
        rest_minutes=rest_minutes,
    )
    if config.has_timing:
        for check in (
            validate_clock_time(start_time, required=True),
            validate_minutes(match_duration_minutes, "Match duration"),
            validate_minutes(rest_minutes, "Rest time"),
        ):
            if not check:
                logger.error(f"Invalid schedule for moving team: {check.error_message}")
                return EditResult.failure(InvalidScheduleException(check.error_message))

    new_competition = copy.deepcopy(competition)
    league_table = new_competition.preliminary_round

    source_group = league_table.get_group(source_group_name)
    target_group = league_table.get_group(target_group_name)
    if source_group is None or target_group is None:
        missing = source_group_name if source_group is None else target_group_name
        logger.error(
            f'Source or target group not found for moving team: "{missing}" '
            f"(groups: {league_table.group_names})"
        )
        return EditResult.failure(GroupNotFoundException(f'Group "{missing}" does not exist'))

    team_index = source_group.find_team_index(team_id)
    if team_index == -1:
        logger.error(
            f'Team to move not found in the source group: team_id={team_id}, '
            f'group="{source_group_name}"'
        )
        return EditResult.failure(
            TeamNotFoundException(f'Team {team_id} is not in group "{source_group_name}"')
        )

    target_group.teams.append(source_group.teams.pop(team_index))

    for group in (source_group, target_group):
        _rebuild_group(group, config, fixture_generator)

    logger.info(
        f'Moved team {team_id} from "{source_group_name}" to "{target_group_name}"; '
        f"standings reset and fixtures regenerated"
    )
    return EditResult.success(new_competition)


def _rebuild_group(
    group: Group, config: ScheduleConfig, fixture_generator: FixtureGenerator
) -> None:
    """Reset standings, regenerate and schedule fixtures, order the teams."""
    for stats in group.teams:
        stats.reset()

    group.matches = fixture_generator(group.teams)

    if config.has_timing:
        group.matches = schedule_group_matches(group.matches, config)

    group.teams.sort(key=lambda stats: collation_key(stats.team.name))
