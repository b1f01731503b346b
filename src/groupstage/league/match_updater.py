"""Result entry for group matches.

An edited match replaces its old entry and the whole group is recalculated.
Standings are never patched with a per-match delta, so they cannot drift from
the match list.
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
    InvalidMatchUpdateException,
    MatchNotFoundException,
)
from groupstage.league.standings import StandingsCalculator, heal_group
from groupstage.models import Competition, EditResult, Group, Match
from groupstage.type_hints import GroupName
from groupstage.utils import setup_logger

logger = setup_logger(__name__)


def apply_match_result(
    group: Optional[Group], updated_match: Optional[Match]
) -> EditResult[Group]:
    """Store an edited match and recalculate the group's standings.

    Args:
        group: The group the match belongs to
        updated_match: The match with its new score, matched on ``id``

    Returns:
        EditResult holding a new Group on success. On failure the input is
        left untouched and the result carries the reason.
    """
    if group is None or updated_match is None:
        logger.error(
            f"apply_match_result called with invalid arguments: "
            f"group={group!r}, updated_match={updated_match!r}"
        )
        return EditResult.failure(
            InvalidMatchUpdateException("A group and an updated match are required")
        )

    new_group = heal_group(copy.deepcopy(group))

    match_index = new_group.find_match_index(updated_match.id)
    if match_index == -1:
        logger.error(
            f'Match to update not found in group: match_id={updated_match.id}, '
            f'group="{new_group.name}"'
        )
        return EditResult.failure(
            MatchNotFoundException(
                f'Match {updated_match.id} is not in group "{new_group.name}"'
            )
        )

    new_group.matches[match_index] = copy.deepcopy(updated_match)
    StandingsCalculator().recalculate(new_group)

    logger.info(f'Recorded match {updated_match.id} in group "{new_group.name}"')
    return EditResult.success(new_group)


def apply_match_result_to_competition(
    competition: Optional[Competition], group_name: GroupName, updated_match: Optional[Match]
) -> EditResult[Competition]:
    """Apply a match edit to one group of a competition.

    Returns:
        EditResult holding a new Competition whose named group carries the
        updated match and recalculated standings
    """
    if competition is None:
        logger.error("apply_match_result_to_competition called without a competition")
        return EditResult.failure(
            InvalidMatchUpdateException("A competition is required")
        )

    groups = competition.preliminary_round.groups
    group_index = next(
        (i for i, group in enumerate(groups) if group.name == group_name), -1
    )
    if group_index == -1:
        logger.error(f'Group "{group_name}" not found for match update')
        return EditResult.failure(
            GroupNotFoundException(f'Group "{group_name}" does not exist')
        )

    result = apply_match_result(groups[group_index], updated_match)
    if not result:
        return EditResult.failure(result.error)

    new_competition = copy.deepcopy(competition)
    new_competition.preliminary_round.groups[group_index] = result.value
    return EditResult.success(new_competition)
