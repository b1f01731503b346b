"""Standings calculation for a group.

Every counter on every TeamStat is derived from the group's matches. The
calculation always starts from zero, so running it again on the same matches
gives the same table, and it never raises for a malformed group: broken
pieces are logged and repaired or skipped.
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
from typing import Dict, List, Optional

from groupstage.constants import (
    DRAW_POINTS,
    LOSS_POINTS,
    SHOOTOUT_LOSS_POINTS,
    SHOOTOUT_WIN_POINTS,
    WIN_POINTS,
)
from groupstage.models import Group, Match, Team, TeamStat
from groupstage.utils import setup_logger
from groupstage.utils.collation import collation_key

logger = setup_logger(__name__)


def _is_team_entry(stats) -> bool:
    return isinstance(stats, TeamStat) and isinstance(stats.team, Team)


def heal_group(group: Group) -> Group:
    """Replace a missing or malformed team or match list with an empty one.

    Team entries that are not usable standings are dropped.
    """
    if not isinstance(group.matches, list):
        logger.warning(
            f'Group "{group.name}" was missing or had an invalid matches list '
            f"({type(group.matches).__name__}). Using an empty list."
        )
        group.matches = []
    if not isinstance(group.teams, list):
        logger.warning(
            f'Group "{group.name}" was missing or had an invalid teams list '
            f"({type(group.teams).__name__}). Using an empty list."
        )
        group.teams = []
    malformed = [stats for stats in group.teams if not _is_team_entry(stats)]
    if malformed:
        logger.warning(
            f'Group "{group.name}": dropping {len(malformed)} malformed team '
            f"entries {malformed!r}"
        )
        group.teams = [stats for stats in group.teams if _is_team_entry(stats)]
    return group


class StandingsCalculator:
    """Derives group standings from match results.

    Points policy:
    - Win: 3, loss: 0
    - Draw: 1 each
    - Level score with a decisive winner (e.g. shootout): winner 2, loser 1
    """

    def recalculate(self, group: Group) -> Group:
        """Rebuild every TeamStat of ``group`` in place and return it."""
        heal_group(group)

        for stats in group.teams:
            stats.reset()

        teams_by_id: Dict[str, TeamStat] = {}
        for stats in group.teams:
            teams_by_id.setdefault(stats.team.id, stats)

        for match in group.matches:
            if not isinstance(match, Match):
                logger.warning(
                    f'Group "{group.name}": skipping malformed match entry {match!r}'
                )
                continue
            self._apply_match(match, teams_by_id, group.name)

        return group

    def _apply_match(
        self, match: Match, teams_by_id: Dict[str, TeamStat], group_name: str
    ) -> None:
        """Add one match to the standings if it has a usable result."""
        if not match.has_result:
            return

        team1 = teams_by_id.get(match.team1_id)
        team2 = teams_by_id.get(match.team2_id)
        if team1 is None or team2 is None:
            logger.debug(
                f'Group "{group_name}": match {match.id} references a team '
                "outside the group, ignored"
            )
            return

        team1.add_goals(match.team1_score, match.team2_score)
        team2.add_goals(match.team2_score, match.team1_score)

        if match.team1_score > match.team2_score:
            self._award(team1, team2, WIN_POINTS, LOSS_POINTS)
        elif match.team2_score > match.team1_score:
            self._award(team2, team1, WIN_POINTS, LOSS_POINTS)
        elif match.winner_id:
            if match.winner_id == team1.team.id:
                self._award(team1, team2, SHOOTOUT_WIN_POINTS, SHOOTOUT_LOSS_POINTS)
            else:
                if match.winner_id != team2.team.id:
                    logger.warning(
                        f'Group "{group_name}": match {match.id} winner '
                        f"{match.winner_id} is neither side, crediting "
                        f"{team2.team.id}"
                    )
                self._award(team2, team1, SHOOTOUT_WIN_POINTS, SHOOTOUT_LOSS_POINTS)
        else:
            for stats in (team1, team2):
                stats.draws += 1
                stats.points += DRAW_POINTS

    @staticmethod
    def _award(
        winner: TeamStat, loser: TeamStat, winner_points: int, loser_points: int
    ) -> None:
        winner.wins += 1
        winner.points += winner_points
        loser.losses += 1
        loser.points += loser_points


_calculator = StandingsCalculator()


def recalculate_group(group: Optional[Group]) -> Optional[Group]:
    """Return a copy of ``group`` with standings rebuilt from its matches.

    The input is never modified. A None group is logged and returned as is.

    Args:
        group: The group to recalculate

    Returns:
        A new Group with every TeamStat derived from the matches
    """
    if group is None:
        logger.error("recalculate_group was called without a group")
        return None
    return _calculator.recalculate(copy.deepcopy(group))


def rank_group(group: Group) -> List[TeamStat]:
    """Order a group's standings for display.

    Points, then goal difference, then goals scored, all descending; names
    break remaining ties in collation order. The group itself is not
    reordered.
    """
    teams = group.teams if isinstance(group.teams, list) else []
    return sorted(
        teams,
        key=lambda s: (-s.points, -s.goal_difference, -s.goals_for, collation_key(s.team.name)),
    )
