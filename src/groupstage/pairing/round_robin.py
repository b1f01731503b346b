"""Round robin fixture generation for a single group.

Uses the circle method: the first team stays put while the others rotate one
place per round, and an odd field gets a rotating bye.
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

from typing import List, Optional, Sequence, Tuple

from groupstage.models import Match, TeamStat
from groupstage.type_hints import MatchId, TeamId
from groupstage.utils import setup_logger

logger = setup_logger(__name__)


def fixture_id(team1_id: TeamId, team2_id: TeamId) -> MatchId:
    """Match id for a pairing; one pairing per group, so unique within it."""
    return f"{team1_id}-vs-{team2_id}"


def round_robin_rounds(team_ids: Sequence[TeamId]) -> List[List[Tuple[TeamId, TeamId]]]:
    """Pair every team with every other team exactly once.

    Args:
        team_ids: Team ids in seeding order

    Returns:
        One list of (team1_id, team2_id) pairs per round. Byes are left out.
    """
    slots: List[Optional[TeamId]] = list(team_ids)
    if len(slots) < 2:
        return []
    if len(slots) % 2:
        slots.append(None)

    num_slots = len(slots)
    rounds = []
    for round_index in range(num_slots - 1):
        pairings = []
        for i in range(num_slots // 2):
            home, away = slots[i], slots[num_slots - 1 - i]
            if home is None or away is None:
                continue
            # The fixed team alternates sides
            if i == 0 and round_index % 2 == 1:
                home, away = away, home
            pairings.append((home, away))
        rounds.append(pairings)
        slots = [slots[0], slots[-1]] + slots[1:-1]

    return rounds


def generate_fixtures(teams: Sequence[TeamStat]) -> List[Match]:
    """Build a fresh, unplayed single round robin for a group.

    Matches come out round by round, without scores, times or courts.
    """
    team_ids = [stats.team.id for stats in teams]
    matches = [
        Match(id=fixture_id(home, away), team1_id=home, team2_id=away)
        for pairings in round_robin_rounds(team_ids)
        for home, away in pairings
    ]
    logger.debug(f"Generated {len(matches)} fixtures for {len(team_ids)} teams")
    return matches
