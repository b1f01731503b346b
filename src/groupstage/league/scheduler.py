"""Court and start time assignment for a group's matches.

Greedy list scheduling: every court keeps the time it next becomes free, and
each match in generation order takes the court that frees up first. All
matches in one run share the same duration, so this keeps courts evenly
loaded without any search.
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

import functools
from datetime import datetime
from typing import List

from dateutil.relativedelta import relativedelta

from groupstage.constants import TIME_FORMAT
from groupstage.models import Match, ScheduleConfig
from groupstage.type_hints import ClockTime
from groupstage.utils import setup_logger
from groupstage.utils.validation import validate_clock_time_strict

logger = setup_logger(__name__)


def add_minutes(clock_time: ClockTime, minutes: int) -> ClockTime:
    """Return ``clock_time`` moved forward by ``minutes``.

    Times are wall-clock only: going past midnight wraps around and the day
    is not tracked.

    Example:
        >>> add_minutes("09:50", 30)
        '10:20'
    """
    start = datetime.strptime(validate_clock_time_strict(clock_time), TIME_FORMAT)
    return (start + relativedelta(minutes=minutes)).strftime(TIME_FORMAT)


def earliest_court_index(next_free: List[ClockTime]) -> int:
    """Index of the court free soonest; the lowest index wins a tie."""
    earliest = 0
    for index in range(1, len(next_free)):
        if next_free[index] < next_free[earliest]:
            earliest = index
    return earliest


def assign_courts(matches: List[Match], config: ScheduleConfig) -> List[Match]:
    """Give every match a court and a start time, in list order.

    The matches are updated in place and returned. Callers pass matches they
    own (a fresh fixture list or a copy).
    """
    start_time = validate_clock_time_strict(config.start_time)
    next_free = [start_time] * config.court_count
    slot_minutes = config.slot_minutes

    for match in matches:
        court_index = earliest_court_index(next_free)
        match.start_time = next_free[court_index]
        match.court = court_index + 1
        next_free[court_index] = add_minutes(match.start_time, slot_minutes)

    logger.debug(
        f"Scheduled {len(matches)} matches on {config.court_count} courts "
        f"from {start_time}, last court frees at {max(next_free)}"
    )
    return matches


def compare_slots(first: Match, second: Match) -> int:
    """Order two matches by start time, then court.

    When either match has no start time the pair is ordered by court alone.
    """
    if first.start_time and second.start_time and first.start_time != second.start_time:
        return -1 if first.start_time < second.start_time else 1
    return (first.court or 0) - (second.court or 0)


def sort_matches_by_slot(matches: List[Match]) -> List[Match]:
    """Return the matches ordered by start time and court."""
    return sorted(matches, key=functools.cmp_to_key(compare_slots))


def schedule_group_matches(matches: List[Match], config: ScheduleConfig) -> List[Match]:
    """Assign courts and times, then order the matches by slot."""
    return sort_matches_by_slot(assign_courts(matches, config))
