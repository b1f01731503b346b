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

# --- Constants ---

# Match outcome points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Level score decided by a shootout (penalties etc.)
SHOOTOUT_WIN_POINTS = 2
SHOOTOUT_LOSS_POINTS = 1

# Counters held by every TeamStat, in display order
STAT_COUNTERS = (
    "played",
    "wins",
    "draws",
    "losses",
    "goals_for",
    "goals_against",
    "goal_difference",
    "points",
)

# Clock times are wall-clock "HH:MM" strings
TIME_FORMAT = "%H:%M"

# Team names are ordered with this ICU locale
COLLATION_LOCALE = "ja"

# Scheduling defaults
DEFAULT_COURT_COUNT = 1
DEFAULT_START_TIME = "09:00"
DEFAULT_MATCH_DURATION_MINUTES = 20
DEFAULT_REST_MINUTES = 5

# Environment variable read by setup_logger
LOG_LEVEL_ENV_VAR = "GROUPSTAGE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
