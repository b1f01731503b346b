"""Testing module for Group Stage.

This module provides testing functionality including:
- Random League Generator (RLG)
- A command-line harness for generating competitions and moving teams

Use the CLI: groupstage-test
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

from groupstage.testing.rlg import (
    NameStyle,
    RandomLeagueGenerator,
    ResultPattern,
    RLGConfig,
)

__all__ = [
    "NameStyle",
    "RandomLeagueGenerator",
    "RLGConfig",
    "ResultPattern",
]
