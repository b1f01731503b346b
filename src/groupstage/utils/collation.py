"""Language-sensitive ordering of team names.

Team lists are shown in Japanese collation order rather than code point order:
case is ignored at the primary level, full-width and half-width forms compare
together, hiragana and katakana interleave, and kanji follow the JIS X 0208
order of the ``ja`` tailoring. Keys come from ICU through ``PyICU``.
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
from typing import Iterable, List

import icu

from groupstage.constants import COLLATION_LOCALE


@functools.lru_cache(maxsize=1)
def get_collator() -> icu.Collator:
    """Create the Japanese collator once and reuse it."""
    return icu.Collator.createInstance(icu.Locale(COLLATION_LOCALE))


def collation_key(name: str) -> bytes:
    """Return the sort key for a display name."""
    return get_collator().getSortKey(name or "")


def sort_names(names: Iterable[str]) -> List[str]:
    """Sort names in collation order."""
    return sorted(names, key=collation_key)
