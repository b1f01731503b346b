"""Outcome of an edit that can be rejected by the caller's arguments."""

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

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from groupstage.exceptions import GroupStageException

T = TypeVar("T")


@dataclass
class EditResult(Generic[T]):
    """Either the new snapshot or the reason no snapshot was produced.

    Attributes
    ----------
    value : T or None
        The new snapshot on success.
    error : GroupStageException or None
        Why the edit was rejected. None on success.
    """

    value: Optional[T] = None
    error: Optional[GroupStageException] = None

    @classmethod
    def success(cls, value: T) -> "EditResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GroupStageException) -> "EditResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.ok

    def unwrap(self) -> T:
        """Return the new snapshot.

        Raises:
            GroupStageException: The rejection reason, if the edit failed
        """
        if self.error is not None:
            raise self.error
        return self.value
