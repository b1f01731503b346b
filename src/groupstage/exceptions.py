"""Exceptions for use in Group Stage"""

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


# ========== Base Application Exception ==========


class GroupStageException(Exception):
    """Base exception for all Group Stage errors.

    The league operations never raise these themselves. They are carried
    inside a failed ``EditResult`` and raised only by ``EditResult.unwrap()``.
    """

    pass


# ========== Reassignment Exceptions ==========


class ReassignmentException(GroupStageException):
    """Base exception for moving teams between groups."""

    pass


class InvalidMoveArgumentsException(ReassignmentException):
    """Raised when a move is requested with missing or invalid arguments."""

    pass


class GroupNotFoundException(ReassignmentException):
    """Raised when a group name does not exist in the league table."""

    pass


class TeamNotFoundException(ReassignmentException):
    """Raised when a team cannot be found in its source group."""

    pass


# ========== Match Exceptions ==========


class MatchException(GroupStageException):
    """Base exception for match result errors."""

    pass


class InvalidMatchUpdateException(MatchException):
    """Raised when a match update is missing its group or match."""

    pass


class MatchNotFoundException(MatchException):
    """Raised when the match to update does not exist in the group."""

    pass


# ========== Schedule Exceptions ==========


class ScheduleException(GroupStageException):
    """Base exception for court scheduling errors."""

    pass


class InvalidScheduleException(ScheduleException):
    """Raised when scheduling parameters cannot produce a schedule."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(GroupStageException):
    """Base exception for validation errors."""

    pass


class TimeFormatValidationException(ValidationException):
    """Raised when a clock time is not a valid HH:MM string."""

    pass
