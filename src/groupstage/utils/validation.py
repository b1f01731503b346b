"""Validation utilities for Group Stage.

This module provides reusable validation functions with consistent error handling.
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

import re
from typing import Any, Optional

from groupstage.exceptions import TimeFormatValidationException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[Any] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Clock Time Validation ==========

_CLOCK_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def validate_clock_time(value: Optional[str], required: bool = False) -> ValidationResult:
    """Validate a wall-clock time written as HH:MM.

    Args:
        value: Time string to validate, e.g. "09:30"
        required: Whether a time is required (empty = invalid)

    Returns:
        ValidationResult whose sanitized value is the zero-padded "HH:MM" form

    Example:
        >>> validate_clock_time("9:05").sanitized_value
        '09:05'
    """
    if not isinstance(value, str) or not value.strip():
        if required:
            return ValidationResult(
                is_valid=False,
                error_message="Clock time is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    match = _CLOCK_TIME_PATTERN.match(value.strip())
    if not match:
        return ValidationResult(
            is_valid=False,
            error_message=f"Clock time must look like HH:MM: {value}",
        )

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return ValidationResult(
            is_valid=False,
            error_message=f"Clock time out of range: {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=f"{hours:02d}:{minutes:02d}")


def validate_clock_time_strict(value: str) -> str:
    """Validate a clock time and return it zero-padded or raise.

    Raises:
        TimeFormatValidationException: If the time is missing or malformed
    """
    result = validate_clock_time(value, required=True)
    if not result.is_valid:
        raise TimeFormatValidationException(result.error_message)
    return result.sanitized_value


# ========== Duration Validation ==========


def validate_minutes(value: Any, label: str = "Duration") -> ValidationResult:
    """Validate a non-negative whole number of minutes."""
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"{label} must be a whole number of minutes: {value!r}",
        )
    if value < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{label} cannot be negative: {value}",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


# ========== Move Argument Validation ==========


def validate_move_arguments(
    competition: Any,
    team_id: Optional[str],
    source_group_name: Optional[str],
    target_group_name: Optional[str],
    court_count: Any,
) -> ValidationResult:
    """Check the mandatory arguments of a group reassignment."""
    if competition is None:
        return ValidationResult(is_valid=False, error_message="Competition is required")
    if not team_id:
        return ValidationResult(is_valid=False, error_message="Team id is required")
    if not source_group_name or not target_group_name:
        return ValidationResult(
            is_valid=False,
            error_message="Source and target group names are required",
        )
    if isinstance(court_count, bool) or not isinstance(court_count, int) or court_count < 1:
        return ValidationResult(
            is_valid=False,
            error_message=f"Court count must be at least 1: {court_count!r}",
        )
    return ValidationResult(is_valid=True)
