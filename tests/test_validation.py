import pytest

from groupstage.exceptions import TimeFormatValidationException
from groupstage.utils.validation import (
    validate_clock_time,
    validate_clock_time_strict,
    validate_minutes,
)


@pytest.mark.parametrize(
    "value, expected",
    [("09:30", "09:30"), ("9:30", "09:30"), (" 23:59 ", "23:59"), ("0:00", "00:00")],
)
def test_valid_clock_times_are_zero_padded(value, expected):
    result = validate_clock_time(value)

    assert result
    assert result.sanitized_value == expected


@pytest.mark.parametrize("value", ["24:00", "12:60", "1230", "12:3", "noon", "12:30:00"])
def test_invalid_clock_times(value):
    result = validate_clock_time(value)

    assert not result
    assert value in result.error_message


def test_empty_clock_time_depends_on_required():
    assert validate_clock_time("")
    assert validate_clock_time(None).sanitized_value is None
    assert not validate_clock_time("", required=True)


def test_strict_clock_time_raises():
    with pytest.raises(TimeFormatValidationException):
        validate_clock_time_strict("7pm")


@pytest.mark.parametrize("value", [-1, 2.5, "20", True, None])
def test_invalid_minutes(value):
    assert not validate_minutes(value, "Rest")


def test_zero_minutes_are_allowed():
    assert validate_minutes(0)
