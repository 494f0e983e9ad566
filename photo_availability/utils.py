"""Shared clock-time helpers used across the availability engine."""

import re
from datetime import date, datetime, time, timedelta

from photo_availability.errors import InvalidInputError

# 24-hour HH:MM as accepted for requested windows and booking start times.
TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")

# Schedule hours additionally accept 24:00 as an end-of-day marker.
SCHEDULE_TIME_PATTERN = re.compile(r"^(([0-1]?[0-9]|2[0-3]):[0-5][0-9]|24:00)$")

END_OF_DAY = "24:00"
MINUTES_PER_DAY = 24 * 60

_DISPLAY_TIME = re.compile(r"^(\d{1,2}):(\d{2})\s*([ap]m)$", re.IGNORECASE)


def validate_time_string(value: str, allow_end_of_day: bool = False) -> str:
    """Return the stripped time string, raising InvalidInputError if malformed.

    Examples:
        >>> validate_time_string(" 9:30 ")
        '9:30'
        >>> validate_time_string("24:00", allow_end_of_day=True)
        '24:00'
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"Time must be a string in HH:MM format, got {value!r}")
    value = value.strip()
    pattern = SCHEDULE_TIME_PATTERN if allow_end_of_day else TIME_PATTERN
    if not pattern.match(value):
        raise InvalidInputError(f"Invalid time format {value!r}. Use HH:MM (24-hour format)")
    return value


def parse_clock_time(value: str, allow_end_of_day: bool = False) -> int:
    """Convert an HH:MM string to minutes since midnight."""
    value = validate_time_string(value, allow_end_of_day=allow_end_of_day)
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def parse_display_time(value: str) -> int:
    """Convert a 12-hour ("2:30 pm") or 24-hour ("14:30") time to minutes.

    Examples:
        >>> parse_display_time("12:00 am")
        0
        >>> parse_display_time("2:30 PM")
        870
        >>> parse_display_time("14:30")
        870
    """
    value = value.strip()
    match = _DISPLAY_TIME.match(value)
    if not match:
        return parse_clock_time(value)

    hours, minutes, period = int(match.group(1)), int(match.group(2)), match.group(3).lower()
    if not 1 <= hours <= 12 or minutes > 59:
        raise InvalidInputError(f"Invalid 12-hour time {value!r}")
    if period == "pm" and hours != 12:
        hours += 12
    if period == "am" and hours == 12:
        hours = 0
    return hours * 60 + minutes


def combine(target_date: date, value: str) -> datetime:
    """Anchor an HH:MM string on a calendar date. 24:00 maps to next midnight."""
    minutes = parse_clock_time(value, allow_end_of_day=True)
    midnight = datetime.combine(target_date, time.min)
    return midnight + timedelta(minutes=minutes)


def to_calendar_date(value: date) -> date:
    """Strip the clock part from a datetime; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def format_clock_12h(value: datetime) -> str:
    """Render a datetime as a 12-hour clock string such as '9:00 AM'."""
    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {period}"


def format_slot_label(start: datetime, end: datetime) -> str:
    """Render a slot for display, e.g. '9:00 AM - 11:00 AM'."""
    return f"{format_clock_12h(start)} - {format_clock_12h(end)}"
