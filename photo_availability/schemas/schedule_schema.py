"""Weekly schedule and date override data models."""

import logging
from datetime import date as date_type, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from photo_availability.utils import END_OF_DAY, parse_clock_time, validate_time_string

logger = logging.getLogger(__name__)

# date.weekday() index -> day name
_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class DayOfWeek(str, Enum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @classmethod
    def _missing_(cls, value: object) -> Optional["DayOfWeek"]:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return None

    @classmethod
    def from_name(cls, name: object) -> Optional["DayOfWeek"]:
        """Case-insensitive lookup. Returns None for unknown names."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def for_date(cls, target_date: date_type) -> "DayOfWeek":
        return cls(_WEEKDAY_NAMES[target_date.weekday()])


def _end_after_start(start_time: str, end_time: str) -> bool:
    if end_time == END_OF_DAY:
        return True
    return parse_clock_time(end_time, allow_end_of_day=True) > parse_clock_time(
        start_time, allow_end_of_day=True
    )


class WeeklyScheduleItem(BaseModel):
    """Recurring working hours for one day of the week."""

    day_of_week: DayOfWeek
    start_time: str
    end_time: str
    is_available: bool = True
    notes: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        return validate_time_string(value, allow_end_of_day=True)

    @model_validator(mode="after")
    def _check_order(self) -> "WeeklyScheduleItem":
        if self.is_available and not _end_after_start(self.start_time, self.end_time):
            raise ValueError("End time must be later than start time")
        return self

    @classmethod
    def coerce(cls, raw: Any) -> Optional["WeeklyScheduleItem"]:
        """Build an item from stored data, or None when it cannot be used.

        Unknown day names and malformed hours are dropped with a debug log.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, dict):
            logger.debug("Dropping schedule item of type %s", type(raw).__name__)
            return None
        day = DayOfWeek.from_name(raw.get("day_of_week"))
        if day is None:
            logger.debug("Dropping schedule item with unknown day: %r", raw.get("day_of_week"))
            return None
        try:
            return cls(**{**raw, "day_of_week": day})
        except ValidationError as exc:
            logger.debug("Dropping malformed schedule item for %s: %s", day.value, exc)
            return None


class CustomHours(BaseModel):
    """Replacement working hours for a single overridden date."""

    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        return validate_time_string(value, allow_end_of_day=True)

    @model_validator(mode="after")
    def _check_order(self) -> "CustomHours":
        if not _end_after_start(self.start_time, self.end_time):
            raise ValueError("End time must be later than start time")
        return self


class DateOverride(BaseModel):
    """One-off exception (vacation, overtime) for a specific calendar date."""

    date: date_type
    is_available: bool
    custom_hours: Optional[CustomHours] = None
    reason: Optional[str] = None  # "Holiday", "Vacation", "Sick Leave", "Special Event"
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _strip_clock(cls, value: object) -> object:
        # Overrides match by calendar day, so any time component is dropped.
        if isinstance(value, datetime):
            return value.date()
        return value
