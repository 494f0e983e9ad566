"""
Effective working hours for a calendar date.

Date overrides take precedence over the recurring weekly schedule:
an unavailable override blocks the whole day, an available override
supplies custom hours or defers to the weekday's weekly entry.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Union

from photo_availability.schemas.schedule_schema import (
    DateOverride,
    DayOfWeek,
    WeeklyScheduleItem,
)
from photo_availability.utils import combine, to_calendar_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkingWindow:
    """Working hours anchored on the target date."""

    start: datetime
    end: datetime

    @property
    def minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)


@dataclass(frozen=True)
class Unavailable:
    """The photographer does not work on the target date."""

    reason: str


DayResolution = Union[WorkingWindow, Unavailable]


def find_override(
    date_overrides: Optional[Iterable[DateOverride]], target_date: date
) -> Optional[DateOverride]:
    """Return the first override whose calendar day equals ``target_date``."""
    day = to_calendar_date(target_date)
    for override in date_overrides or []:
        if to_calendar_date(override.date) == day:
            return override
    return None


def find_weekly_entry(
    weekly_schedule: Optional[Iterable[WeeklyScheduleItem]], target_date: date
) -> Optional[WeeklyScheduleItem]:
    weekday = DayOfWeek.for_date(to_calendar_date(target_date))
    for item in weekly_schedule or []:
        if item.day_of_week == weekday:
            return item
    return None


def resolve_working_window(
    weekly_schedule: Optional[Iterable[WeeklyScheduleItem]],
    date_overrides: Optional[Iterable[DateOverride]],
    target_date: date,
) -> DayResolution:
    """Resolve the single applicable working window for ``target_date``."""
    day = to_calendar_date(target_date)
    override = find_override(date_overrides, day)

    if override is not None:
        logger.debug("Date override applies on %s (available=%s)", day, override.is_available)
        if not override.is_available:
            return Unavailable(reason=override.reason or "date override")
        if override.custom_hours is not None:
            return WorkingWindow(
                start=combine(day, override.custom_hours.start_time),
                end=combine(day, override.custom_hours.end_time),
            )

    entry = find_weekly_entry(weekly_schedule, day)
    if entry is None:
        return Unavailable(reason="no weekly schedule entry")
    if not entry.is_available:
        return Unavailable(reason=f"not working on {entry.day_of_week.value}")

    return WorkingWindow(start=combine(day, entry.start_time), end=combine(day, entry.end_time))
