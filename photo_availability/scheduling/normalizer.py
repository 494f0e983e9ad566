"""
Weekly schedule normalization.

Reconciles a partial or duplicated weekly schedule into exactly one entry
per day of the week. Applied once when a schedule is written, never on read.

Usage:
    schedule = normalize_weekly_schedule(raw_items)
    assert len(schedule) == 7
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from photo_availability.config import settings
from photo_availability.schemas.schedule_schema import DayOfWeek, WeeklyScheduleItem

logger = logging.getLogger(__name__)

RawScheduleItem = Union[WeeklyScheduleItem, dict[str, Any]]


@dataclass(frozen=True)
class PlaceholderHours:
    """Hours given to days missing from a schedule. Always unavailable."""

    start_time: str = settings.scheduling.placeholder_start_time
    end_time: str = settings.scheduling.placeholder_end_time
    notes: str = ""


def default_schedule_item(
    day: DayOfWeek, placeholder: Optional[PlaceholderHours] = None
) -> WeeklyScheduleItem:
    """Build the unavailable placeholder entry for a day."""
    placeholder = placeholder or PlaceholderHours()
    return WeeklyScheduleItem(
        day_of_week=day,
        start_time=placeholder.start_time,
        end_time=placeholder.end_time,
        is_available=False,
        notes=placeholder.notes,
    )


def normalize_weekly_schedule(
    items: Optional[Iterable[RawScheduleItem]],
    placeholder: Optional[PlaceholderHours] = None,
) -> list[WeeklyScheduleItem]:
    """
    Return exactly seven schedule items, one per day of the week.

    Input order is kept for the first item seen per day (day names compare
    case-insensitively). Days never seen are appended as unavailable
    placeholders in Sunday..Saturday order. Normalizing a normalized
    schedule returns it unchanged.
    """
    seen: set[DayOfWeek] = set()
    merged: list[WeeklyScheduleItem] = []

    for raw in items or []:
        item = WeeklyScheduleItem.coerce(raw)
        if item is None or item.day_of_week in seen:
            continue
        seen.add(item.day_of_week)
        merged.append(item)

    missing = [day for day in DayOfWeek if day not in seen]
    for day in missing:
        merged.append(default_schedule_item(day, placeholder))
    if missing:
        logger.debug("Filled %d missing day(s) with placeholders", len(missing))

    return merged
