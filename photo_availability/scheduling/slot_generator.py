"""
Bookable slot generation for a single working day.

Steps through the working window at a fixed granularity, skipping starts
that violate the lead time and candidates that overlap a booking.

Usage:
    window = resolve_working_window(schedule, overrides, target_date)
    slots = generate_slots(window, 120, booked, lead_time_hours=24, now=now)
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable

from photo_availability.config import SLOT_STEP_MINUTES
from photo_availability.errors import InvalidInputError
from photo_availability.scheduling.conflicts import has_conflict
from photo_availability.scheduling.resolver import DayResolution, Unavailable
from photo_availability.schemas.availability_schema import TimeSlot
from photo_availability.schemas.booking_schema import BookedInterval

logger = logging.getLogger(__name__)


def earliest_allowed_start(now: datetime, lead_time_hours: float) -> datetime:
    """First instant a session may start given the minimum advance notice."""
    return now + timedelta(hours=lead_time_hours)


def generate_slots(
    window: DayResolution,
    duration_minutes: int,
    booked: Iterable[BookedInterval],
    lead_time_hours: float,
    now: datetime,
    step_minutes: int = SLOT_STEP_MINUTES,
    ignore_lead_time: bool = False,
) -> list[TimeSlot]:
    """
    Return bookable slots earliest-first.

    A slot starting at ``current`` is emitted when it ends within working
    hours, starts no earlier than ``now + lead_time_hours`` and overlaps no
    booked interval. ``current`` always advances by ``step_minutes``.
    """
    if duration_minutes <= 0:
        raise InvalidInputError(f"Session duration must be positive, got {duration_minutes}")
    if step_minutes <= 0:
        raise InvalidInputError(f"Step must be positive, got {step_minutes}")
    if isinstance(window, Unavailable):
        return []

    booked = list(booked)
    duration = timedelta(minutes=duration_minutes)
    step = timedelta(minutes=step_minutes)
    cutoff = datetime.min if ignore_lead_time else earliest_allowed_start(now, lead_time_hours)

    slots: list[TimeSlot] = []
    current = window.start
    while current + duration <= window.end:
        candidate_end = current + duration
        if current >= cutoff and not has_conflict(current, candidate_end, booked):
            slots.append(TimeSlot(start=current, end=candidate_end))
        current += step

    logger.debug(
        "Generated %d slot(s) between %s and %s (duration=%d, cutoff=%s)",
        len(slots), window.start, window.end, duration_minutes, cutoff,
    )
    return slots
