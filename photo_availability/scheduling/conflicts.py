"""Interval overlap checks between candidate slots and existing bookings."""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable

from photo_availability.config import settings
from photo_availability.schemas.booking_schema import BookedInterval, Booking
from photo_availability.utils import combine, to_calendar_date

logger = logging.getLogger(__name__)


def intervals_overlap(
    start: datetime, end: datetime, other_start: datetime, other_end: datetime
) -> bool:
    """Half-open overlap test. Touching endpoints do not overlap."""
    return start < other_end and end > other_start


def has_conflict(start: datetime, end: datetime, booked: Iterable[BookedInterval]) -> bool:
    """True if the candidate range overlaps any booked interval."""
    return any(intervals_overlap(start, end, b.start, b.end) for b in booked)


def booking_interval(booking: Booking) -> BookedInterval:
    """Time range a booking occupies, from its start time and duration."""
    duration = (
        booking.session_duration_minutes
        or settings.scheduling.default_session_duration_minutes
    )
    start = combine(booking.booking_date, booking.start_time)
    return BookedInterval(start=start, end=start + timedelta(minutes=duration))


def booked_intervals_for_date(
    bookings: Iterable[Booking], target_date: date
) -> list[BookedInterval]:
    """Intervals of active bookings on ``target_date``.

    Cancelled and rejected bookings, and bookings on other dates, are skipped.
    """
    day = to_calendar_date(target_date)
    intervals = [
        booking_interval(b)
        for b in bookings
        if b.blocks_availability and b.booking_date == day
    ]
    logger.debug("%d active booked interval(s) on %s", len(intervals), day)
    return intervals
