"""
In-memory booking store.

Stands in for the booking subsystem's persistence. Reads are snapshots;
``create_booking`` is the write path that enforces exclusivity by
re-checking overlap under a lock before committing.
"""

import asyncio
import logging
import uuid
from datetime import date, datetime, timezone
from typing import Optional

from photo_availability.errors import BookingConflictError, NotFoundError
from photo_availability.scheduling.conflicts import booking_interval, intervals_overlap
from photo_availability.schemas.booking_schema import Booking, BookingStatus
from photo_availability.utils import to_calendar_date

logger = logging.getLogger(__name__)


class InMemoryBookingStore:
    """Booking records keyed by reference number."""

    def __init__(self, bookings: Optional[list[Booking]] = None) -> None:
        self._bookings: dict[str, Booking] = {}
        self._lock = asyncio.Lock()
        for booking in bookings or []:
            self._put(booking)

    def _put(self, booking: Booking) -> Booking:
        ref = booking.id or f"BK-{uuid.uuid4().hex[:6].upper()}"
        stored = booking.model_copy(
            update={"id": ref, "created_at": booking.created_at or datetime.now(timezone.utc)}
        )
        self._bookings[ref] = stored
        return stored

    def _find_overlap(self, booking: Booking) -> Optional[Booking]:
        candidate = booking_interval(booking)
        for existing in self._bookings.values():
            if (
                existing.photographer_id != booking.photographer_id
                or existing.booking_date != booking.booking_date
                or not existing.blocks_availability
            ):
                continue
            occupied = booking_interval(existing)
            if intervals_overlap(candidate.start, candidate.end, occupied.start, occupied.end):
                return existing
        return None

    async def list_active_bookings(self, photographer_id: str, target_date: date) -> list[Booking]:
        """Non-cancelled, non-rejected bookings for a photographer on a date."""
        day = to_calendar_date(target_date)
        return [
            b
            for b in self._bookings.values()
            if b.photographer_id == photographer_id
            and b.booking_date == day
            and b.blocks_availability
        ]

    async def create_booking(self, booking: Booking) -> Booking:
        """Commit a booking unless it overlaps an active booking.

        The overlap check and the insert happen under one lock, so two
        writers racing for the same slot cannot both succeed.

        Raises:
            BookingConflictError: If the photographer is already booked.
        """
        async with self._lock:
            clash = self._find_overlap(booking)
            if clash is not None:
                logger.info(
                    "Booking rejected for %s on %s at %s: overlaps %s",
                    booking.photographer_id, booking.booking_date, booking.start_time, clash.id,
                )
                raise BookingConflictError(
                    f"Photographer {booking.photographer_id} is not available at "
                    f"{booking.start_time} on {booking.booking_date}"
                )
            stored = self._put(booking)

        logger.info(
            "Booking created: %s for %s on %s at %s",
            stored.id, stored.photographer_id, stored.booking_date, stored.start_time,
        )
        return stored

    async def cancel_booking(self, booking_ref: str) -> Booking:
        """Cancel an existing booking, freeing its interval."""
        async with self._lock:
            if booking_ref not in self._bookings:
                raise NotFoundError("Booking", booking_ref)
            cancelled = self._bookings[booking_ref].model_copy(
                update={"status": BookingStatus.CANCELLED}
            )
            self._bookings[booking_ref] = cancelled
        logger.info("Booking cancelled: %s", booking_ref)
        return cancelled

    def get_booking(self, booking_ref: str) -> Optional[Booking]:
        return self._bookings.get(booking_ref)

    def reset(self) -> None:
        """Clear all bookings. Used by test fixtures for isolation."""
        self._bookings.clear()
