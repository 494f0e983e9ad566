"""
Availability service: the engine wired to its collaborators.

Availability computed here is advisory. It is read from a snapshot of the
booking store, so two concurrent requests may both see the same slot as
free. Exclusivity is enforced only on the write path: ``book_slot``
re-validates the slot and commits through the store's conditional write,
which rejects any overlap with a committed booking.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from photo_availability.config import settings
from photo_availability.errors import BookingConflictError, InvalidInputError
from photo_availability.logging_context import get_request_logger
from photo_availability.scheduling.fleet import FleetAvailabilityFilter
from photo_availability.schemas.availability_schema import (
    AvailabilityRequest,
    FleetAvailabilityResult,
    TimeSlot,
)
from photo_availability.schemas.booking_schema import Booking, BookingStatus
from photo_availability.tools.bookings import InMemoryBookingStore
from photo_availability.tools.photographers import InMemoryPhotographerDirectory
from photo_availability.tools.services import InMemoryServiceCatalog
from photo_availability.utils import combine, to_calendar_date, validate_time_string

logger = get_request_logger(__name__)


class AvailabilityService:
    """Slot lists for one photographer, fleet search and slot booking."""

    def __init__(
        self,
        photographers: InMemoryPhotographerDirectory,
        bookings: InMemoryBookingStore,
        services: Optional[InMemoryServiceCatalog] = None,
        fleet: Optional[FleetAvailabilityFilter] = None,
    ) -> None:
        self.photographers = photographers
        self.bookings = bookings
        self.services = services or InMemoryServiceCatalog()
        self.fleet = fleet or FleetAvailabilityFilter(bookings)

    def resolve_duration(
        self,
        session_duration_minutes: Optional[int] = None,
        service_ids: Optional[Iterable[str]] = None,
    ) -> int:
        """Explicit duration, else the services' total, else the default."""
        if session_duration_minutes is not None:
            if session_duration_minutes <= 0:
                raise InvalidInputError(
                    f"Session duration must be positive, got {session_duration_minutes}"
                )
            return session_duration_minutes

        if service_ids:
            total = self.services.total_duration_minutes(service_ids)
            if total > 0:
                return total

        return settings.scheduling.default_session_duration_minutes

    async def get_available_slots(
        self,
        photographer_id: str,
        target_date: date,
        session_duration_minutes: Optional[int] = None,
        service_ids: Optional[Iterable[str]] = None,
        ignore_lead_time: bool = False,
        now: Optional[datetime] = None,
    ) -> list[TimeSlot]:
        """Bookable slots for one photographer on a date, earliest first.

        Raises:
            NotFoundError: Unknown photographer or service.
            InvalidInputError: Non-positive duration.
        """
        photographer = self.photographers.get(photographer_id)
        duration = self.resolve_duration(session_duration_minutes, service_ids)
        slots = await self.fleet.evaluate_photographer(
            photographer,
            to_calendar_date(target_date),
            duration,
            now or datetime.now(),
            ignore_lead_time=ignore_lead_time,
        )
        logger.info(
            "%d slot(s) for %s on %s (duration=%d)",
            len(slots), photographer_id, target_date, duration,
        )
        return slots

    async def get_slots_by_date(
        self,
        target_date: date,
        session_duration_minutes: Optional[int] = None,
        service_ids: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None,
    ) -> list[TimeSlot]:
        """Every distinct slot offered by any active photographer on a date."""
        duration = self.resolve_duration(session_duration_minutes, service_ids)
        slots, failed = await self.fleet.collect_fleet_slots(
            self.photographers.list_active(), to_calendar_date(target_date), duration, now=now
        )
        if failed:
            logger.warning("Slot union for %s is missing %d photographer(s)", target_date, len(failed))
        return slots

    async def get_available_photographers(
        self, request: AvailabilityRequest, now: Optional[datetime] = None
    ) -> FleetAvailabilityResult:
        """Photographers who can take the requested session.

        A request naming a photographer is answered for that photographer only.
        """
        if request.is_fleet_wide:
            roster = self.photographers.list_active()
        else:
            roster = [self.photographers.get(request.photographer_id)]

        return await self.fleet.find_available_photographers(
            roster,
            request.target_date,
            request.session_duration_minutes,
            requested_window=request.requested_window,
            required_categories=request.required_categories,
            now=now,
        )

    async def book_slot(
        self,
        photographer_id: str,
        target_date: date,
        start_time: str,
        session_duration_minutes: Optional[int] = None,
        service_ids: Optional[Iterable[str]] = None,
        customer_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Booking:
        """Book a slot the engine currently offers.

        The offered-slot check is advisory; the store's conditional write
        is what guarantees no two active bookings overlap.

        Raises:
            InvalidInputError: Malformed start time or duration.
            NotFoundError: Unknown photographer or service.
            BookingConflictError: Slot not offered, or taken concurrently.
        """
        start_time = validate_time_string(start_time)
        day = to_calendar_date(target_date)
        duration = self.resolve_duration(session_duration_minutes, service_ids)

        offered = await self.get_available_slots(photographer_id, day, duration, now=now)
        requested_start = combine(day, start_time)
        requested_end = requested_start + timedelta(minutes=duration)
        if not any(s.start == requested_start and s.end == requested_end for s in offered):
            raise BookingConflictError(
                f"Photographer {photographer_id} is not available at {start_time} on {day}"
            )

        return await self.bookings.create_booking(
            Booking(
                photographer_id=photographer_id,
                booking_date=day,
                start_time=start_time,
                session_duration_minutes=duration,
                status=BookingStatus.PENDING,
                customer_name=customer_name,
            )
        )
