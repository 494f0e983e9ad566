"""
Fleet-wide availability: which photographers can take a requested session.

Each photographer is evaluated in its own task. Booking lookups are the
only I/O, so they run concurrently behind a semaphore, each with its own
timeout. A photographer whose lookup fails or times out is reported in
``FleetAvailabilityResult.failed`` and never aborts the whole query. Any
other error, such as bad input reaching slot generation, propagates.

Usage:
    fleet = FleetAvailabilityFilter(booking_store)
    result = await fleet.find_available_photographers(
        roster, date(2025, 3, 17), 120,
        requested_window=TimeWindow(start_time="10:00", end_time="14:00"),
        required_categories={ServiceCategory.PHOTOGRAPHY},
    )
"""

import asyncio
from datetime import date, datetime
from typing import Iterable, Optional, Protocol, Union

from photo_availability.config import settings
from photo_availability.errors import BookingLookupError, InvalidInputError
from photo_availability.logging_context import get_request_logger
from photo_availability.scheduling.capability import filter_by_categories
from photo_availability.scheduling.conflicts import booked_intervals_for_date
from photo_availability.scheduling.resolver import Unavailable, resolve_working_window
from photo_availability.scheduling.slot_generator import earliest_allowed_start, generate_slots
from photo_availability.schemas.availability_schema import (
    FleetAvailabilityResult,
    TimeSlot,
    TimeWindow,
)
from photo_availability.schemas.booking_schema import BookedInterval, Booking
from photo_availability.schemas.photographer_schema import Photographer, ServiceCategory

logger = get_request_logger(__name__)

EvaluationOutcome = Union[list[TimeSlot], BookingLookupError]


class BookingSource(Protocol):
    """Read access to the booking subsystem."""

    async def list_active_bookings(
        self, photographer_id: str, target_date: date
    ) -> list[Booking]: ...


class FleetAvailabilityFilter:
    """Applies slot generation and capability matching across a roster."""

    def __init__(
        self,
        booking_source: BookingSource,
        max_concurrency: Optional[int] = None,
        fetch_timeout_sec: Optional[float] = None,
        default_lead_time_hours: Optional[float] = None,
    ) -> None:
        self.booking_source = booking_source
        self.max_concurrency = (
            settings.fleet.max_concurrency if max_concurrency is None else max_concurrency
        )
        self.fetch_timeout_sec = (
            settings.fleet.fetch_timeout_sec if fetch_timeout_sec is None else fetch_timeout_sec
        )
        if self.max_concurrency < 1:
            raise InvalidInputError(f"max_concurrency must be >= 1, got {self.max_concurrency}")
        if self.fetch_timeout_sec <= 0:
            raise InvalidInputError(f"fetch_timeout_sec must be > 0, got {self.fetch_timeout_sec}")
        self.default_lead_time_hours = (
            settings.scheduling.default_lead_time_hours
            if default_lead_time_hours is None
            else default_lead_time_hours
        )

    def lead_time_for(self, photographer: Photographer) -> float:
        return photographer.lead_time_hours(self.default_lead_time_hours)

    async def fetch_booked_intervals(
        self, photographer_id: str, target_date: date
    ) -> list[BookedInterval]:
        """Active booked intervals for the date.

        Raises:
            BookingLookupError: The lookup failed or exceeded ``fetch_timeout_sec``.
        """
        try:
            bookings = await asyncio.wait_for(
                self.booking_source.list_active_bookings(photographer_id, target_date),
                timeout=self.fetch_timeout_sec,
            )
        except asyncio.TimeoutError:
            raise BookingLookupError(photographer_id, "booking lookup timed out") from None
        except Exception as exc:
            raise BookingLookupError(photographer_id, f"booking lookup failed: {exc}") from exc
        return booked_intervals_for_date(bookings, target_date)

    async def evaluate_photographer(
        self,
        photographer: Photographer,
        target_date: date,
        duration_minutes: int,
        now: datetime,
        ignore_lead_time: bool = False,
        semaphore: Optional[asyncio.Semaphore] = None,
    ) -> list[TimeSlot]:
        """Slots for one photographer. Skips the booking lookup on days off."""
        window = resolve_working_window(
            photographer.weekly_schedule, photographer.date_overrides, target_date
        )
        if isinstance(window, Unavailable):
            logger.debug("%s unavailable on %s: %s", photographer.id, target_date, window.reason)
            return []

        if semaphore is None:
            booked = await self.fetch_booked_intervals(photographer.id, target_date)
        else:
            async with semaphore:
                booked = await self.fetch_booked_intervals(photographer.id, target_date)

        return generate_slots(
            window,
            duration_minutes,
            booked,
            lead_time_hours=self.lead_time_for(photographer),
            now=now,
            ignore_lead_time=ignore_lead_time,
        )

    async def _evaluate_all(
        self,
        photographers: list[Photographer],
        target_date: date,
        duration_minutes: int,
        now: datetime,
    ) -> list[EvaluationOutcome]:
        semaphore = asyncio.Semaphore(self.max_concurrency)
        tasks = [
            self.evaluate_photographer(p, target_date, duration_minutes, now, semaphore=semaphore)
            for p in photographers
        ]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        for outcome in outcomes:
            if isinstance(outcome, BaseException) and not isinstance(outcome, BookingLookupError):
                raise outcome
        return outcomes

    async def find_available_photographers(
        self,
        roster: Iterable[Photographer],
        target_date: date,
        duration_minutes: int,
        requested_window: Optional[TimeWindow] = None,
        required_categories: Iterable[ServiceCategory] = (),
        now: Optional[datetime] = None,
    ) -> FleetAvailabilityResult:
        """
        Photographers with the required specialties and at least one slot
        inside ``requested_window`` (any slot when no window is given).

        A photographer is rejected before any lookup when the window starts
        earlier than their own lead time allows.
        """
        now = now or datetime.now()
        if duration_minutes <= 0:
            raise InvalidInputError(
                f"Session duration must be positive, got {duration_minutes}"
            )
        candidates = filter_by_categories(roster, required_categories)

        window_start = window_end = None
        if requested_window is not None:
            window_start = requested_window.start_on(target_date)
            window_end = requested_window.end_on(target_date)
            candidates = [
                p for p in candidates
                if window_start >= earliest_allowed_start(now, self.lead_time_for(p))
            ]

        logger.info(
            "Fleet query for %s: %d candidate(s), duration=%d, window=%s",
            target_date, len(candidates), duration_minutes,
            f"{requested_window.start_time}-{requested_window.end_time}"
            if requested_window else "any",
        )

        outcomes = await self._evaluate_all(candidates, target_date, duration_minutes, now)

        result = FleetAvailabilityResult()
        for photographer, outcome in zip(candidates, outcomes):
            if isinstance(outcome, BookingLookupError):
                logger.warning(
                    "Excluding %s from fleet result: %s", photographer.id, outcome.reason
                )
                result.failed[photographer.id] = outcome.reason
                continue

            matching = outcome
            if window_start is not None:
                matching = [s for s in outcome if s.fits_within(window_start, window_end)]
            if matching:
                result.available.append(photographer)
                result.slots[photographer.id] = matching

        logger.info(
            "Fleet query for %s: %d available, %d failed",
            target_date, len(result.available), len(result.failed),
        )
        return result

    async def collect_fleet_slots(
        self,
        roster: Iterable[Photographer],
        target_date: date,
        duration_minutes: int,
        now: Optional[datetime] = None,
    ) -> tuple[list[TimeSlot], dict[str, str]]:
        """Union of every photographer's slots, unique and earliest-first.

        Returns the slots and a map of photographers whose lookup failed.
        """
        now = now or datetime.now()
        if duration_minutes <= 0:
            raise InvalidInputError(
                f"Session duration must be positive, got {duration_minutes}"
            )
        photographers = list(roster)
        outcomes = await self._evaluate_all(photographers, target_date, duration_minutes, now)

        unique: set[TimeSlot] = set()
        failed: dict[str, str] = {}
        for photographer, outcome in zip(photographers, outcomes):
            if isinstance(outcome, BookingLookupError):
                failed[photographer.id] = outcome.reason
                logger.warning("Skipping slots of %s: %s", photographer.id, failed[photographer.id])
                continue
            unique.update(outcome)

        return sorted(unique, key=lambda s: (s.start, s.end)), failed
