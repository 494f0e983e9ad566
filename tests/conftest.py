"""Shared test fixtures and helpers."""

from datetime import date, datetime
from typing import Optional

import pytest

from photo_availability.scheduling.service import AvailabilityService
from photo_availability.schemas.booking_schema import Booking, BookingStatus
from photo_availability.schemas.photographer_schema import Photographer, ServiceCategory
from photo_availability.schemas.schedule_schema import DateOverride, WeeklyScheduleItem
from photo_availability.tools.bookings import InMemoryBookingStore
from photo_availability.tools.photographers import InMemoryPhotographerDirectory
from photo_availability.tools.services import InMemoryServiceCatalog

MONDAY = date(2025, 3, 17)
TUESDAY = date(2025, 3, 18)
SUNDAY_BEFORE = date(2025, 3, 16)

# Far enough in the past that lead time never interferes.
LONG_AGO = datetime(2025, 1, 1, 0, 0)


def make_schedule_item(
    day: str = "Monday",
    start: str = "09:00",
    end: str = "17:00",
    available: bool = True,
) -> WeeklyScheduleItem:
    return WeeklyScheduleItem(
        day_of_week=day, start_time=start, end_time=end, is_available=available
    )


def make_photographer(
    photographer_id: str = "ph-1",
    specialties: Optional[set[ServiceCategory]] = None,
    schedule: Optional[list[WeeklyScheduleItem]] = None,
    overrides: Optional[list[DateOverride]] = None,
    lead_time_hours: Optional[float] = 0,
    is_active: bool = True,
) -> Photographer:
    """Photographer working Monday 09:00-17:00 unless told otherwise."""
    return Photographer(
        id=photographer_id,
        name=photographer_id.replace("-", " ").title(),
        specialties=specialties if specialties is not None else {ServiceCategory.PHOTOGRAPHY},
        weekly_schedule=schedule if schedule is not None else [make_schedule_item()],
        date_overrides=overrides or [],
        booking_lead_time_hours=lead_time_hours,
        is_active=is_active,
    )


def make_booking(
    start_time: str,
    duration: int = 120,
    photographer_id: str = "ph-1",
    booking_date: date = MONDAY,
    status: BookingStatus = BookingStatus.CONFIRMED,
    booking_id: Optional[str] = None,
) -> Booking:
    return Booking(
        id=booking_id,
        photographer_id=photographer_id,
        booking_date=booking_date,
        start_time=start_time,
        session_duration_minutes=duration,
        status=status,
    )


def at(day: date, clock: str) -> datetime:
    hours, minutes = clock.split(":")
    return datetime(day.year, day.month, day.day, int(hours), int(minutes))


@pytest.fixture
def booking_store():
    return InMemoryBookingStore()


@pytest.fixture
def directory():
    return InMemoryPhotographerDirectory(
        [
            make_photographer("ph-1", {ServiceCategory.PHOTOGRAPHY}),
            make_photographer(
                "ph-2",
                {ServiceCategory.PHOTOGRAPHY, ServiceCategory.STYLING},
                schedule=[make_schedule_item("Monday", "13:00", "18:00")],
            ),
            make_photographer("ph-3", {ServiceCategory.BEAUTY}),
            make_photographer("ph-retired", is_active=False),
        ]
    )


@pytest.fixture
def availability_service(directory, booking_store):
    return AvailabilityService(
        photographers=directory,
        bookings=booking_store,
        services=InMemoryServiceCatalog(),
    )
