"""Demo roster and bookings for the command-line entry point."""

from datetime import date, timedelta

from photo_availability.schemas.booking_schema import Booking, BookingStatus
from photo_availability.schemas.photographer_schema import Photographer, ServiceCategory
from photo_availability.schemas.schedule_schema import CustomHours, DateOverride

_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


def _weekday_hours(start: str, end: str, days: list[str]) -> list[dict]:
    return [
        {"day_of_week": day, "start_time": start, "end_time": end, "is_available": True}
        for day in days
    ]


def demo_photographers(today: date) -> list[Photographer]:
    """Three photographers with differing hours, specialties and lead times."""
    return [
        Photographer(
            id="ph-ana",
            name="Ana Reyes",
            specialties={ServiceCategory.PHOTOGRAPHY, ServiceCategory.STYLING},
            weekly_schedule=_weekday_hours("09:00", "17:00", _WEEKDAYS),
            date_overrides=[
                DateOverride(
                    date=today + timedelta(days=3),
                    is_available=False,
                    reason="Vacation",
                ),
            ],
            booking_lead_time_hours=24,
        ),
        Photographer(
            id="ph-ben",
            name="Ben Okafor",
            specialties={ServiceCategory.PHOTOGRAPHY},
            weekly_schedule=_weekday_hours("12:00", "24:00", _WEEKDAYS + ["Saturday"]),
            date_overrides=[
                DateOverride(
                    date=today + timedelta(days=2),
                    is_available=True,
                    custom_hours=CustomHours(start_time="08:00", end_time="12:00"),
                    reason="Overtime",
                ),
            ],
            booking_lead_time_hours=0,
        ),
        Photographer(
            id="ph-cleo",
            name="Cleo Martin",
            specialties={ServiceCategory.BEAUTY, ServiceCategory.STYLING},
            weekly_schedule=_weekday_hours("10:00", "16:00", ["Saturday", "Sunday"]),
        ),
    ]


def demo_bookings(today: date) -> list[Booking]:
    tomorrow = today + timedelta(days=1)
    return [
        Booking(
            id="BK-DEMO01",
            photographer_id="ph-ben",
            booking_date=tomorrow,
            start_time="14:00",
            session_duration_minutes=120,
            status=BookingStatus.CONFIRMED,
        ),
        Booking(
            id="BK-DEMO02",
            photographer_id="ph-ben",
            booking_date=tomorrow,
            start_time="18:00",
            session_duration_minutes=90,
            status=BookingStatus.CANCELLED,
        ),
    ]
