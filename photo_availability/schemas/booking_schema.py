"""Booking records and the intervals they occupy."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from photo_availability.utils import validate_time_string


class BookingStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    RESCHEDULED = "Rescheduled"
    REJECTED = "Rejected"


# Bookings in these states never block a slot.
INACTIVE_BOOKING_STATUSES = frozenset({BookingStatus.CANCELLED, BookingStatus.REJECTED})


class Booking(BaseModel):
    """A booking as owned by the booking subsystem."""

    id: Optional[str] = None
    photographer_id: str
    booking_date: date
    start_time: str
    session_duration_minutes: Optional[int] = Field(default=None, gt=0)
    status: BookingStatus = BookingStatus.PENDING
    customer_name: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("booking_date", mode="before")
    @classmethod
    def _strip_clock(cls, value: object) -> object:
        if isinstance(value, datetime):
            return value.date()
        return value

    @field_validator("start_time")
    @classmethod
    def _check_start(cls, value: str) -> str:
        return validate_time_string(value)

    @property
    def blocks_availability(self) -> bool:
        return self.status not in INACTIVE_BOOKING_STATUSES


class BookedInterval(BaseModel):
    """Time range occupied by an existing booking on the target date."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
