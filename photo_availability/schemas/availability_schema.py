"""Availability request and result models."""

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from photo_availability.config import settings
from photo_availability.errors import InvalidInputError
from photo_availability.schemas.photographer_schema import Photographer, ServiceCategory
from photo_availability.utils import format_slot_label, parse_display_time


class TimeWindow(BaseModel):
    """Requested time range on the target date, e.g. 10:00 to 14:00."""

    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        parse_display_time(value)
        return value.strip()

    @model_validator(mode="after")
    def _check_order(self) -> "TimeWindow":
        if self.start_minutes >= self.end_minutes:
            raise ValueError("Requested window start must be before its end")
        return self

    @classmethod
    def parse(cls, start_time: str, end_time: str) -> "TimeWindow":
        """Build a window from caller input.

        Raises:
            InvalidInputError: Malformed time or start not before end.
        """
        try:
            return cls(start_time=start_time, end_time=end_time)
        except ValidationError as exc:
            reasons = "; ".join(error["msg"] for error in exc.errors())
            raise InvalidInputError(f"Invalid time window: {reasons}") from None

    @property
    def start_minutes(self) -> int:
        return parse_display_time(self.start_time)

    @property
    def end_minutes(self) -> int:
        return parse_display_time(self.end_time)

    def start_on(self, target_date: date) -> datetime:
        return datetime.combine(target_date, time.min).replace(
            hour=self.start_minutes // 60, minute=self.start_minutes % 60
        )

    def end_on(self, target_date: date) -> datetime:
        return datetime.combine(target_date, time.min).replace(
            hour=self.end_minutes // 60, minute=self.end_minutes % 60
        )


class TimeSlot(BaseModel):
    """A bookable session window with precise start and end instants."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @property
    def label(self) -> str:
        return format_slot_label(self.start, self.end)

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)

    def fits_within(self, window_start: datetime, window_end: datetime) -> bool:
        return self.start >= window_start and self.end <= window_end


class AvailabilityRequest(BaseModel):
    """Slot query for a single photographer or, without an id, the fleet."""

    photographer_id: Optional[str] = None
    target_date: date
    session_duration_minutes: int = Field(
        default_factory=lambda: settings.scheduling.default_session_duration_minutes,
        gt=0,
    )
    requested_window: Optional[TimeWindow] = None
    required_categories: set[ServiceCategory] = Field(default_factory=set)

    @property
    def is_fleet_wide(self) -> bool:
        return self.photographer_id is None


class FleetAvailabilityResult(BaseModel):
    """Photographers able to take the requested session.

    ``failed`` maps photographer ids to the reason their booking lookup
    could not complete. Those photographers are excluded from ``available``.
    """

    available: list[Photographer] = Field(default_factory=list)
    slots: dict[str, list[TimeSlot]] = Field(default_factory=dict)
    failed: dict[str, str] = Field(default_factory=dict)

    @property
    def photographer_ids(self) -> list[str]:
        return [p.id for p in self.available]
