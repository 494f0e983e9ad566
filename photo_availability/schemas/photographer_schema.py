"""Photographer and service catalog data models."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from photo_availability.schemas.schedule_schema import DateOverride, WeeklyScheduleItem


class ServiceCategory(str, Enum):
    """Service categories a photographer can specialize in."""

    PHOTOGRAPHY = "Photography"
    BEAUTY = "Beauty"
    STYLING = "Styling"
    EQUIPMENT = "Equipment"
    OTHER = "Other"


class Photographer(BaseModel):
    """Photographer record as read by the availability engine.

    The engine treats this as a read-only snapshot. The weekly schedule is
    normalized once when the record is written to the directory.
    """

    id: str
    name: str
    specialties: set[ServiceCategory] = Field(default_factory=set)
    weekly_schedule: list[WeeklyScheduleItem] = Field(default_factory=list)
    date_overrides: list[DateOverride] = Field(default_factory=list)
    booking_lead_time_hours: Optional[float] = Field(default=None, ge=0)
    is_active: bool = True

    @field_validator("weekly_schedule", mode="before")
    @classmethod
    def _drop_unusable_schedule_items(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            return value
        items = (WeeklyScheduleItem.coerce(raw) for raw in value)
        return [item for item in items if item is not None]

    def lead_time_hours(self, default: float) -> float:
        """Minimum advance notice, falling back to the configured default."""
        if self.booking_lead_time_hours is None:
            return default
        return self.booking_lead_time_hours


class Service(BaseModel):
    """Catalog service; only its duration matters to the engine."""

    id: str
    name: str
    category: ServiceCategory = ServiceCategory.PHOTOGRAPHY
    duration_minutes: Optional[int] = Field(default=None, gt=0)
