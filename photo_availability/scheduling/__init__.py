from photo_availability.scheduling.capability import can_handle_categories, filter_by_categories
from photo_availability.scheduling.conflicts import (
    booked_intervals_for_date,
    has_conflict,
    intervals_overlap,
)
from photo_availability.scheduling.fleet import FleetAvailabilityFilter
from photo_availability.scheduling.normalizer import (
    PlaceholderHours,
    default_schedule_item,
    normalize_weekly_schedule,
)
from photo_availability.scheduling.resolver import (
    Unavailable,
    WorkingWindow,
    resolve_working_window,
)
from photo_availability.scheduling.slot_generator import earliest_allowed_start, generate_slots

__all__ = [
    "normalize_weekly_schedule",
    "default_schedule_item",
    "PlaceholderHours",
    "resolve_working_window",
    "WorkingWindow",
    "Unavailable",
    "intervals_overlap",
    "has_conflict",
    "booked_intervals_for_date",
    "generate_slots",
    "earliest_allowed_start",
    "can_handle_categories",
    "filter_by_categories",
    "FleetAvailabilityFilter",
]
