"""
In-memory photographer directory.

Stands in for the photographer store. Weekly schedules are normalized
here, on write, so every record the engine reads has seven day entries.
"""

import logging
from typing import Iterable, Optional

from photo_availability.errors import NotFoundError
from photo_availability.scheduling.capability import can_handle_categories
from photo_availability.scheduling.normalizer import PlaceholderHours, normalize_weekly_schedule
from photo_availability.schemas.photographer_schema import Photographer, ServiceCategory

logger = logging.getLogger(__name__)


class InMemoryPhotographerDirectory:
    """Photographer records keyed by id."""

    def __init__(
        self,
        photographers: Optional[Iterable[Photographer]] = None,
        placeholder: Optional[PlaceholderHours] = None,
    ) -> None:
        self.placeholder = placeholder
        self._photographers: dict[str, Photographer] = {}
        for photographer in photographers or []:
            self.upsert(photographer)

    def upsert(self, photographer: Photographer) -> Photographer:
        """Store a photographer with its weekly schedule normalized."""
        stored = photographer.model_copy(
            update={
                "weekly_schedule": normalize_weekly_schedule(
                    photographer.weekly_schedule, self.placeholder
                )
            }
        )
        self._photographers[stored.id] = stored
        logger.debug("Photographer stored: %s", stored.id)
        return stored

    def get(self, photographer_id: str) -> Photographer:
        if photographer_id not in self._photographers:
            raise NotFoundError("Photographer", photographer_id)
        return self._photographers[photographer_id]

    def list_active(self) -> list[Photographer]:
        return [p for p in self._photographers.values() if p.is_active]

    def find_by_service_categories(
        self, required: Iterable[ServiceCategory]
    ) -> list[Photographer]:
        """Active photographers whose specialties cover every required category."""
        required = set(required)
        return [p for p in self.list_active() if can_handle_categories(p.specialties, required)]
