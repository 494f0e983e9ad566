"""Service catalog with the session durations the engine needs."""

import logging
from typing import Iterable, Optional

from photo_availability.errors import NotFoundError
from photo_availability.schemas.photographer_schema import Service, ServiceCategory

logger = logging.getLogger(__name__)

SERVICE_CATALOG: list[Service] = [
    Service(
        id="portrait-session",
        name="Portrait Session",
        category=ServiceCategory.PHOTOGRAPHY,
        duration_minutes=60,
    ),
    Service(
        id="event-coverage",
        name="Event Coverage",
        category=ServiceCategory.PHOTOGRAPHY,
        duration_minutes=180,
    ),
    Service(
        id="hair-and-makeup",
        name="Hair and Makeup",
        category=ServiceCategory.BEAUTY,
        duration_minutes=60,
    ),
    Service(
        id="wardrobe-styling",
        name="Wardrobe Styling",
        category=ServiceCategory.STYLING,
        duration_minutes=30,
    ),
    Service(
        id="lighting-rental",
        name="Lighting Rental",
        category=ServiceCategory.EQUIPMENT,
    ),
]


class InMemoryServiceCatalog:
    """Service records keyed by id."""

    def __init__(self, services: Optional[Iterable[Service]] = None) -> None:
        source = SERVICE_CATALOG if services is None else services
        self._services: dict[str, Service] = {s.id: s for s in source}

    def get(self, service_id: str) -> Service:
        if service_id not in self._services:
            raise NotFoundError("Service", service_id)
        return self._services[service_id]

    def total_duration_minutes(self, service_ids: Iterable[str]) -> int:
        """Sum of the services' durations. Services without one count as zero.

        Raises:
            NotFoundError: If any service id is unknown.
        """
        services = [self.get(sid) for sid in service_ids]
        total = sum(s.duration_minutes or 0 for s in services)
        logger.debug("Duration for services %s: %d min", [s.id for s in services], total)
        return total
