"""Specialty matching between photographers and requested service categories."""

from typing import Iterable

from photo_availability.schemas.photographer_schema import Photographer, ServiceCategory


def can_handle_categories(
    specialties: Iterable[ServiceCategory], required: Iterable[ServiceCategory]
) -> bool:
    """True if every required category is among the specialties.

    A photographer with a superset of the needed specialties qualifies.
    An empty requirement is always satisfied.
    """
    return set(required) <= set(specialties)


def filter_by_categories(
    photographers: Iterable[Photographer], required: Iterable[ServiceCategory]
) -> list[Photographer]:
    required = set(required)
    return [p for p in photographers if can_handle_categories(p.specialties, required)]
