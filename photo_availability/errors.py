"""Exception types raised by the availability engine and its collaborators."""


class AvailabilityError(Exception):
    """Base class for all availability engine errors."""


class InvalidInputError(AvailabilityError, ValueError):
    """Malformed time strings, non-positive durations or inverted windows."""


class NotFoundError(AvailabilityError, LookupError):
    """A referenced photographer or service does not exist."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} '{identifier}' not found")


class BookingConflictError(AvailabilityError):
    """A booking write was rejected because it overlaps a committed booking."""


class BookingLookupError(AvailabilityError):
    """The booking store could not list one photographer's bookings."""

    def __init__(self, photographer_id: str, reason: str) -> None:
        self.photographer_id = photographer_id
        self.reason = reason
        super().__init__(f"{reason} ({photographer_id})")
