"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class CapacityExceededError(ValidationError):
    """A keg was asked to hold more than its capacity."""

    def __init__(self, keg_id: int | None, requested: float, capacity: float) -> None:
        super().__init__(
            f"Volume cannot exceed keg size "
            f"(requested {requested:.1f}, capacity {capacity:.1f})"
        )
        self.keg_id = keg_id
        self.requested = requested
        self.capacity = capacity


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class KegNotFoundError(EntityNotFoundError):

    def __init__(self, keg_id: int) -> None:
        super().__init__(f"Keg #{keg_id} not found")
        self.keg_id = keg_id
