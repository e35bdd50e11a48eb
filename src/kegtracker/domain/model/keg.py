"""Keg aggregate: a single tracked container and its fill level."""

from __future__ import annotations

import math
from dataclasses import dataclass

from kegtracker.domain.exceptions import CapacityExceededError, ValidationError


@dataclass
class Keg:
    """Aggregate root for a keg.

    Invariants:
    - ``size`` is positive and finite, and never changes after creation
    - ``0 <= current_volume <= size``

    Use ``Keg.create()`` for new kegs.  The ``__init__`` stays plain so a
    repository can hold and hand back records without re-validating.
    """

    id: int | None
    beer_type: str
    size: float
    current_volume: float
    location: str
    last_updated: int

    # --- Factory (used for NEW kegs only) -------------------------------------

    @staticmethod
    def create(beer_type: str, size: float, location: str, now: int) -> Keg:
        """Create a full keg, enforcing the capacity invariant."""
        if not math.isfinite(size) or size <= 0:
            raise ValidationError(f"Keg size must be a positive number, got {size}")

        return Keg(
            id=None,
            beer_type=(beer_type or "").strip(),
            size=float(size),
            current_volume=float(size),  # new kegs start full
            location=(location or "").strip(),
            last_updated=now,
        )

    # --- Mutations ------------------------------------------------------------

    def update_volume(self, volume: float, now: int) -> None:
        """Set the fill level.  Rejects rather than clamps."""
        if not math.isfinite(volume):
            raise ValidationError(f"Volume must be a finite number, got {volume}")
        if volume < 0:
            raise ValidationError("Volume cannot be negative")
        if volume > self.size:
            raise CapacityExceededError(self.id, volume, self.size)
        self.current_volume = float(volume)
        self.last_updated = now

    # --- Computed properties --------------------------------------------------

    @property
    def fill_percentage(self) -> float:
        return self.current_volume / self.size * 100
