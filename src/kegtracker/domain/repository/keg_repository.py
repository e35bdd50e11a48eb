"""Abstract repository for the Keg aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The repository owns id assignment: ids start at 1,
grow by one per new keg and are never reused.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from kegtracker.domain.model.keg import Keg


class KegRepository(ABC):

    @abstractmethod
    def get_by_id(self, keg_id: int) -> Keg | None:
        """Return a copy of a keg by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Keg]:
        """Return copies of every keg in ascending id order."""

    @abstractmethod
    def save(self, keg: Keg) -> None:
        """Store a new or updated keg, assigning an id to new ones."""
