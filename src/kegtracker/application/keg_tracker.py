"""Application service: the keg tracking use cases.

KegTracker is the only entry point the shell talks to.  It is built
explicitly with a repository and a clock (see ``bootstrap``), so each
test can own an isolated tracker.
"""

from __future__ import annotations

from kegtracker.domain.clock import Clock
from kegtracker.domain.exceptions import DomainException, KegNotFoundError
from kegtracker.domain.model.keg import Keg
from kegtracker.domain.repository.keg_repository import KegRepository
from kegtracker.logging_config import get_logger

logger = get_logger("application.keg_tracker")


class KegTracker:

    def __init__(self, keg_repo: KegRepository, clock: Clock) -> None:
        self._keg_repo = keg_repo
        self._clock = clock

    def add(self, beer_type: str, size: float, location: str) -> Keg:
        """Register a new, full keg and return it with its assigned id."""
        keg = Keg.create(
            beer_type=beer_type,
            size=size,
            location=location,
            now=self._clock.now(),
        )
        self._keg_repo.save(keg)

        logger.info(
            "keg_added",
            extra={"keg_id": keg.id, "beer_type": keg.beer_type, "size": keg.size},
        )
        return keg

    def update_volume(self, keg_id: int, new_volume: float) -> None:
        """Set a keg's current volume.

        Raises KegNotFoundError for an unknown id and
        CapacityExceededError when *new_volume* is above the keg's size.
        The keg is left untouched on any failure.
        """
        keg = self.get(keg_id)

        try:
            keg.update_volume(new_volume, now=self._clock.now())
        except DomainException as exc:
            logger.info(
                "keg_volume_rejected",
                extra={"keg_id": keg_id, "requested": new_volume, "reason": str(exc)},
            )
            raise

        self._keg_repo.save(keg)
        logger.info(
            "keg_volume_updated",
            extra={"keg_id": keg_id, "current_volume": keg.current_volume},
        )

    def get(self, keg_id: int) -> Keg:
        keg = self._keg_repo.get_by_id(keg_id)
        if keg is None:
            logger.info("keg_not_found", extra={"keg_id": keg_id})
            raise KegNotFoundError(keg_id)
        return keg

    def list(self) -> list[Keg]:
        """Return every keg, ordered by id.  Empty when nothing is tracked."""
        return self._keg_repo.list_all()
