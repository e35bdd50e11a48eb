"""In-memory implementation of KegRepository.

Process-lifetime storage: everything lives in a dict and is gone when
the process exits.  Records are copied in and out, so callers only
change stored state by saving.
"""

from __future__ import annotations

from dataclasses import replace

from kegtracker.domain.model.keg import Keg
from kegtracker.domain.repository.keg_repository import KegRepository


class InMemoryKegRepository(KegRepository):

    def __init__(self) -> None:
        self._store: dict[int, Keg] = {}
        self._next_id = 1

    # --- KegRepository interface ----------------------------------------------

    def get_by_id(self, keg_id: int) -> Keg | None:
        keg = self._store.get(keg_id)
        return replace(keg) if keg is not None else None

    def list_all(self) -> list[Keg]:
        return [replace(self._store[keg_id]) for keg_id in sorted(self._store)]

    def save(self, keg: Keg) -> None:
        if keg.id is None:
            keg.id = self._next_id
            self._next_id += 1
        self._store[keg.id] = replace(keg)
