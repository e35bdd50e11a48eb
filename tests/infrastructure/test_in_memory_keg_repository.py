"""Tests for the in-memory keg store and the system clock."""

import time

from kegtracker.domain.model.keg import Keg
from kegtracker.infrastructure.persistence.in_memory_keg_repository import (
    InMemoryKegRepository,
)
from kegtracker.infrastructure.system_clock import SystemClock


def _new_keg(beer_type="IPA"):
    return Keg.create(beer_type, 15.5, "Bar 1", now=100)


class TestInMemoryKegRepository:

    def test_save_assigns_sequential_ids(self):
        repo = InMemoryKegRepository()
        first, second, third = _new_keg(), _new_keg("Stout"), _new_keg("Lager")
        for keg in (first, second, third):
            repo.save(keg)
        assert (first.id, second.id, third.id) == (1, 2, 3)

    def test_saving_existing_keg_keeps_its_id(self):
        repo = InMemoryKegRepository()
        keg = _new_keg()
        repo.save(keg)
        keg.update_volume(3.0, now=200)
        repo.save(keg)

        nxt = _new_keg("Stout")
        repo.save(nxt)
        assert keg.id == 1
        assert nxt.id == 2
        assert repo.get_by_id(1).current_volume == 3.0

    def test_get_missing_returns_none(self):
        assert InMemoryKegRepository().get_by_id(42) is None

    def test_list_all_sorted_by_id(self):
        repo = InMemoryKegRepository()
        for name in ("A", "B", "C"):
            repo.save(_new_keg(name))
        assert [k.beer_type for k in repo.list_all()] == ["A", "B", "C"]

    def test_instances_are_isolated(self):
        a, b = InMemoryKegRepository(), InMemoryKegRepository()
        a.save(_new_keg())
        assert b.list_all() == []
        keg = _new_keg()
        b.save(keg)
        assert keg.id == 1

    def test_reads_return_copies(self):
        repo = InMemoryKegRepository()
        repo.save(_new_keg())

        fetched = repo.get_by_id(1)
        fetched.current_volume = 99.0
        [listed] = repo.list_all()
        listed.size = 1.0

        stored = repo.get_by_id(1)
        assert (stored.size, stored.current_volume) == (15.5, 15.5)

    def test_caller_keeps_no_handle_after_save(self):
        repo = InMemoryKegRepository()
        keg = _new_keg()
        repo.save(keg)
        keg.current_volume = 0.0
        assert repo.get_by_id(1).current_volume == 15.5


class TestSystemClock:

    def test_now_is_epoch_seconds(self):
        before = int(time.time())
        now = SystemClock().now()
        assert isinstance(now, int)
        assert before <= now <= int(time.time())
