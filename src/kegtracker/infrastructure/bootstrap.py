"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from kegtracker.application.keg_tracker import KegTracker
from kegtracker.infrastructure.config import Settings
from kegtracker.infrastructure.persistence.in_memory_keg_repository import (
    InMemoryKegRepository,
)
from kegtracker.infrastructure.system_clock import SystemClock


def settings() -> Settings:
    return Settings()


def keg_tracker() -> KegTracker:
    """Build a fresh, empty tracker for one process run."""
    return KegTracker(keg_repo=InMemoryKegRepository(), clock=SystemClock())
