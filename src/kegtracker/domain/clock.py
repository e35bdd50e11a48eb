"""Time source port.

Kegs record ``last_updated`` as whole seconds since the Unix epoch.  The
domain asks a Clock for that value instead of reading the wall clock,
so tests can drive time explicitly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Clock(ABC):

    @abstractmethod
    def now(self) -> int:
        """Return the current time as integer seconds since the epoch."""
