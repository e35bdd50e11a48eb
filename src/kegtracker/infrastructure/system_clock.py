"""Wall-clock implementation of the Clock port."""

from __future__ import annotations

from datetime import datetime, timezone

from kegtracker.domain.clock import Clock


class SystemClock(Clock):

    def now(self) -> int:
        return int(datetime.now(timezone.utc).timestamp())
