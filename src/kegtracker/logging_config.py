"""Logging setup for the keg tracker.

Every module gets its logger through ``get_logger`` so all records land
under the ``kegtracker`` namespace and share one handler.
"""

from __future__ import annotations

import logging
import sys

__all__ = [
    "get_logger",
    "configure_logging",
    "reset_logging",
]

_LOGGER_PREFIX = "kegtracker"

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Marker so repeated configure_logging() calls don't stack handlers.
_HANDLER_ATTR = "_kegtracker_handler"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the kegtracker namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the root kegtracker logger.

    Idempotent: calling again only changes the level.
    """
    root = logging.getLogger(_LOGGER_PREFIX)
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)

    if not any(getattr(h, _HANDLER_ATTR, False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
        root.propagate = False

    return root


def reset_logging() -> None:
    """Remove handlers installed by configure_logging (used by tests)."""
    root = logging.getLogger(_LOGGER_PREFIX)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
