"""Severity levels and the two max-level gates.

``Level`` orders severities by verbosity (ERROR < WARN < INFO < DEBUG <
TRACE) and maps each onto a stdlib logging number. ``LevelFilter`` adds OFF
and is what both gates hold.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from ..config.logging import SCOPED_LOG_MAX_LEVEL, SCOPED_LOG_STATIC_MAX_LEVEL

TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class Level(IntEnum):
    """Log severity. Larger values are more verbose."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @property
    def stdlib(self) -> int:
        """Matching stdlib logging level number."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_stdlib(cls, levelno: int) -> Level:
        """Nearest level for a stdlib number, rounding towards more severe."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


class LevelFilter(IntEnum):
    """Maximum enabled level, or OFF to disable everything."""

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def parse(cls, value: str | int) -> LevelFilter:
        """Parse a level name (case-insensitive) or number.

        Raises:
            ValueError: If the value names no level.
        """
        if isinstance(value, int):
            return cls(value)
        name = str(value).strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"unknown log level: {value!r}") from None


_STDLIB_LEVELS: dict[Level, int] = {
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: TRACE_LEVEL_NUM,
}

_ALIASES = {"WARNING": "WARN", "NONE": "OFF"}

STATIC_MAX_LEVEL: LevelFilter = LevelFilter.parse(SCOPED_LOG_STATIC_MAX_LEVEL)

_max_level: LevelFilter = LevelFilter.parse(SCOPED_LOG_MAX_LEVEL)


def max_level() -> LevelFilter:
    """Return the runtime max level."""
    return _max_level


def set_max_level(level: LevelFilter | str | int) -> LevelFilter:
    """Set the runtime max level and return the previous one."""
    global _max_level  # noqa: PLW0603
    previous = _max_level
    _max_level = LevelFilter.parse(level)
    return previous


__all__ = [
    "Level",
    "LevelFilter",
    "STATIC_MAX_LEVEL",
    "TRACE_LEVEL_NUM",
    "max_level",
    "set_max_level",
]
