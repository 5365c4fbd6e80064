"""Context-aware leveled logging.

Every call is gated on the static max level, the runtime max level and the
target logger, in that order. Only a call that passes all three reads the
scope stack, formats its message and forwards it to stdlib logging, so a
disabled call never evaluates ``__format__``/``__repr__`` of its arguments.

The target defaults to the calling module's ``__name__``, matching the usual
``logging.getLogger(__name__)`` convention.
"""

from __future__ import annotations

import sys
import logging
from typing import Any
from collections.abc import Callable

from .render import render
from .stack import current_stack
from .levels import STATIC_MAX_LEVEL, TRACE_LEVEL_NUM, Level, LevelFilter, max_level
from ..config.logging import SCOPE_SEPARATOR


def _caller_module(depth: int) -> str:
    return sys._getframe(depth + 1).f_globals.get("__name__", "root")


def _dispatch(
    level: Level,
    target: str | None,
    template: object,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    stacklevel: int,
) -> None:
    # stacklevel counts frames above this one up to the user's call site
    if level > STATIC_MAX_LEVEL or level > max_level():
        return
    logger = logging.getLogger(target if target is not None else _caller_module(stacklevel))
    std_level = level.stdlib
    if not logger.isEnabledFor(std_level):
        return
    message = render(template, args, kwargs)
    label = current_stack().current()
    if label is not None:
        message = f"{label}{SCOPE_SEPARATOR}{message}"
    # No args: stdlib leaves the message untouched, so '%' in labels is safe
    logger.log(std_level, message, stacklevel=stacklevel + 1)


def log(level: Level | int, template: object, *args: Any, target: str | None = None, **kwargs: Any) -> None:
    """Log ``template.format(*args, **kwargs)`` prefixed with the current scope."""
    if not isinstance(level, Level):
        level = Level(level)
    _dispatch(level, target, template, args, kwargs, 2)


def error(template: object, *args: Any, target: str | None = None, **kwargs: Any) -> None:
    _dispatch(Level.ERROR, target, template, args, kwargs, 2)


def warn(template: object, *args: Any, target: str | None = None, **kwargs: Any) -> None:
    _dispatch(Level.WARN, target, template, args, kwargs, 2)


def info(template: object, *args: Any, target: str | None = None, **kwargs: Any) -> None:
    _dispatch(Level.INFO, target, template, args, kwargs, 2)


def debug(template: object, *args: Any, target: str | None = None, **kwargs: Any) -> None:
    _dispatch(Level.DEBUG, target, template, args, kwargs, 2)


def trace(template: object, *args: Any, target: str | None = None, **kwargs: Any) -> None:
    _dispatch(Level.TRACE, target, template, args, kwargs, 2)


def _disabled(template: object, *args: Any, target: str | None = None, **kwargs: Any) -> None:
    """Stand-in for entry points above the static max level."""


def _static_gate(level: Level, func: Callable[..., None], ceiling: LevelFilter) -> Callable[..., None]:
    return func if level <= ceiling else _disabled


error = _static_gate(Level.ERROR, error, STATIC_MAX_LEVEL)
warn = _static_gate(Level.WARN, warn, STATIC_MAX_LEVEL)
info = _static_gate(Level.INFO, info, STATIC_MAX_LEVEL)
debug = _static_gate(Level.DEBUG, debug, STATIC_MAX_LEVEL)
trace = _static_gate(Level.TRACE, trace, STATIC_MAX_LEVEL)
warning = warn


def enabled(level: Level | int, target: str | None = None) -> bool:
    """Return True if a call at ``level`` for ``target`` would be emitted."""
    if not isinstance(level, Level):
        level = Level(level)
    if level > STATIC_MAX_LEVEL or level > max_level():
        return False
    logger = logging.getLogger(target if target is not None else _caller_module(1))
    return logger.isEnabledFor(level.stdlib)


class ScopedLoggerAdapter(logging.LoggerAdapter):
    """Prefix the current scope label to ``%``-style stdlib logging calls.

    Calls pass the same static and runtime max-level gates as the module
    entry points; stdlib numbers are mapped onto ``Level`` for that check.

    Wrap an existing logger to make it scope-aware without changing its call
    sites::

        logger = ScopedLoggerAdapter(logging.getLogger(__name__))
        logger.info("loaded %d rows", n)   # "outer-scope: loaded 3 rows"
    """

    def __init__(self, logger: logging.Logger, extra: dict[str, Any] | None = None) -> None:
        super().__init__(logger, extra or {})

    def log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None:
        gate = Level.from_stdlib(level)
        if gate > STATIC_MAX_LEVEL or gate > max_level() or not self.isEnabledFor(level):
            return
        label = current_stack().current()
        if label is not None:
            if args:
                label = label.replace("%", "%%")
            msg = f"{label}{SCOPE_SEPARATOR}{msg}"
        msg, kwargs = self.process(msg, kwargs)
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        self.logger.log(level, msg, *args, **kwargs)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        self.log(TRACE_LEVEL_NUM, msg, *args, **kwargs)


def get_logger(name: str | None = None) -> ScopedLoggerAdapter:
    """Return a scope-aware adapter around ``logging.getLogger(name)``."""
    return ScopedLoggerAdapter(logging.getLogger(name))


__all__ = [
    "ScopedLoggerAdapter",
    "debug",
    "enabled",
    "error",
    "get_logger",
    "info",
    "log",
    "trace",
    "warn",
    "warning",
]
