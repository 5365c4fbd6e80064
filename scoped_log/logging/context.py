"""Expose the scope label on every stdlib ``LogRecord``."""

from __future__ import annotations

import sys
import logging
from typing import TextIO

from .stack import current_stack
from ..config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT, NO_SCOPE_PLACEHOLDER

# Marks the root handler owned by configure_logging
_HANDLER_NAME = "scoped_log"


def install_log_context() -> None:
    """Install a LogRecord factory that sets ``record.scope``.

    The attribute holds the current cumulative label, or ``"-"`` outside any
    scope, so format strings may use ``%(scope)s``.
    """
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        label = current_stack().current()
        record.scope = label if label is not None else NO_SCOPE_PLACEHOLDER
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]
    install_log_context._factory = record_factory  # type: ignore[attr-defined]
    install_log_context._previous_factory = old_factory  # type: ignore[attr-defined]


def uninstall_log_context() -> bool:
    """Restore the record factory that was active before installation.

    Only done while our factory is still the installed one. If another
    factory has been layered on top since, the chain is left alone (ours
    keeps running underneath it) and False is returned.
    """
    if not getattr(install_log_context, "_installed", False):
        return False
    if logging.getLogRecordFactory() is not install_log_context._factory:  # type: ignore[attr-defined]
        return False
    logging.setLogRecordFactory(install_log_context._previous_factory)  # type: ignore[attr-defined]
    install_log_context._installed = False  # type: ignore[attr-defined]
    return True


def configure_logging(
    *,
    level: int | str | None = None,
    fmt: str | None = None,
    datefmt: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route root logging through one scope-aware stream handler.

    Installs the record factory, then attaches a handler to the root logger
    whose format may reference ``%(scope)s``. Repeated calls replace that
    handler instead of stacking a second one; handlers added by other code
    are left as they are. Arguments default to the ``APP_LOG_*`` settings.

    The default format does not include ``%(scope)s`` because messages sent
    through ``scoped_log.info`` and friends already carry the label.
    """
    install_log_context()
    level = APP_LOG_LEVEL if level is None else level

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)
            existing.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt or APP_LOG_FORMAT, datefmt=datefmt or APP_LOG_DATEFMT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler


__all__ = [
    "configure_logging",
    "install_log_context",
    "uninstall_log_context",
]
