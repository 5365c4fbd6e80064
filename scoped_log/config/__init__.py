"""Environment-driven configuration constants.

Modules here hold values only. Parsing into enums happens in the packages
that consume them.
"""

from .logging import (
    APP_LOG_LEVEL,
    APP_LOG_FORMAT,
    APP_LOG_DATEFMT,
    SCOPE_SEPARATOR,
    NO_SCOPE_PLACEHOLDER,
    SCOPED_LOG_MAX_LEVEL,
    SCOPED_LOG_DEBUG_CHECKS,
    SCOPED_LOG_STATIC_MAX_LEVEL,
)

__all__ = [
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
    "SCOPE_SEPARATOR",
    "NO_SCOPE_PLACEHOLDER",
    "SCOPED_LOG_MAX_LEVEL",
    "SCOPED_LOG_DEBUG_CHECKS",
    "SCOPED_LOG_STATIC_MAX_LEVEL",
]
