"""Logging configuration values.

The static max level plays the role of a build-time switch: it is read once
when the package is imported and entry points above it are bound to no-ops.
The runtime max level only seeds the adjustable gate.
"""

import os

from ..utils.env import env_flag, env_level


APP_LOG_LEVEL = (os.getenv("APP_LOG_LEVEL", "INFO") or "INFO").upper()
APP_LOG_FORMAT = os.getenv(
    "APP_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s",
)
APP_LOG_DATEFMT = os.getenv("APP_LOG_DATEFMT", "%Y-%m-%d %H:%M:%S")

SCOPED_LOG_STATIC_MAX_LEVEL = env_level("SCOPED_LOG_STATIC_MAX_LEVEL", "trace")
SCOPED_LOG_MAX_LEVEL = env_level("SCOPED_LOG_MAX_LEVEL", "trace")

# Misuse of scope tokens raises when enabled, otherwise it is ignored with a warning
SCOPED_LOG_DEBUG_CHECKS = env_flag("SCOPED_LOG_DEBUG_CHECKS", __debug__)

SCOPE_SEPARATOR = ": "
NO_SCOPE_PLACEHOLDER = "-"


__all__ = [
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
    "SCOPED_LOG_STATIC_MAX_LEVEL",
    "SCOPED_LOG_MAX_LEVEL",
    "SCOPED_LOG_DEBUG_CHECKS",
    "SCOPE_SEPARATOR",
    "NO_SCOPE_PLACEHOLDER",
]
