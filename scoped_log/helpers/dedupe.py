"""First-occurrence warnings for scope misuse tolerated in production mode.

With debug checks off a misbehaving token must not crash its caller, yet
logging the same misuse on every call would flood the log. The first
occurrence of each key is logged; later ones are only counted. Misuse can
happen on any thread, so the bookkeeping is lock-guarded.

Usage:
    from scoped_log.helpers.dedupe import warn_first, suppressed_count

    warn_first("empty_pop", "pop on empty scope stack ignored")   # logged
    warn_first("empty_pop", "pop on empty scope stack ignored")   # counted
    suppressed_count("empty_pop")  # 1
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)

_lock = threading.Lock()
# key -> number of repeats swallowed after the first warning
_seen: dict[str, int] = {}


def warn_first(key: str, message: str) -> bool:
    """Log ``message`` the first time ``key`` is seen; count repeats.

    Returns:
        True if this call emitted the warning.
    """
    with _lock:
        repeats = _seen.get(key)
        if repeats is not None:
            _seen[key] = repeats + 1
            return False
        _seen[key] = 0
    logger.warning("[scoped_log] %s (further occurrences suppressed)", message)
    return True


def has_warned(key: str) -> bool:
    with _lock:
        return key in _seen


def suppressed_count(key: str) -> int:
    """Number of occurrences of ``key`` swallowed after the first."""
    with _lock:
        return _seen.get(key, 0)


def reset_warnings() -> None:
    """Forget every key. Useful for testing."""
    with _lock:
        _seen.clear()


__all__ = ["has_warned", "reset_warnings", "suppressed_count", "warn_first"]
