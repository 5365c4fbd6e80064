"""Per-thread stack of cumulative scope labels.

Entry ``i`` holds the fully rendered label for nesting depth ``i``. The
concatenation happens once at push time so that reading the current label
from a log call is a single index into the list.

Each thread gets its own ``ScopeStack`` through ``current_stack()``. A new
thread always starts empty; nothing is inherited from the spawning thread.
"""

from __future__ import annotations

import threading

from ..errors import ScopeMisuseError
from ..helpers.dedupe import warn_first
from ..telemetry.sentry import add_breadcrumb
from ..config.logging import SCOPE_SEPARATOR, SCOPED_LOG_DEBUG_CHECKS

_local = threading.local()
_debug_checks: bool = SCOPED_LOG_DEBUG_CHECKS


def debug_checks_enabled() -> bool:
    """Return whether scope misuse raises instead of being ignored."""
    return _debug_checks


def set_debug_checks(enabled: bool) -> bool:
    """Toggle misuse checks and return the previous setting.

    With checks off, misuse is ignored after a single warning per kind. The
    stack can then drift from the set of live tokens, so labels may be wrong
    until the outermost scope exits.
    """
    global _debug_checks  # noqa: PLW0603
    previous = _debug_checks
    _debug_checks = bool(enabled)
    return previous


def report_misuse(kind: str, message: str) -> None:
    """Raise ``ScopeMisuseError`` in debug mode, otherwise warn and carry on.

    Tolerated misuse is also left as a Sentry breadcrumb so that a later
    report shows why scope labels may be off.
    """
    if _debug_checks:
        raise ScopeMisuseError(kind, message)
    warn_first(f"scope_misuse:{kind}", f"{message} (ignored)")
    add_breadcrumb(message, level="warning", data={"kind": kind})


class ScopeStack:
    """Ordered cumulative labels for one thread."""

    __slots__ = ("_entries", "thread_id")

    def __init__(self) -> None:
        self._entries: list[str] = []
        self.thread_id = threading.get_ident()

    def push(self, label: str) -> int:
        """Append the cumulative entry for ``label`` and return its depth index."""
        entries = self._entries
        if entries:
            entries.append(f"{entries[-1]}{SCOPE_SEPARATOR}{label}")
        else:
            entries.append(label)
        return len(entries) - 1

    def pop(self) -> str | None:
        """Remove and return the top entry."""
        if not self._entries:
            report_misuse("empty_pop", "pop on empty scope stack")
            return None
        return self._entries.pop()

    def current(self) -> str | None:
        """Return the top entry, or None when no scope is active."""
        entries = self._entries
        return entries[-1] if entries else None

    @property
    def depth(self) -> int:
        return len(self._entries)

    def entries(self) -> tuple[str, ...]:
        """Snapshot of all entries, outermost first."""
        return tuple(self._entries)

    def truncate(self, depth: int) -> None:
        """Drop every entry at ``depth`` and above."""
        del self._entries[depth:]

    def clear(self) -> None:
        """Drop every entry. Only meant for test isolation."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ScopeStack(depth={len(self._entries)}, current={self.current()!r})"


def current_stack() -> ScopeStack:
    """Return the calling thread's scope stack, creating it on first use."""
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = ScopeStack()
    return stack


__all__ = [
    "ScopeStack",
    "current_stack",
    "debug_checks_enabled",
    "report_misuse",
    "set_debug_checks",
]
