"""Sentry reporting for context-aware assertion failures.

Everything here is a no-op until ``init_sentry()`` runs, and ``sentry_sdk``
is only imported at that point, so the dependency stays optional. Reports
are rate-limited per exception class and tagged with the scope label.
"""

from __future__ import annotations

import time
import logging
from typing import Any

from ..config.telemetry import (
    SENTRY_DSN,
    SENTRY_RELEASE,
    SENTRY_TAG_SCOPE,
    SENTRY_ENVIRONMENT,
    SENTRY_SAMPLE_RATE,
    SENTRY_RATE_LIMIT_S,
    SENTRY_BREADCRUMB_CATEGORY,
)

logger = logging.getLogger(__name__)

_error_timestamps: dict[str, float] = {}
_initialized: bool = False


def sentry_enabled() -> bool:
    return _initialized


def init_sentry(**overrides: Any) -> bool:
    """Initialize the Sentry SDK. Idempotent.

    Args:
        **overrides: Extra ``sentry_sdk.init`` options; they win over the
            environment-derived defaults.

    Returns:
        True if Sentry is active after the call. Without a DSN from either
        ``SENTRY_DSN`` or ``overrides`` nothing is initialized.
    """
    global _initialized  # noqa: PLW0603
    if _initialized:
        return True

    kwargs: dict[str, Any] = {
        "dsn": SENTRY_DSN,
        "environment": SENTRY_ENVIRONMENT,
        "traces_sample_rate": 0.0,
        "sample_rate": SENTRY_SAMPLE_RATE,
        "attach_stacktrace": True,
    }
    if SENTRY_RELEASE:
        kwargs["release"] = SENTRY_RELEASE
    kwargs.update(overrides)
    if not kwargs.get("dsn"):
        logger.debug("Sentry not initialized: no DSN configured")
        return False

    import sentry_sdk

    sentry_sdk.init(**kwargs)
    _initialized = True
    logger.info("Sentry initialized: environment=%s", kwargs["environment"])
    return True


def shutdown_sentry() -> None:
    """Flush pending Sentry events and stop reporting. Idempotent."""
    global _initialized  # noqa: PLW0603
    if not _initialized:
        return
    _initialized = False
    _error_timestamps.clear()
    import sentry_sdk

    client = sentry_sdk.get_client()
    client.flush(timeout=2.0)
    client.close()


def capture_error(
    error: BaseException,
    *,
    scope: str | None = None,
    extra: dict[str, Any] | None = None,
) -> bool:
    """Report an error to Sentry with rate-limiting per error class.

    Returns:
        True if the error was handed to Sentry.
    """
    if not _initialized:
        return False

    key = type(error).__qualname__
    now = time.monotonic()
    last = _error_timestamps.get(key)
    if last is not None and (now - last) < SENTRY_RATE_LIMIT_S:
        return False
    _error_timestamps[key] = now

    import sentry_sdk

    label = scope if scope is not None else getattr(error, "scope", None)
    with sentry_sdk.new_scope() as sentry_scope:
        if label is not None:
            sentry_scope.set_tag(SENTRY_TAG_SCOPE, label)
        if extra:
            for k, v in extra.items():
                sentry_scope.set_extra(k, v)
        sentry_sdk.capture_exception(error)
    return True


def add_breadcrumb(
    message: str,
    *,
    category: str = SENTRY_BREADCRUMB_CATEGORY,
    level: str = "info",
    data: dict[str, Any] | None = None,
) -> None:
    """Add a Sentry breadcrumb carrying the current scope label.

    No-op when Sentry is disabled. The label goes in ``data["scope"]``
    unless the caller already set that key.
    """
    if not _initialized:
        return
    import sentry_sdk

    from ..logging.stack import current_stack  # noqa: PLC0415

    payload = dict(data or {})
    label = current_stack().current()
    if label is not None:
        payload.setdefault("scope", label)
    sentry_sdk.add_breadcrumb(message=message, category=category, level=level, data=payload)


__all__ = [
    "add_breadcrumb",
    "capture_error",
    "init_sentry",
    "sentry_enabled",
    "shutdown_sentry",
]
