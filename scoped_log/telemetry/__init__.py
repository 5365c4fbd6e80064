"""Optional failure reporting integrations."""

from .sentry import add_breadcrumb, capture_error, init_sentry, sentry_enabled, shutdown_sentry

__all__ = [
    "add_breadcrumb",
    "capture_error",
    "init_sentry",
    "sentry_enabled",
    "shutdown_sentry",
]
