"""Failure reporting configuration: Sentry env vars and tag names."""

import os

SENTRY_DSN: str = os.getenv("SENTRY_DSN", "")
SENTRY_ENVIRONMENT: str = os.getenv("SENTRY_ENVIRONMENT", "production")
SENTRY_RELEASE: str = os.getenv("SENTRY_RELEASE", "")
SENTRY_SAMPLE_RATE: float = float(os.getenv("SENTRY_SAMPLE_RATE", "1.0"))

# Minimum seconds between two reports of the same exception class
SENTRY_RATE_LIMIT_S: float = float(os.getenv("SENTRY_RATE_LIMIT_S", "60"))

SENTRY_TAG_SCOPE = "log.scope"
SENTRY_BREADCRUMB_CATEGORY = "scoped_log"


__all__ = [
    "SENTRY_DSN",
    "SENTRY_ENVIRONMENT",
    "SENTRY_RELEASE",
    "SENTRY_SAMPLE_RATE",
    "SENTRY_RATE_LIMIT_S",
    "SENTRY_TAG_SCOPE",
    "SENTRY_BREADCRUMB_CATEGORY",
]
