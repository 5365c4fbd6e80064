"""Shared helper functions."""

from .dedupe import has_warned, reset_warnings, suppressed_count, warn_first

__all__ = ["has_warned", "reset_warnings", "suppressed_count", "warn_first"]
