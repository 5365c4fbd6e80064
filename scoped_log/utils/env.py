"""Environment helper utilities."""

from __future__ import annotations

import os


def env_flag(name: str, default: bool) -> bool:
    """Return True/False for typical truthy env encodings."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_level(name: str, default: str) -> str:
    """Return a lower-cased level name from the environment."""
    return (os.getenv(name, default) or default).strip().lower()


__all__ = ["env_flag", "env_level"]
