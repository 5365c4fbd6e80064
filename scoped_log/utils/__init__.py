"""Small shared utilities."""

from .env import env_flag, env_level

__all__ = ["env_flag", "env_level"]
