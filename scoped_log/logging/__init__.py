"""Scope stack, context-aware logging and assertions."""

from .levels import Level, LevelFilter, STATIC_MAX_LEVEL, max_level, set_max_level
from .stack import ScopeStack, current_stack, set_debug_checks, debug_checks_enabled
from .scope import ScopeToken, log_scope, run_in_scope, scoped, current_scope, scope_depth
from .dispatch import (
    ScopedLoggerAdapter,
    log,
    error,
    warn,
    warning,
    info,
    debug,
    trace,
    enabled,
    get_logger,
)
from .assertion import scoped_assert, debug_assert
from .context import configure_logging, install_log_context, uninstall_log_context

__all__ = [
    "Level",
    "LevelFilter",
    "STATIC_MAX_LEVEL",
    "ScopeStack",
    "ScopeToken",
    "ScopedLoggerAdapter",
    "configure_logging",
    "current_scope",
    "current_stack",
    "debug",
    "debug_assert",
    "debug_checks_enabled",
    "enabled",
    "error",
    "get_logger",
    "info",
    "install_log_context",
    "log",
    "log_scope",
    "max_level",
    "run_in_scope",
    "scope_depth",
    "scoped",
    "scoped_assert",
    "set_debug_checks",
    "set_max_level",
    "trace",
    "uninstall_log_context",
    "warn",
    "warning",
]
