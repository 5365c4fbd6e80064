"""Scoped logging context.

Attach hierarchical context labels to log statements and assertion failures
for the dynamic extent of a block, without passing a context object around:

    from scoped_log import log_scope, info, scoped_assert

    info("1")                                 # "1"
    with log_scope("outer-scope"):
        info("2: {}", "some args")            # "outer-scope: 2: some args"
        with log_scope("inner-scope"):
            info("3", target="some-target")   # "outer-scope: inner-scope: 3"
            scoped_assert(ready)              # "outer-scope: inner-scope: ready"
    info("4")                                 # "4"

Architecture Overview:
    - logging/stack.py: Per-thread stack of cumulative labels
    - logging/scope.py: Scope tokens, ``log_scope``, ``scoped`` decorator
    - logging/dispatch.py: Leveled logging with static and runtime gating
    - logging/assertion.py: Context-aware assertions
    - logging/context.py: ``%(scope)s`` record attribute and root setup
    - config/: Environment-driven settings
    - errors/: Exception classes
    - telemetry/: Optional Sentry reporting of assertion failures

Environment Variables:
    - APP_LOG_LEVEL / APP_LOG_FORMAT / APP_LOG_DATEFMT: Root logger setup
    - SCOPED_LOG_STATIC_MAX_LEVEL: Levels above this are bound to no-ops at
      import time (default: trace)
    - SCOPED_LOG_MAX_LEVEL: Initial runtime max level (default: trace)
    - SCOPED_LOG_DEBUG_CHECKS: Raise on scope token misuse (default: on
      unless Python runs with -O)
    - SENTRY_DSN and friends: Enable failure reporting when set
"""

from .errors import ScopeMisuseError, ScopedAssertionError
from .logging import (
    Level,
    LevelFilter,
    ScopeToken,
    ScopedLoggerAdapter,
    configure_logging,
    current_scope,
    debug,
    debug_assert,
    enabled,
    error,
    get_logger,
    info,
    install_log_context,
    log,
    log_scope,
    max_level,
    run_in_scope,
    scope_depth,
    scoped,
    scoped_assert,
    set_debug_checks,
    set_max_level,
    trace,
    uninstall_log_context,
    warn,
    warning,
)
from .telemetry import init_sentry, shutdown_sentry

__version__ = "0.1.0"

__all__ = [
    "Level",
    "LevelFilter",
    "ScopeMisuseError",
    "ScopeToken",
    "ScopedAssertionError",
    "ScopedLoggerAdapter",
    "configure_logging",
    "current_scope",
    "debug",
    "debug_assert",
    "enabled",
    "error",
    "get_logger",
    "info",
    "init_sentry",
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
    "shutdown_sentry",
    "trace",
    "uninstall_log_context",
    "warn",
    "warning",
]
