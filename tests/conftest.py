"""Pytest collection rules and per-test isolation of scope state."""

from __future__ import annotations

import pytest
from pathlib import Path

from scoped_log.helpers.dedupe import reset_warnings
from scoped_log.logging.levels import LevelFilter, set_max_level
from scoped_log.logging.stack import current_stack, set_debug_checks
from scoped_log.telemetry.sentry import shutdown_sentry


def _is_collectable_test_module(path: Path) -> bool:
    if path.suffix != ".py" or path.name == "__init__.py":
        return False
    return "unit" in path.parts


def pytest_collect_file(file_path: Path, parent):
    """Collect non-prefixed test modules under tests/unit."""
    if not _is_collectable_test_module(file_path):
        return None
    return pytest.Module.from_parent(parent, path=file_path)


@pytest.fixture(autouse=True)
def isolated_scope_state():
    """Start every test with an empty stack, open gates and strict checks."""
    stack = current_stack()
    stack.clear()
    reset_warnings()
    previous_level = set_max_level(LevelFilter.TRACE)
    previous_checks = set_debug_checks(True)
    yield
    shutdown_sentry()
    stack.clear()
    set_max_level(previous_level)
    set_debug_checks(previous_checks)
