"""Unit tests for first-occurrence misuse warnings."""

from __future__ import annotations

import logging
import threading

from scoped_log.logging import ScopeStack, set_debug_checks
from scoped_log.helpers.dedupe import has_warned, reset_warnings, suppressed_count, warn_first


def test_warn_first_returns_true_then_counts_repeats() -> None:
    assert warn_first("empty_pop", "msg") is True
    assert warn_first("empty_pop", "msg") is False
    assert warn_first("empty_pop", "msg") is False
    assert suppressed_count("empty_pop") == 2


def test_keys_are_independent() -> None:
    warn_first("double_close", "msg")
    assert has_warned("double_close") is True
    assert has_warned("cross_thread") is False
    assert suppressed_count("cross_thread") == 0


def test_reset_warnings_clears_state() -> None:
    warn_first("reset_key", "msg")
    warn_first("reset_key", "msg")
    reset_warnings()
    assert has_warned("reset_key") is False
    assert suppressed_count("reset_key") == 0


def test_only_first_occurrence_is_logged(caplog) -> None:
    caplog.set_level(logging.WARNING)
    warn_first("logged", "something odd")
    warn_first("logged", "something odd")
    assert caplog.messages == ["[scoped_log] something odd (further occurrences suppressed)"]


def test_concurrent_first_occurrence_logs_once(caplog) -> None:
    caplog.set_level(logging.WARNING)
    workers = 8
    barrier = threading.Barrier(workers)
    results: list[bool] = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        emitted = warn_first("racy", "raced")
        with results_lock:
            results.append(emitted)

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 1
    assert suppressed_count("racy") == workers - 1
    assert len([m for m in caplog.messages if "raced" in m]) == 1


def test_tolerated_misuse_warns_once_per_kind(caplog) -> None:
    caplog.set_level(logging.WARNING)
    set_debug_checks(False)
    stack = ScopeStack()
    assert stack.pop() is None
    assert stack.pop() is None
    assert suppressed_count("scope_misuse:empty_pop") == 1
    assert len(caplog.messages) == 1
    assert "pop on empty scope stack" in caplog.messages[0]
