"""Unit tests for context-aware assertions."""

from __future__ import annotations

import pytest

from scoped_log import ScopedAssertionError, debug_assert, log_scope, scoped_assert
from scoped_log.logging import assertion
from scoped_log.logging.assertion import UNKNOWN_CONDITION


def test_failed_assert_without_scope_carries_condition_text() -> None:
    with pytest.raises(ScopedAssertionError) as exc_info:
        scoped_assert(False)
    err = exc_info.value
    assert str(err) == "False"
    assert err.scope is None
    assert err.detail == "False"


def test_failed_assert_is_prefixed_with_scope() -> None:
    with log_scope("outer-scope"):
        with pytest.raises(ScopedAssertionError) as exc_info:
            scoped_assert(False)
    assert str(exc_info.value) == "outer-scope: False"
    assert exc_info.value.scope == "outer-scope"


def test_condition_text_is_taken_from_source() -> None:
    items = [1, 2]
    with log_scope("A"), log_scope("B"):
        with pytest.raises(ScopedAssertionError) as exc_info:
            scoped_assert(len(items) > 3)
    assert str(exc_info.value) == "A: B: len(items) > 3"


def test_condition_text_spanning_lines() -> None:
    items: list[int] = []
    with pytest.raises(ScopedAssertionError) as exc_info:
        scoped_assert(
            len(items) == 1,
        )
    assert exc_info.value.detail == "len(items) == 1"


def test_condition_passed_by_keyword() -> None:
    ready = False
    with pytest.raises(ScopedAssertionError) as exc_info:
        scoped_assert(condition=ready)
    assert exc_info.value.detail == "ready"


def test_custom_message_replaces_condition_text() -> None:
    with log_scope("outer-scope"):
        with pytest.raises(ScopedAssertionError) as exc_info:
            scoped_assert(False, "I failed!")
    assert str(exc_info.value) == "outer-scope: I failed!"


def test_custom_message_template() -> None:
    with pytest.raises(ScopedAssertionError) as exc_info:
        scoped_assert(0, "expected {} rows, got {count}", 3, count=0)
    assert str(exc_info.value) == "expected 3 rows, got 0"


def test_failure_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError):
        scoped_assert([])


def test_passing_assert_does_not_touch_stack(monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise RuntimeError("stack read")

    monkeypatch.setattr(assertion, "current_stack", fail)
    scoped_assert(True)
    scoped_assert([1], "{}", object())
    debug_assert(1 == 1)


def test_debug_assert_fails_like_scoped_assert() -> None:
    with log_scope("dbg"):
        with pytest.raises(ScopedAssertionError) as exc_info:
            debug_assert(1 > 2)
    assert str(exc_info.value) == "dbg: 1 > 2"


def test_condition_text_falls_back_without_source(monkeypatch) -> None:
    monkeypatch.setattr(assertion, "_call_source", lambda frame: None)
    with pytest.raises(ScopedAssertionError) as exc_info:
        scoped_assert(False)
    assert exc_info.value.detail == UNKNOWN_CONDITION


def test_condition_from_dynamic_code_falls_back() -> None:
    namespace = {"scoped_assert": scoped_assert}
    code = compile("scoped_assert(1 == 2)", "<dynamic>", "exec")
    with pytest.raises(ScopedAssertionError) as exc_info:
        exec(code, namespace)
    assert exc_info.value.detail == UNKNOWN_CONDITION
