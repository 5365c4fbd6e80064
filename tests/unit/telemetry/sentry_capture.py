"""Unit tests for Sentry reporting of assertion failures and breadcrumbs."""

from __future__ import annotations

import pytest

from scoped_log import ScopedAssertionError, init_sentry, log_scope, scoped_assert, set_debug_checks
from scoped_log.logging import ScopeStack
from scoped_log.telemetry import add_breadcrumb, sentry

sentry_sdk = pytest.importorskip("sentry_sdk")

_FAKE_DSN = "https://public@o0.ingest.sentry.io/0"


@pytest.fixture
def captured():
    events: list[dict] = []

    def before_send(event, hint):
        events.append(event)
        return None

    assert init_sentry(dsn=_FAKE_DSN, before_send=before_send, default_integrations=False)
    return events


@pytest.fixture
def crumbs():
    recorded: list[dict] = []

    def before_breadcrumb(crumb, hint):
        recorded.append(crumb)
        return crumb

    assert init_sentry(dsn=_FAKE_DSN, before_breadcrumb=before_breadcrumb, default_integrations=False)
    return recorded


def test_capture_is_noop_until_initialized() -> None:
    assert not sentry.sentry_enabled()
    assert sentry.capture_error(RuntimeError("x")) is False


def test_init_without_dsn_stays_disabled(monkeypatch) -> None:
    monkeypatch.setattr(sentry, "SENTRY_DSN", "")
    assert init_sentry() is False
    assert not sentry.sentry_enabled()


def test_assertion_failure_is_reported_with_scope_tag(captured) -> None:
    with log_scope("outer-scope"):
        with pytest.raises(ScopedAssertionError):
            scoped_assert(False)
    assert len(captured) == 1
    event = captured[0]
    assert event["tags"]["log.scope"] == "outer-scope"
    assert event["exception"]["values"][-1]["type"] == "ScopedAssertionError"


def test_reports_are_rate_limited_per_class(captured) -> None:
    assert sentry.capture_error(ValueError("first")) is True
    assert sentry.capture_error(ValueError("second")) is False
    assert sentry.capture_error(KeyError("other")) is True
    assert len(captured) == 2


def test_breadcrumb_is_noop_until_initialized(monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(sentry_sdk, "add_breadcrumb", lambda **kw: calls.append(kw))
    add_breadcrumb("ignored")
    assert calls == []


def test_breadcrumb_carries_current_scope(crumbs) -> None:
    add_breadcrumb("outside")
    with log_scope("outer"), log_scope("inner"):
        add_breadcrumb("inside", level="debug", data={"rows": 3})
        add_breadcrumb("explicit", data={"scope": "mine"})
    outside, inside, explicit = crumbs[-3:]
    assert outside["category"] == "scoped_log"
    assert "scope" not in outside.get("data", {})
    assert inside["level"] == "debug"
    assert inside["data"] == {"rows": 3, "scope": "outer: inner"}
    assert explicit["data"]["scope"] == "mine"


def test_tolerated_misuse_leaves_breadcrumb(crumbs) -> None:
    set_debug_checks(False)
    ScopeStack().pop()
    misuse = [c for c in crumbs if c.get("data", {}).get("kind") == "empty_pop"]
    assert len(misuse) == 1
    assert misuse[0]["level"] == "warning"
    assert misuse[0]["message"] == "pop on empty scope stack"


def test_breadcrumbs_ride_along_with_reported_failure() -> None:
    events: list[dict] = []

    def before_send(event, hint):
        events.append(event)
        return None

    assert init_sentry(dsn=_FAKE_DSN, before_send=before_send, default_integrations=False)
    with log_scope("job"):
        add_breadcrumb("loaded input")
        with pytest.raises(ScopedAssertionError):
            scoped_assert(False, "bad input")
    assert len(events) == 1
    values = events[0]["breadcrumbs"]["values"]
    assert any(c.get("message") == "loaded input" and c["data"]["scope"] == "job" for c in values)
