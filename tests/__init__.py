"""Test suite for scoped_log.

Unit tests live under unit/, one folder per area (scope, dispatch,
assertion, infra, telemetry). Module names carry no test_ prefix; see
conftest.py for the collection rule.
"""
