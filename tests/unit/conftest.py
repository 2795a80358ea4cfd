"""Shared fixtures for unit tests."""

from __future__ import annotations

import os
from datetime import UTC, datetime

import pytest

from laakhay.logchunk.core import ENV_PREFIX, Level
from laakhay.logchunk.models import ErrorProxy, ErrorSnapshot, LogEvent, StackFrame


def _make_frames(count: int, prefix: str = "app/module") -> tuple[StackFrame, ...]:
    return tuple(
        StackFrame(filename=f"{prefix}_{i}.py", lineno=i + 1, function=f"handler_{i}")
        for i in range(count)
    )


def _make_event(message: str = "hello", **overrides) -> LogEvent:
    values = {
        "level": Level.ERROR,
        "logger_name": "app.orders",
        "message": message,
        "timestamp": datetime(2024, 1, 1, 12, 30, tzinfo=UTC),
        "thread_name": "worker-1",
        "markers": ("AUDIT", "ORDERS"),
        "caller_data": (StackFrame(filename="app/orders.py", lineno=42, function="submit"),),
        "mdc": {"request_id": "abc-123"},
    }
    values.update(overrides)
    return LogEvent(**values)


def _raise_nested(depth: int) -> None:
    if depth == 0:
        raise ValueError("deep failure")
    _raise_nested(depth - 1)


@pytest.fixture(autouse=True)
def clean_logchunk_env(monkeypatch):
    """Keep ambient LOGCHUNK_* variables out of settings built by tests."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture
def make_frames():
    """Factory building ``count`` distinct frames."""
    return _make_frames


@pytest.fixture
def make_event():
    """Factory building a fully populated event."""
    return _make_event


@pytest.fixture
def hundred_char_message() -> str:
    message = (
        "This is exactly one hundred characters long message"
        " that should be split into multiple log entries.."
    )
    assert len(message) == 100
    return message


@pytest.fixture
def frames() -> tuple[StackFrame, ...]:
    return _make_frames(10)


@pytest.fixture
def proxy(frames) -> ErrorProxy:
    exc = RuntimeError("Long stack trace")
    return ErrorProxy(
        class_name="RuntimeError",
        message="Long stack trace",
        frames=frames,
        exception=exc,
    )


@pytest.fixture
def snapshot(frames) -> ErrorSnapshot:
    return ErrorSnapshot(class_name="RuntimeError", message="remote", frames=frames)


@pytest.fixture
def live_proxy() -> ErrorProxy:
    """Proxy over an exception raised through nested calls."""
    try:
        _raise_nested(15)
    except ValueError as exc:
        return ErrorProxy.from_exception(exc)
    pytest.fail("_raise_nested did not raise")
