# topmark:header:start
#
#   project      : LogCast
#   file         : test_observers.py
#   file_relpath : tests/observation/test_observers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the stock observers and the `Observer` protocol.

The broadcaster never reads ``silent``. These tests pin that asymmetry: the stock
`ThresholdObserver` family drops deliveries while silent, whereas an observer that
merely implements the protocol keeps receiving.
"""

from __future__ import annotations

import pytest

from logcast.broadcasting import Broadcaster
from logcast.observation import CallbackObserver, Observer, RecordingObserver, ThresholdObserver
from logcast.severity import LogLevel
from tests.observers_support import BareObserver


def test_threshold_matcher_is_at_or_above() -> None:
    obs: RecordingObserver[str] = RecordingObserver(LogLevel.WARNING)
    assert not obs.matches(LogLevel.DEBUG)
    assert not obs.matches(LogLevel.INFO)
    assert obs.matches(LogLevel.WARNING)
    assert obs.matches(LogLevel.CRITICAL)


def test_stock_and_bare_observers_satisfy_protocol() -> None:
    assert isinstance(RecordingObserver(), Observer)
    assert isinstance(CallbackObserver(lambda _v: None), Observer)
    assert isinstance(BareObserver(), Observer)


def test_recording_observer_captures_everything_in_order() -> None:
    obs: RecordingObserver[str] = RecordingObserver()
    err = ValueError("boom")
    obs.on_next("a")
    obs.on_next("b")
    obs.on_error(err)
    obs.on_completed()

    assert obs.values == ["a", "b"]
    assert obs.errors == [err]
    assert obs.completions == 1
    assert obs.completed

    obs.clear()
    assert obs.values == []
    assert obs.errors == []
    assert not obs.completed


def test_callback_observer_forwards_to_callables() -> None:
    seen: list[object] = []
    obs: CallbackObserver[int] = CallbackObserver(
        seen.append,
        on_error=seen.append,
        on_completed=lambda: seen.append("done"),
        level=LogLevel.INFO,
    )
    err = KeyError("k")
    obs.on_next(1)
    obs.on_error(err)
    obs.on_completed()

    assert obs.level is LogLevel.INFO
    assert seen == [1, err, "done"]


def test_callback_observer_without_optional_callbacks_ignores_them() -> None:
    seen: list[int] = []
    obs: CallbackObserver[int] = CallbackObserver(seen.append)
    obs.on_error(RuntimeError("ignored"))
    obs.on_completed()
    assert seen == []


def test_threshold_observer_requires_handle_next() -> None:
    class Incomplete(ThresholdObserver[str]):
        pass

    class Complete(ThresholdObserver[str]):
        def handle_next(self, value: str) -> None:
            pass

    with pytest.raises(TypeError, match="handle_next"):
        Incomplete()  # type: ignore[abstract]
    assert Complete(LogLevel.WARNING).level is LogLevel.WARNING


def test_stock_observer_drops_deliveries_while_silent() -> None:
    """ThresholdObserver implements silencing inside its own sinks."""
    broadcaster: Broadcaster[str] = Broadcaster()
    obs: RecordingObserver[str] = RecordingObserver()
    broadcaster.subscribe(obs)

    obs.silent = True
    broadcaster.broadcast("hidden", LogLevel.INFO)
    broadcaster.broadcast_error(RuntimeError("hidden"))
    broadcaster.broadcast_completion()
    assert obs.values == []
    assert obs.errors == []
    assert obs.completions == 0

    obs.silent = False
    broadcaster.broadcast("shown", LogLevel.INFO)
    assert obs.values == ["shown"]


def test_engine_does_not_enforce_silence() -> None:
    """A protocol-only observer flagged silent still receives every matching dispatch."""
    broadcaster: Broadcaster[str] = Broadcaster()
    bare = BareObserver()
    bare.silent = True
    broadcaster.subscribe(bare)

    report = broadcaster.broadcast("still delivered", LogLevel.INFO)

    assert bare.values == ["still delivered"]
    assert report.delivered == 1
