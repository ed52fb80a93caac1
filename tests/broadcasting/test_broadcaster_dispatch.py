# topmark:header:start
#
#   project      : LogCast
#   file         : test_broadcaster_dispatch.py
#   file_relpath : tests/broadcasting/test_broadcaster_dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dispatch semantics of the generic `Broadcaster`.

Covers severity filtering for messages, errors and completion, dispatch order,
duplicate subscriptions and the per-call `DispatchReport`.
"""

from __future__ import annotations

from typing import Any

from logcast.broadcasting import Broadcaster, BroadcasterLike
from logcast.config import BroadcasterConfig
from logcast.observation import RecordingObserver
from logcast.severity import LogLevel
from tests.observers_support import JournalObserver


def test_message_reaches_only_matching_observers() -> None:
    """X(Info) and Y(Error): an INFO message reaches X only."""
    broadcaster: Broadcaster[str] = Broadcaster()
    x: RecordingObserver[str] = RecordingObserver(LogLevel.INFO)
    y: RecordingObserver[str] = RecordingObserver(LogLevel.ERROR)
    broadcaster.subscribe(x)
    broadcaster.subscribe(y)

    report = broadcaster.broadcast("hello", LogLevel.INFO)

    assert x.values == ["hello"]
    assert y.values == []
    assert report.level is LogLevel.INFO
    assert report.delivered == 1
    assert report.skipped == 1
    assert report.ok


def test_untagged_message_uses_configured_default_level() -> None:
    broadcaster: Broadcaster[str] = Broadcaster(BroadcasterConfig(message_level=LogLevel.WARNING))
    warn: RecordingObserver[str] = RecordingObserver(LogLevel.WARNING)
    err: RecordingObserver[str] = RecordingObserver(LogLevel.ERROR)
    broadcaster.subscribe(warn)
    broadcaster.subscribe(err)

    report = broadcaster.broadcast("implicit")

    assert broadcaster.default_level is LogLevel.WARNING
    assert report.level is LogLevel.WARNING
    assert warn.values == ["implicit"]
    assert err.values == []


def test_default_message_level_is_info() -> None:
    broadcaster: Broadcaster[str] = Broadcaster()
    info: RecordingObserver[str] = RecordingObserver(LogLevel.INFO)
    warn: RecordingObserver[str] = RecordingObserver(LogLevel.WARNING)
    broadcaster.subscribe(info)
    broadcaster.subscribe(warn)

    broadcaster.broadcast("plain")

    assert info.values == ["plain"]
    assert warn.values == []


def test_dispatch_order_follows_subscription_order() -> None:
    journal: list[tuple[str, Any]] = []
    broadcaster: Broadcaster[str] = Broadcaster()
    for name in ("a", "b", "c"):
        broadcaster.subscribe(JournalObserver(name, journal))

    broadcaster.broadcast("m1")
    broadcaster.broadcast("m2")

    assert journal == [("a", "m1"), ("b", "m1"), ("c", "m1"), ("a", "m2"), ("b", "m2"), ("c", "m2")]


def test_custom_matcher_is_the_only_gate() -> None:
    """The engine consults ``matches`` and nothing else (not the threshold)."""

    class OnlyWarnings(RecordingObserver[str]):
        def matches(self, level: LogLevel) -> bool:
            return level == LogLevel.WARNING

    broadcaster: Broadcaster[str] = Broadcaster()
    obs = OnlyWarnings(LogLevel.DEBUG)
    broadcaster.subscribe(obs)

    broadcaster.broadcast("info", LogLevel.INFO)
    broadcaster.broadcast("warning", LogLevel.WARNING)
    broadcaster.broadcast("error", LogLevel.ERROR)

    assert obs.values == ["warning"]


def test_duplicate_subscription_delivers_twice() -> None:
    broadcaster: Broadcaster[str] = Broadcaster()
    obs: RecordingObserver[str] = RecordingObserver()
    broadcaster.subscribe(obs)
    broadcaster.subscribe(obs)

    report = broadcaster.broadcast("twice")

    assert broadcaster.subscriber_count == 2
    assert obs.values == ["twice", "twice"]
    assert report.delivered == 2


def test_errors_go_to_observers_matching_error_level() -> None:
    broadcaster: Broadcaster[str] = Broadcaster()
    debug: RecordingObserver[str] = RecordingObserver(LogLevel.DEBUG)
    error: RecordingObserver[str] = RecordingObserver(LogLevel.ERROR)
    critical: RecordingObserver[str] = RecordingObserver(LogLevel.CRITICAL)
    for obs in (debug, error, critical):
        broadcaster.subscribe(obs)
    boom = RuntimeError("boom")

    report = broadcaster.broadcast_error(boom)

    assert debug.errors == [boom]
    assert error.errors == [boom]
    assert critical.errors == []
    assert report.level is LogLevel.ERROR
    assert (report.delivered, report.skipped) == (2, 1)
    # errors never show up as messages
    assert debug.values == []


def test_error_level_is_configurable() -> None:
    broadcaster: Broadcaster[str] = Broadcaster(BroadcasterConfig(error_level=LogLevel.CRITICAL))
    critical: RecordingObserver[str] = RecordingObserver(LogLevel.CRITICAL)
    broadcaster.subscribe(critical)

    broadcaster.broadcast_error(ValueError("bad"))

    assert len(critical.errors) == 1


def test_completion_once_per_matching_observer_per_call() -> None:
    broadcaster: Broadcaster[str] = Broadcaster()
    info: RecordingObserver[str] = RecordingObserver(LogLevel.INFO)
    error: RecordingObserver[str] = RecordingObserver(LogLevel.ERROR)
    broadcaster.subscribe(info)
    broadcaster.subscribe(error)
    for i in range(5):
        broadcaster.broadcast(f"m{i}", LogLevel.CRITICAL)

    report = broadcaster.broadcast_completion()

    assert info.completions == 1
    # completion is dispatched at INFO by default; an ERROR threshold rejects it
    assert error.completions == 0
    assert report.delivered == 1
    assert broadcaster.completed

    broadcaster.broadcast_completion()
    assert info.completions == 2


def test_completion_level_is_configurable() -> None:
    broadcaster: Broadcaster[str] = Broadcaster(BroadcasterConfig(completion_level=LogLevel.CRITICAL))
    error: RecordingObserver[str] = RecordingObserver(LogLevel.ERROR)
    broadcaster.subscribe(error)

    broadcaster.broadcast_completion()

    assert error.completions == 1


def test_out_of_range_severity_is_compared_not_rejected() -> None:
    """No validation: an int rank that is not a member still compares ordinally."""
    broadcaster: Broadcaster[str] = Broadcaster()
    obs: RecordingObserver[str] = RecordingObserver(LogLevel.CRITICAL)
    broadcaster.subscribe(obs)

    broadcaster.broadcast("beyond critical", 99)  # type: ignore[arg-type]

    assert obs.values == ["beyond critical"]


def test_broadcasting_without_observers_is_a_no_op() -> None:
    broadcaster: Broadcaster[str] = Broadcaster()
    report = broadcaster.broadcast("nobody listens")
    assert (report.delivered, report.skipped, report.failures) == (0, 0, ())


def test_observers_snapshot_and_introspection() -> None:
    broadcaster: Broadcaster[str] = Broadcaster()
    a: RecordingObserver[str] = RecordingObserver()
    b: RecordingObserver[str] = RecordingObserver()
    broadcaster.subscribe(a)
    broadcaster.subscribe(b)

    snapshot = broadcaster.observers
    assert snapshot == (a, b)
    assert len(broadcaster) == 2
    assert "observers=2" in repr(broadcaster)
    assert isinstance(broadcaster, BroadcasterLike)


def test_identities_are_distinct_and_stable() -> None:
    first: Broadcaster[str] = Broadcaster()
    second: Broadcaster[str] = Broadcaster()
    assert first.ident != second.ident
    assert first.ident == first.ident
    assert first.ident > 0


def test_subscription_during_dispatch_applies_to_next_call() -> None:
    """The sequence is snapshotted when a call starts."""
    broadcaster: Broadcaster[str] = Broadcaster()
    late: RecordingObserver[str] = RecordingObserver()

    class Recruiter(RecordingObserver[str]):
        def handle_next(self, value: str) -> None:
            super().handle_next(value)
            if len(self.values) == 1:
                broadcaster.subscribe(late)

    broadcaster.subscribe(Recruiter())
    broadcaster.broadcast("first")
    broadcaster.broadcast("second")

    assert late.values == ["second"]
