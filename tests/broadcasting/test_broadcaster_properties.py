# topmark:header:start
#
#   project      : LogCast
#   file         : test_broadcaster_properties.py
#   file_relpath : tests/broadcasting/test_broadcaster_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property-based tests for subscription bookkeeping and severity matching.

The quick variants run in the default suite; the ``hypothesis_slow`` variants
explore far more examples and run only through ``nox -s property_test``.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings

from logcast.broadcasting import Broadcaster, Subscription
from logcast.config import BroadcasterConfig, ClonePolicy
from logcast.observation import RecordingObserver
from logcast.severity import LogLevel
from tests.observers_support import JournalObserver
from tests.strategies_logcast import levels, messages, subscriptions_and_victim, thresholds


def _check_dispose_bookkeeping(n: int, victim: int) -> None:
    broadcaster: Broadcaster[str] = Broadcaster()
    subs: list[Subscription[str]] = [broadcaster.subscribe(RecordingObserver()) for _ in range(n)]
    assert broadcaster.subscriber_count == n

    subs[victim].dispose()
    assert broadcaster.subscriber_count == n - 1

    subs[victim].dispose()
    assert broadcaster.subscriber_count == n - 1
    assert subs[victim].observer not in broadcaster.observers


def _check_delivery_matches_thresholds(observer_levels: list[LogLevel], level: LogLevel, message: str) -> None:
    journal: list[tuple[str, Any]] = []
    broadcaster: Broadcaster[str] = Broadcaster()
    for i, threshold in enumerate(observer_levels):
        broadcaster.subscribe(JournalObserver(str(i), journal, threshold))

    report = broadcaster.broadcast(message, level)

    expected = [(str(i), message) for i, threshold in enumerate(observer_levels) if level >= threshold]
    assert journal == expected
    assert report.delivered == len(expected)
    assert report.skipped == len(observer_levels) - len(expected)


@given(subscriptions_and_victim())
def test_dispose_removes_exactly_one(case: tuple[int, int]) -> None:
    _check_dispose_bookkeeping(*case)


@given(thresholds, levels, messages)
def test_delivery_iff_level_reaches_threshold(observer_levels: list[LogLevel], level: LogLevel, message: str) -> None:
    _check_delivery_matches_thresholds(observer_levels, level, message)


@given(thresholds, thresholds)
def test_shared_clone_tracks_original(before: list[LogLevel], after: list[LogLevel]) -> None:
    original: Broadcaster[str] = Broadcaster(BroadcasterConfig(clone_policy=ClonePolicy.SHARE))
    for threshold in before:
        original.subscribe(RecordingObserver(threshold))
    clone = original.clone()
    for threshold in after:
        clone.subscribe(RecordingObserver(threshold))

    assert original.observers == clone.observers
    assert original.subscriber_count == len(before) + len(after)


@pytest.mark.hypothesis_slow
@settings(max_examples=2000, deadline=None)
@given(subscriptions_and_victim())
def test_dispose_removes_exactly_one_exhaustive(case: tuple[int, int]) -> None:
    _check_dispose_bookkeeping(*case)


@pytest.mark.hypothesis_slow
@settings(max_examples=2000, deadline=None)
@given(thresholds, levels, messages)
def test_delivery_iff_level_reaches_threshold_exhaustive(
    observer_levels: list[LogLevel], level: LogLevel, message: str
) -> None:
    _check_delivery_matches_thresholds(observer_levels, level, message)
