# topmark:header:start
#
#   project      : LogCast
#   file         : __init__.py
#   file_relpath : src/logcast/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCast package.

LogCast is a typed publish/subscribe primitive for log-style messages. A
`Broadcaster` fans messages, errors and completion signals out to observers,
filtering by severity and running a three-stage transform pipeline before each
delivery. Sinks are plain objects implementing the `Observer` protocol.
"""

from __future__ import annotations

from logcast.broadcasting import (
    Broadcastable,
    Broadcaster,
    BroadcasterLike,
    BroadcastHooks,
    DispatchReport,
    ObserverFailure,
    StringBroadcaster,
    Subscription,
    SynchronizedBroadcaster,
)
from logcast.config import (
    BroadcasterConfig,
    ClonePolicy,
    CompletionPolicy,
    FailurePolicy,
    MutableBroadcasterConfig,
    load_config,
)
from logcast.core.errors import BroadcasterCompletedError, LogcastConfigError, LogcastError
from logcast.observation import CallbackObserver, Observer, RecordingObserver, ThresholdObserver
from logcast.severity import LogLevel

__all__ = [
    "BroadcastHooks",
    "Broadcastable",
    "Broadcaster",
    "BroadcasterCompletedError",
    "BroadcasterConfig",
    "BroadcasterLike",
    "CallbackObserver",
    "ClonePolicy",
    "CompletionPolicy",
    "DispatchReport",
    "FailurePolicy",
    "LogLevel",
    "LogcastConfigError",
    "LogcastError",
    "MutableBroadcasterConfig",
    "Observer",
    "ObserverFailure",
    "RecordingObserver",
    "StringBroadcaster",
    "Subscription",
    "SynchronizedBroadcaster",
    "ThresholdObserver",
    "load_config",
]
