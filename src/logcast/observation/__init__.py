# topmark:header:start
#
#   project      : LogCast
#   file         : __init__.py
#   file_relpath : src/logcast/observation/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Observer contract and stock observers."""

from __future__ import annotations

from logcast.observation.observers import CallbackObserver, RecordingObserver, ThresholdObserver
from logcast.observation.protocols import Observer

__all__ = [
    "CallbackObserver",
    "Observer",
    "RecordingObserver",
    "ThresholdObserver",
]
