# topmark:header:start
#
#   project      : LogCast
#   file         : report.py
#   file_relpath : src/logcast/broadcasting/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call dispatch summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logcast.observation.protocols import Observer
    from logcast.severity import LogLevel


@dataclass(frozen=True)
class ObserverFailure:
    """An exception raised by an observer sink (or a per-observer transform).

    Only collected under ``FailurePolicy.CONTINUE``.
    """

    observer: Observer[Any]
    error: Exception


@dataclass(frozen=True)
class DispatchReport:
    """Outcome of one ``broadcast*`` call.

    Attributes:
        level (LogLevel): The severity observers were matched against.
        delivered (int): Observers whose sink completed normally.
        skipped (int): Observers whose matcher rejected the severity.
        failures (tuple[ObserverFailure, ...]): Sinks that raised (CONTINUE policy).
        dropped (bool): True when the call was dropped by ``CompletionPolicy.IGNORE``.
    """

    level: LogLevel
    delivered: int = 0
    skipped: int = 0
    failures: tuple[ObserverFailure, ...] = field(default_factory=tuple)
    dropped: bool = False

    @property
    def ok(self) -> bool:
        """True when no observer failed."""
        return not self.failures
