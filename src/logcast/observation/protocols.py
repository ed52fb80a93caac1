# topmark:header:start
#
#   project      : LogCast
#   file         : protocols.py
#   file_relpath : src/logcast/observation/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Observer contract (broadcaster-facing).

Any sink (console, file, test capture, network shipper) implements `Observer`
and is handed to ``Broadcaster.subscribe``.

Gating
------
The broadcaster consults ``observer.matches(level)`` before *every* dispatch,
including error and completion dispatch. ``matches`` is the only gate.

``silent`` is part of the contract so host code can read and flip it, but the
broadcaster never looks at it. Silencing must be implemented by the observer
itself (in its sinks or in ``matches``); see
[`logcast.observation.observers.ThresholdObserver`][] for the stock behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from logcast.severity import LogLevel

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Observer(Protocol[T_contra]):
    """Protocol for a message sink with a severity threshold."""

    silent: bool

    @property
    def level(self) -> LogLevel:
        """The observer's threshold severity."""
        ...

    def matches(self, level: LogLevel) -> bool:
        """Return whether a message of severity ``level`` should reach this observer.

        Args:
            level (LogLevel): The candidate severity.

        Returns:
            bool: True to receive the dispatch.
        """
        ...

    def on_next(self, value: T_contra) -> None:
        """Receive one (already transformed) message."""
        ...

    def on_error(self, error: BaseException) -> None:
        """Receive an error routed through ``broadcast_error``."""
        ...

    def on_completed(self) -> None:
        """Receive the completion signal.

        Well-behaved observers should not expect further messages afterwards, but
        the broadcaster does not enforce this unless configured to.
        """
        ...
