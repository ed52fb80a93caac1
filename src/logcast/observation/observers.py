# topmark:header:start
#
#   project      : LogCast
#   file         : observers.py
#   file_relpath : src/logcast/observation/observers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stock observer implementations.

- `ThresholdObserver`: base class with the conventional "at or above" matcher.
  Its sinks honor ``silent`` by dropping deliveries while it is set.
- `CallbackObserver`: adapts plain callables.
- `RecordingObserver`: captures everything it receives (test capture sink).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from logcast.config.logging import get_logger
from logcast.severity import LogLevel

T = TypeVar("T")

logger = get_logger(__name__)


class ThresholdObserver(ABC, Generic[T]):
    """Observer accepting messages at or above its threshold.

    Subclasses implement `handle_next` and may override `handle_error` and
    `handle_completed`. While ``silent`` is True the public sinks drop every
    delivery without calling the handlers.
    """

    def __init__(self, level: LogLevel = LogLevel.DEBUG, *, silent: bool = False) -> None:
        self._level: LogLevel = level
        self.silent: bool = silent

    @property
    def level(self) -> LogLevel:
        """The threshold severity."""
        return self._level

    def matches(self, level: LogLevel) -> bool:
        """Return True when ``level`` is at or above the threshold."""
        return level >= self._level

    def on_next(self, value: T) -> None:
        if self.silent:
            logger.trace("%r is silent; dropping message", self)
            return
        self.handle_next(value)

    def on_error(self, error: BaseException) -> None:
        if self.silent:
            logger.trace("%r is silent; dropping error %r", self, error)
            return
        self.handle_error(error)

    def on_completed(self) -> None:
        if self.silent:
            logger.trace("%r is silent; dropping completion", self)
            return
        self.handle_completed()

    @abstractmethod
    def handle_next(self, value: T) -> None:
        """Handle one message delivered while not silent."""

    def handle_error(self, error: BaseException) -> None:
        pass

    def handle_completed(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self._level.name}, silent={self.silent})"


class CallbackObserver(ThresholdObserver[T]):
    """Observer that forwards deliveries to callables.

    Args:
        on_next (Callable[[T], None]): Called with each message.
        on_error (Callable[[BaseException], None] | None): Called with each error.
        on_completed (Callable[[], None] | None): Called on completion.
        level (LogLevel): Threshold severity.
        silent (bool): Initial silence flag.
    """

    def __init__(
        self,
        on_next: Callable[[T], None],
        on_error: Callable[[BaseException], None] | None = None,
        on_completed: Callable[[], None] | None = None,
        *,
        level: LogLevel = LogLevel.DEBUG,
        silent: bool = False,
    ) -> None:
        super().__init__(level, silent=silent)
        self._next_cb: Callable[[T], None] = on_next
        self._error_cb: Callable[[BaseException], None] | None = on_error
        self._completed_cb: Callable[[], None] | None = on_completed

    def handle_next(self, value: T) -> None:
        self._next_cb(value)

    def handle_error(self, error: BaseException) -> None:
        if self._error_cb is not None:
            self._error_cb(error)

    def handle_completed(self) -> None:
        if self._completed_cb is not None:
            self._completed_cb()


class RecordingObserver(ThresholdObserver[T]):
    """Observer that records every delivery, in order.

    Attributes:
        values (list[T]): Messages received through ``on_next``.
        errors (list[BaseException]): Errors received through ``on_error``.
        completions (int): Number of completion signals received.
    """

    def __init__(self, level: LogLevel = LogLevel.DEBUG, *, silent: bool = False) -> None:
        super().__init__(level, silent=silent)
        self.values: list[T] = []
        self.errors: list[BaseException] = []
        self.completions: int = 0

    def handle_next(self, value: T) -> None:
        self.values.append(value)

    def handle_error(self, error: BaseException) -> None:
        self.errors.append(error)

    def handle_completed(self) -> None:
        self.completions += 1

    @property
    def completed(self) -> bool:
        """True once at least one completion signal was received."""
        return self.completions > 0

    def clear(self) -> None:
        """Forget everything recorded so far."""
        self.values.clear()
        self.errors.clear()
        self.completions = 0
