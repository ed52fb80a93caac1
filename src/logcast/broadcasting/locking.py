# topmark:header:start
#
#   project      : LogCast
#   file         : locking.py
#   file_relpath : src/logcast/broadcasting/locking.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""External mutual exclusion for broadcasters shared across threads.

`Broadcaster` has no internal synchronization. `SynchronizedBroadcaster` wraps
one and runs every operation, including subscription disposal, while holding a
re-entrant lock. The lock is re-entrant because hooks and observers may call
back into the same broadcaster from inside a dispatch.

Dispatch stays synchronous: while one thread broadcasts, others block.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from logcast.broadcasting.broadcaster import Broadcaster
    from logcast.broadcasting.report import DispatchReport
    from logcast.broadcasting.subscription import Subscription
    from logcast.observation.protocols import Observer
    from logcast.severity import LogLevel

T = TypeVar("T")


class LockedSubscription(Generic[T]):
    """Subscription whose disposal is serialized with its broadcaster."""

    def __init__(self, inner: Subscription[T], lock: threading.RLock) -> None:
        self._inner: Subscription[T] = inner
        self._lock: threading.RLock = lock

    @property
    def observer(self) -> Observer[T]:
        return self._inner.observer

    @property
    def disposed(self) -> bool:
        return self._inner.disposed

    def dispose(self) -> None:
        with self._lock:
            self._inner.dispose()

    def __enter__(self) -> LockedSubscription[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


class SynchronizedBroadcaster(Generic[T]):
    """Thread-safe facade over a `Broadcaster`.

    Args:
        inner (Broadcaster[T]): The wrapped broadcaster. It must not be used
            directly by other threads once wrapped.
        lock (threading.RLock | None): Lock to use; clones share their parent's.
    """

    def __init__(self, inner: Broadcaster[T], *, lock: threading.RLock | None = None) -> None:
        self._inner: Broadcaster[T] = inner
        self._lock: threading.RLock = lock if lock is not None else threading.RLock()

    @property
    def inner(self) -> Broadcaster[T]:
        return self._inner

    @property
    def ident(self) -> int:
        return self._inner.ident

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return self._inner.subscriber_count

    def broadcast(self, message: T, level: LogLevel | None = None) -> DispatchReport:
        with self._lock:
            return self._inner.broadcast(message, level)

    def broadcast_error(self, error: BaseException) -> DispatchReport:
        with self._lock:
            return self._inner.broadcast_error(error)

    def broadcast_completion(self) -> DispatchReport:
        with self._lock:
            return self._inner.broadcast_completion()

    def subscribe(
        self,
        observer: Observer[T],
        *,
        teardown: Callable[[], None] | None = None,
    ) -> LockedSubscription[T]:
        with self._lock:
            return LockedSubscription(self._inner.subscribe(observer, teardown=teardown), self._lock)

    def clone(self) -> SynchronizedBroadcaster[T]:
        """Clone the inner broadcaster; the clone shares this wrapper's lock."""
        with self._lock:
            return SynchronizedBroadcaster(self._inner.clone(), lock=self._lock)

    def __len__(self) -> int:
        return self.subscriber_count

    def __repr__(self) -> str:
        return f"SynchronizedBroadcaster({self._inner!r})"
