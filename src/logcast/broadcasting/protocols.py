# topmark:header:start
#
#   project      : LogCast
#   file         : protocols.py
#   file_relpath : src/logcast/broadcasting/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public broadcaster capabilities.

External code depends on these protocols rather than on `Broadcaster` itself:

- `BroadcasterLike`: the operations a producer or a subscriber needs
  (broadcast, subscribe, clone). The observer sequence is not part of it.
- `Broadcastable`: a host type that exposes its broadcaster so others can
  subscribe without depending on the host's other behavior.
- `SubscriptionLike`: what ``subscribe`` hands back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from logcast.broadcasting.report import DispatchReport
    from logcast.observation.protocols import Observer
    from logcast.severity import LogLevel

T = TypeVar("T")


@runtime_checkable
class SubscriptionLike(Protocol):
    """Scoped, idempotent unsubscription handle."""

    @property
    def disposed(self) -> bool: ...

    def dispose(self) -> None: ...

    def __enter__(self) -> SubscriptionLike: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


@runtime_checkable
class BroadcasterLike(Protocol[T]):
    """Capability implemented by every broadcaster."""

    @property
    def ident(self) -> int: ...

    def broadcast(self, message: T, level: LogLevel | None = None) -> DispatchReport: ...

    def broadcast_error(self, error: BaseException) -> DispatchReport: ...

    def broadcast_completion(self) -> DispatchReport: ...

    def subscribe(
        self,
        observer: Observer[T],
        *,
        teardown: Callable[[], None] | None = None,
    ) -> SubscriptionLike: ...

    def clone(self) -> BroadcasterLike[T]: ...


@runtime_checkable
class Broadcastable(Protocol[T]):
    """A producer that exposes its broadcaster."""

    @property
    def broadcaster(self) -> BroadcasterLike[T]:
        """The broadcaster this producer emits through."""
        ...
