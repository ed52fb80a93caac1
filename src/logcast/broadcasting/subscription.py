# topmark:header:start
#
#   project      : LogCast
#   file         : subscription.py
#   file_relpath : src/logcast/broadcasting/subscription.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subscription handles returned by ``Broadcaster.subscribe``.

A broadcaster stores each subscription as its own `ObserverSlot`. Slots compare
by identity, so when the same observer is subscribed twice each handle removes
only the entry it was issued for.

A slot remembers every observer sequence it was attached to: the sequence it was
subscribed on, plus the snapshot of every ``ClonePolicy.COPY`` clone made while
it was live. Releasing it removes it from all of them, so an observer only ever
leaves through its handle and never stays behind in a copy.

A `Subscription` is a scoped resource: ``dispose()`` (or leaving a ``with``
block) releases it at most once. The optional teardown runs first and the slot
is detached afterwards; any later call is a no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from logcast.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from logcast.config.logging import LogcastLogger
    from logcast.observation.protocols import Observer

T = TypeVar("T")

logger: LogcastLogger = get_logger(__name__)


class ObserverSlot(Generic[T]):
    """One entry in one or more broadcaster observer sequences.

    Attributes:
        observer (Observer[T]): The subscribed observer.
        sequences (list[list[ObserverSlot[T]]]): Sequences holding this slot.
        released (bool): True once the slot has been detached everywhere.
    """

    __slots__ = ("observer", "released", "sequences")

    def __init__(self, observer: Observer[T]) -> None:
        self.observer: Observer[T] = observer
        self.sequences: list[list[ObserverSlot[T]]] = []
        self.released: bool = False

    def attach(self, sequence: list[ObserverSlot[T]]) -> None:
        """Append this slot to ``sequence`` and remember it for `detach`."""
        sequence.append(self)
        self.sequences.append(sequence)

    def detach(self) -> int:
        """Remove this slot from every sequence it was attached to.

        Returns:
            int: The number of sequences it was removed from.
        """
        removed: int = 0
        for sequence in self.sequences:
            for i, slot in enumerate(sequence):
                if slot is self:
                    del sequence[i]
                    removed += 1
                    break
        self.sequences = []
        self.released = True
        return removed

    def __repr__(self) -> str:
        return f"ObserverSlot({self.observer!r})"


class Subscription(Generic[T]):
    """Idempotent removal capability for one observer slot.

    Args:
        slot (ObserverSlot[T]): The slot this handle owns.
        teardown (Callable[[], None] | None): Observer-owned release, run just
            before removal.
    """

    def __init__(
        self,
        slot: ObserverSlot[T],
        teardown: Callable[[], None] | None = None,
    ) -> None:
        self._slot: ObserverSlot[T] = slot
        self._teardown: Callable[[], None] | None = teardown
        self._disposed: bool = False

    @property
    def observer(self) -> Observer[T]:
        """The observer this subscription was issued for."""
        return self._slot.observer

    @property
    def disposed(self) -> bool:
        """True once the subscription has been released."""
        return self._disposed

    @property
    def active(self) -> bool:
        """True while the owned slot is still part of some sequence."""
        return not self._disposed and not self._slot.released

    def dispose(self) -> None:
        """Release the subscription.

        If a teardown raises, the slot stays subscribed and the handle stays live,
        so ``dispose()`` may be retried.
        """
        if self._disposed:
            return
        if not self._slot.released:
            if self._teardown is not None:
                self._teardown()
            removed: int = self._slot.detach()
            logger.trace("Unsubscribed %r from %d sequence(s)", self._slot.observer, removed)
        self._disposed = True

    def __enter__(self) -> Subscription[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def __repr__(self) -> str:
        state: str = "disposed" if self._disposed else "active"
        return f"Subscription({self._slot.observer!r}, {state})"
