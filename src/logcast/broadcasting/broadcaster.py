# topmark:header:start
#
#   project      : LogCast
#   file         : broadcaster.py
#   file_relpath : src/logcast/broadcasting/broadcaster.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Broadcaster engine (the core publish/subscribe primitive).

A `Broadcaster` owns an ordered sequence of observer slots and dispatches
messages, errors and completion signals to every observer whose matcher accepts
the relevant severity.

Dispatch model:
  - Synchronous: each sink runs on the calling thread, in subscription order,
    before the ``broadcast*`` call returns. A slow observer stalls the rest.
  - Snapshot: the sequence is snapshotted when a call starts, so observers
    that subscribe from inside a sink are reached from the next call on. An
    observer disposed from inside a sink is skipped for the rest of the call.
  - No internal locking: use
    [`logcast.broadcasting.locking.SynchronizedBroadcaster`][] (or an external
    lock) when several threads share a broadcaster.

Severities:
  - ``broadcast(message, level=None)`` resolves ``level`` once per call, falling
    back to ``config.message_level``.
  - ``broadcast_error`` matches against ``config.error_level``.
  - ``broadcast_completion`` matches against ``config.completion_level``.

Policies (see `logcast.config.policy`):
  - ``FailurePolicy``: fail fast, or log + report and keep going.
  - ``CompletionPolicy``: what to do with ``broadcast``/``broadcast_error`` once
    completion has fired.
  - ``ClonePolicy``: whether ``clone()`` shares or copies the sequence.

Typical usage:

    broadcaster: Broadcaster[str] = Broadcaster()
    sub = broadcaster.subscribe(RecordingObserver(LogLevel.INFO))
    broadcaster.broadcast("hello", LogLevel.WARNING)
    sub.dispose()
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from logcast.broadcasting.hooks import BroadcastHooks
from logcast.broadcasting.report import DispatchReport, ObserverFailure
from logcast.broadcasting.subscription import ObserverSlot, Subscription
from logcast.config.logging import get_logger
from logcast.config.model import BroadcasterConfig
from logcast.config.policy import ClonePolicy, CompletionPolicy, FailurePolicy
from logcast.core.errors import BroadcasterCompletedError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from logcast.config.logging import LogcastLogger
    from logcast.observation.protocols import Observer
    from logcast.severity import LogLevel

T = TypeVar("T")
_B = TypeVar("_B", bound="Broadcaster[Any]")

logger: LogcastLogger = get_logger(__name__)

# Process-wide source of broadcaster identities.
_ident_counter: Iterator[int] = itertools.count(1)


class Broadcaster(Generic[T]):
    """Generic broadcaster of messages of type ``T``.

    Subclasses must keep the ``(config=None, *, hooks=None)`` constructor
    signature: ``clone()`` rebuilds instances through it.

    Args:
        config (BroadcasterConfig | None): Default severities and policies.
        hooks (BroadcastHooks[T] | None): Transform pipeline and callbacks.
    """

    def __init__(
        self,
        config: BroadcasterConfig | None = None,
        *,
        hooks: BroadcastHooks[T] | None = None,
    ) -> None:
        self._config: BroadcasterConfig = config or BroadcasterConfig()
        self._hooks: BroadcastHooks[T] = hooks or BroadcastHooks()
        self._slots: list[ObserverSlot[T]] = []
        self._ident: int = next(_ident_counter)
        self._completed: bool = False

    # ------------------------------ Introspection ------------------------------

    @property
    def ident(self) -> int:
        """Stable numeric identity assigned at construction."""
        return self._ident

    @property
    def config(self) -> BroadcasterConfig:
        return self._config

    @property
    def hooks(self) -> BroadcastHooks[T]:
        return self._hooks

    @property
    def default_level(self) -> LogLevel:
        """Severity used by ``broadcast`` when no level is given."""
        return self._config.message_level

    @property
    def completed(self) -> bool:
        """True once ``broadcast_completion`` has been called on this instance."""
        return self._completed

    @property
    def subscriber_count(self) -> int:
        return len(self._slots)

    @property
    def observers(self) -> tuple[Observer[T], ...]:
        """Snapshot of subscribed observers in dispatch order (duplicates included)."""
        return tuple(slot.observer for slot in self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(ident={self._ident}, "
            f"observers={len(self._slots)}, completed={self._completed})"
        )

    # ------------------------------ Subscription -------------------------------

    def subscribe(
        self,
        observer: Observer[T],
        *,
        teardown: Callable[[], None] | None = None,
    ) -> Subscription[T]:
        """Append an observer to the end of the sequence.

        Subscribing the same observer twice is allowed; it then receives every
        matching dispatch twice, and each handle removes only its own entry.

        Args:
            observer (Observer[T]): The sink to add.
            teardown (Callable[[], None] | None): Observer-owned release to run
                when the returned subscription is disposed.

        Returns:
            Subscription[T]: The idempotent removal handle.
        """
        slot: ObserverSlot[T] = ObserverSlot(observer)
        slot.attach(self._slots)
        logger.trace(
            "Broadcaster (%d): subscribed %r, now %d observers",
            self._ident,
            observer,
            len(self._slots),
        )
        self._hooks.on_subscribe(self)
        return Subscription(slot, teardown)

    # -------------------------------- Dispatch ---------------------------------

    def broadcast(self, message: T, level: LogLevel | None = None) -> DispatchReport:
        """Send a message to every observer that matches its severity.

        Args:
            message (T): The message to send.
            level (LogLevel | None): Message severity; defaults to
                ``config.message_level``.

        Returns:
            DispatchReport: Per-call delivery summary.
        """
        effective: LogLevel = level if level is not None else self._config.message_level
        if not self._may_dispatch("broadcast"):
            return DispatchReport(level=effective, dropped=True)

        working: T = self._hooks.on_message_level(self, message, effective)

        def deliver(observer: Observer[T]) -> None:
            per_observer: T = self._hooks.on_observer_level(self, working, observer.level)
            final: T = self._hooks.on_message_and_observer_level(
                self, per_observer, effective, observer.level
            )
            observer.on_next(final)

        return self._dispatch(effective, deliver)

    def broadcast_error(self, error: BaseException) -> DispatchReport:
        """Send an error to every observer that matches ``config.error_level``.

        The transform pipeline is not applied, and neither is the ``on_error``
        hook; call `prepare_error` first to opt in.

        Args:
            error (BaseException): The error to route.

        Returns:
            DispatchReport: Per-call delivery summary.
        """
        level: LogLevel = self._config.error_level
        if not self._may_dispatch("broadcast an error"):
            return DispatchReport(level=level, dropped=True)
        return self._dispatch(level, lambda observer: observer.on_error(error))

    def broadcast_completion(self) -> DispatchReport:
        """Signal completion to every observer that matches ``config.completion_level``.

        Each matching observer is notified exactly once per call. Repeated calls
        notify again; the completion policy only governs later messages and errors.

        Returns:
            DispatchReport: Per-call delivery summary.
        """
        self._completed = True
        return self._dispatch(self._config.completion_level, lambda observer: observer.on_completed())

    def prepare_error(self, error: BaseException, level: LogLevel | None = None) -> BaseException:
        """Run the ``on_error`` hook on an error.

        Args:
            error (BaseException): The error to transform.
            level (LogLevel | None): Severity passed to the hook; defaults to
                ``config.error_level``.

        Returns:
            BaseException: The transformed error.
        """
        return self._hooks.on_error(self, error, level if level is not None else self._config.error_level)

    # --------------------------------- Cloning ---------------------------------

    def clone(self: _B) -> _B:
        """Create a new broadcaster of the same class, hooks and config.

        The clone gets a fresh identity and is not completed. Its observer
        sequence is the *same list* under ``ClonePolicy.SHARE`` (subscriptions on
        either side are visible on both) or a snapshot under ``ClonePolicy.COPY``.
        With COPY, disposing a handle issued before the clone removes the
        observer from the original and from the clone.

        Returns:
            _B: The new broadcaster.
        """
        clone: _B = type(self)(self._config, hooks=self._hooks)
        if self._config.clone_policy is ClonePolicy.SHARE:
            clone._slots = self._slots
        else:
            clone._slots = []
            for slot in self._slots:
                slot.attach(clone._slots)
        logger.trace(
            "Broadcaster (%d): cloned into (%d) with policy %s",
            self._ident,
            clone._ident,
            self._config.clone_policy.key,
        )
        self._hooks.on_clone(self, clone)
        return clone

    # -------------------------------- Internals --------------------------------

    def _may_dispatch(self, operation: str) -> bool:
        """Apply the completion policy.

        Raises:
            BroadcasterCompletedError: Under ``CompletionPolicy.RAISE`` after completion.
        """
        if not self._completed:
            return True
        policy: CompletionPolicy = self._config.completion_policy
        if policy is CompletionPolicy.ALLOW:
            return True
        if policy is CompletionPolicy.IGNORE:
            logger.debug("Broadcaster (%d): completed; ignoring request to %s", self._ident, operation)
            return False
        raise BroadcasterCompletedError(self._ident, operation)

    def _dispatch(
        self,
        level: LogLevel,
        deliver: Callable[[Observer[T]], None],
    ) -> DispatchReport:
        fail_fast: bool = self._config.failure_policy is FailurePolicy.PROPAGATE
        delivered: int = 0
        skipped: int = 0
        failures: list[ObserverFailure] = []

        for slot in tuple(self._slots):
            if slot.released:
                # disposed by an earlier sink during this call
                continue
            observer: Observer[T] = slot.observer
            if not observer.matches(level):
                skipped += 1
                continue
            if fail_fast:
                deliver(observer)
            else:
                try:
                    deliver(observer)
                except Exception as e:
                    logger.exception(
                        "Broadcaster (%d): observer %r failed at %r: %s",
                        self._ident,
                        observer,
                        level,
                        e,
                    )
                    failures.append(ObserverFailure(observer=observer, error=e))
                    continue
            delivered += 1

        return DispatchReport(
            level=level,
            delivered=delivered,
            skipped=skipped,
            failures=tuple(failures),
        )
