# topmark:header:start
#
#   project      : LogCast
#   file         : hooks.py
#   file_relpath : src/logcast/broadcasting/hooks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Specialization hooks for a broadcaster flavor.

A flavor is a `Broadcaster` plus a `BroadcastHooks` instance passed at
construction; no subclassing is needed to change formatting.

Transform pipeline (``broadcast`` only)
---------------------------------------
1) ``on_message_level(broadcaster, message, message_level)`` runs once per call.
2) ``on_observer_level(broadcaster, message, observer_level)`` runs per matching
   observer, on the stage-1 output.
3) ``on_message_and_observer_level(broadcaster, message, message_level,
   observer_level)`` runs per matching observer, on the stage-2 output. Its result
   is what ``on_next`` receives.

Other hooks
-----------
- ``on_subscribe(broadcaster)`` runs after an observer has been appended.
- ``on_clone(original, clone)`` runs after ``clone()`` has built the new instance.
- ``on_error(broadcaster, error, level)`` is **not** applied by
  ``broadcast_error``. It is only run through ``Broadcaster.prepare_error`` by
  code that opts in.

Every hook defaults to identity (transforms) or a no-op (callbacks). A stage must
return a value of the same type it received.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

T = TypeVar("T")

if TYPE_CHECKING:
    from collections.abc import Callable

    from logcast.broadcasting.broadcaster import Broadcaster
    from logcast.severity import LogLevel

    MessageTransform = Callable[["Broadcaster[T]", T, "LogLevel"], T]
    PairTransform = Callable[["Broadcaster[T]", T, "LogLevel", "LogLevel"], T]
    ErrorTransform = Callable[["Broadcaster[T]", BaseException, "LogLevel"], BaseException]
    SubscribeCallback = Callable[["Broadcaster[T]"], None]
    CloneCallback = Callable[["Broadcaster[T]", "Broadcaster[T]"], None]


def keep_message(broadcaster: Broadcaster[Any], message: Any, level: LogLevel) -> Any:
    """Identity transform for stages 1 and 2."""
    return message


def keep_message_for_pair(
    broadcaster: Broadcaster[Any],
    message: Any,
    message_level: LogLevel,
    observer_level: LogLevel,
) -> Any:
    """Identity transform for stage 3."""
    return message


def keep_error(broadcaster: Broadcaster[Any], error: BaseException, level: LogLevel) -> BaseException:
    """Identity transform for errors."""
    return error


def ignore_subscription(broadcaster: Broadcaster[Any]) -> None:
    """No-op subscription callback."""


def ignore_clone(original: Broadcaster[Any], clone: Broadcaster[Any]) -> None:
    """No-op clone callback."""


@dataclass(frozen=True)
class BroadcastHooks(Generic[T]):
    """Immutable set of specialization hooks.

    Attributes:
        on_message_level (MessageTransform[T]): Stage 1, keyed by message severity.
        on_observer_level (MessageTransform[T]): Stage 2, keyed by observer threshold.
        on_message_and_observer_level (PairTransform[T]): Stage 3, keyed by both.
        on_subscribe (SubscribeCallback[T]): Runs after each subscription.
        on_error (ErrorTransform[T]): Error transform, applied only via
            ``Broadcaster.prepare_error``.
        on_clone (CloneCallback[T]): Runs after each clone.
    """

    on_message_level: MessageTransform[T] = keep_message
    on_observer_level: MessageTransform[T] = keep_message
    on_message_and_observer_level: PairTransform[T] = keep_message_for_pair
    on_subscribe: SubscribeCallback[T] = ignore_subscription
    on_error: ErrorTransform[T] = keep_error
    on_clone: CloneCallback[T] = ignore_clone

    def with_overrides(self, **overrides: Any) -> BroadcastHooks[T]:
        """Return a copy with the given hooks replaced.

        Args:
            **overrides (Any): Hook names mapped to replacement callables.

        Returns:
            BroadcastHooks[T]: The new hook set.
        """
        return replace(self, **overrides)


DEFAULT_HOOKS: BroadcastHooks[Any] = BroadcastHooks()
