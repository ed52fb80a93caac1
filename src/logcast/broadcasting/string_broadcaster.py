# topmark:header:start
#
#   project      : LogCast
#   file         : string_broadcaster.py
#   file_relpath : src/logcast/broadcasting/string_broadcaster.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String-flavored broadcaster.

`StringBroadcaster` is a ``Broadcaster[str]`` wired with `STRING_HOOKS`:

- Observers with a DEBUG threshold receive messages tagged with the
  broadcaster identity and the message severity::

      [OBSERVER-7] [INFO] boot

  Every other observer receives the message unchanged.
- Each subscription is announced at DEBUG with the new observer count.
- Each clone is announced at DEBUG on the original.

Its default config uses ``ClonePolicy.SHARE``: a clone aliases the original's
observer sequence, so subscribing on either side is visible on both.

Announcements are skipped once the broadcaster has completed unless its
completion policy is ``ALLOW``, so subscribing or cloning never trips the
completion policy.
"""

from __future__ import annotations

from logcast.broadcasting.broadcaster import Broadcaster
from logcast.broadcasting.hooks import BroadcastHooks
from logcast.config.model import BroadcasterConfig
from logcast.config.policy import ClonePolicy, CompletionPolicy
from logcast.constants import OBSERVER_TAG_PREFIX
from logcast.severity import LogLevel


def format_debug_tag(ident: int, level: LogLevel | int, message: str) -> str:
    """Return ``message`` tagged with a broadcaster identity and a severity label.

    Ranks outside the `LogLevel` scale are rendered as their number.
    """
    known: LogLevel | None = LogLevel.parse(level)
    label: str = known.label if known is not None else str(int(level))
    return f"[{OBSERVER_TAG_PREFIX}-{ident}] [{label}] {message}"


def tag_for_debug_observers(
    broadcaster: Broadcaster[str],
    message: str,
    message_level: LogLevel,
    observer_level: LogLevel,
) -> str:
    if observer_level == LogLevel.DEBUG:
        return format_debug_tag(broadcaster.ident, message_level, message)
    return message


def _announce(broadcaster: Broadcaster[str], text: str) -> None:
    if broadcaster.completed and broadcaster.config.completion_policy is not CompletionPolicy.ALLOW:
        return
    broadcaster.broadcast(text, LogLevel.DEBUG)


def announce_subscription(broadcaster: Broadcaster[str]) -> None:
    _announce(
        broadcaster,
        f"New subscriber to broadcaster ({broadcaster.ident}), "
        f"now with {broadcaster.subscriber_count} observers.",
    )


def announce_clone(original: Broadcaster[str], clone: Broadcaster[str]) -> None:
    _announce(
        original,
        f"Cloned broadcaster ({original.ident}) with {original.subscriber_count} observers "
        f"into new broadcaster ({clone.ident}) with {clone.subscriber_count} observers.",
    )


STRING_HOOKS: BroadcastHooks[str] = BroadcastHooks(
    on_message_and_observer_level=tag_for_debug_observers,
    on_subscribe=announce_subscription,
    on_clone=announce_clone,
)

STRING_CONFIG: BroadcasterConfig = BroadcasterConfig(clone_policy=ClonePolicy.SHARE)


class StringBroadcaster(Broadcaster[str]):
    """Broadcaster of plain strings with debug tagging and lifecycle announcements."""

    def __init__(
        self,
        config: BroadcasterConfig | None = None,
        *,
        hooks: BroadcastHooks[str] | None = None,
    ) -> None:
        super().__init__(config or STRING_CONFIG, hooks=hooks or STRING_HOOKS)
