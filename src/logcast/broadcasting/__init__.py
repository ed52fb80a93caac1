# topmark:header:start
#
#   project      : LogCast
#   file         : __init__.py
#   file_relpath : src/logcast/broadcasting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Broadcaster engine, string flavor, capabilities and thread-safe wrapper."""

from __future__ import annotations

from logcast.broadcasting.broadcaster import Broadcaster
from logcast.broadcasting.hooks import DEFAULT_HOOKS, BroadcastHooks
from logcast.broadcasting.locking import LockedSubscription, SynchronizedBroadcaster
from logcast.broadcasting.protocols import Broadcastable, BroadcasterLike, SubscriptionLike
from logcast.broadcasting.report import DispatchReport, ObserverFailure
from logcast.broadcasting.string_broadcaster import (
    STRING_CONFIG,
    STRING_HOOKS,
    StringBroadcaster,
    format_debug_tag,
)
from logcast.broadcasting.subscription import ObserverSlot, Subscription

__all__ = [
    "DEFAULT_HOOKS",
    "STRING_CONFIG",
    "STRING_HOOKS",
    "BroadcastHooks",
    "Broadcastable",
    "Broadcaster",
    "BroadcasterLike",
    "DispatchReport",
    "LockedSubscription",
    "ObserverFailure",
    "ObserverSlot",
    "StringBroadcaster",
    "Subscription",
    "SubscriptionLike",
    "SynchronizedBroadcaster",
    "format_debug_tag",
]
