# topmark:header:start
#
#   project      : LogCast
#   file         : policy.py
#   file_relpath : src/logcast/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Policy switches for broadcaster behavior the core leaves open.

Each policy is a `KeyedStrEnum`, so the same members are usable from Python and
from TOML configuration (by key, member name or alias).

TOML mapping:

    [tool.logcast]
    clone_policy = "share"        # or "copy"
    completion_policy = "allow"   # or "ignore", "raise"
    failure_policy = "propagate"  # or "continue"
"""

from __future__ import annotations

from logcast.core.enum_mixins import KeyedStrEnum


class ClonePolicy(KeyedStrEnum):
    """How `Broadcaster.clone` treats the observer sequence."""

    SHARE = ("share", "Clone aliases the original observer sequence", ("shared", "alias"))
    COPY = ("copy", "Clone starts from a snapshot of the observer sequence", ("snapshot",))


class CompletionPolicy(KeyedStrEnum):
    """What happens to `broadcast` / `broadcast_error` after completion has fired."""

    ALLOW = ("allow", "Keep dispatching after completion", ("accept",))
    IGNORE = ("ignore", "Silently drop calls after completion", ("drop",))
    RAISE = ("raise", "Reject calls after completion with an error", ("reject", "strict"))


class FailurePolicy(KeyedStrEnum):
    """What happens when an observer sink raises during dispatch."""

    PROPAGATE = ("propagate", "Fail fast: abort dispatch and re-raise", ("fail_fast", "raise"))
    CONTINUE = ("continue", "Log, record in the dispatch report, keep dispatching", ("report",))
