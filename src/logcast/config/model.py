# topmark:header:start
#
#   project      : LogCast
#   file         : model.py
#   file_relpath : src/logcast/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Broadcaster configuration model.

This module defines:
    - `BroadcasterConfig`: an immutable snapshot handed to a broadcaster at
      construction (severities for untagged messages, errors and completion, and
      the clone / completion / failure policies).
    - `MutableBroadcasterConfig`: a tri-state builder (``None`` = inherit) used to
      merge configuration layers before freezing.

Scope:
    - *In scope*: data shapes, defaults, merge precedence and freeze/thaw.
    - *Out of scope*: TOML I/O, which lives in `logcast.config.io`.

TOML mapping:

    [tool.logcast]
    message_level = "info"
    completion_level = "info"
    error_level = "error"
    clone_policy = "copy"
    completion_policy = "allow"
    failure_policy = "propagate"
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, TypeVar

from logcast.config.logging import get_logger
from logcast.config.policy import ClonePolicy, CompletionPolicy, FailurePolicy
from logcast.core.enum_mixins import KeyedStrEnum
from logcast.severity import LogLevel

if TYPE_CHECKING:
    from collections.abc import Mapping

    from logcast.config.logging import LogcastLogger

logger: LogcastLogger = get_logger(__name__)

_KS = TypeVar("_KS", bound=KeyedStrEnum)

LEVEL_KEYS: tuple[str, ...] = ("message_level", "completion_level", "error_level")


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class BroadcasterConfig:
    """Immutable runtime configuration for a broadcaster.

    Attributes:
        message_level (LogLevel): Severity used by ``broadcast`` when no level is given.
        completion_level (LogLevel): Severity observers must match to receive completion.
        error_level (LogLevel): Severity observers must match to receive errors.
        clone_policy (ClonePolicy): Whether clones share or copy the observer sequence.
        completion_policy (CompletionPolicy): Handling of broadcasts after completion.
        failure_policy (FailurePolicy): Handling of exceptions raised by observer sinks.
    """

    message_level: LogLevel = LogLevel.INFO
    completion_level: LogLevel = LogLevel.INFO
    error_level: LogLevel = LogLevel.ERROR
    clone_policy: ClonePolicy = ClonePolicy.COPY
    completion_policy: CompletionPolicy = CompletionPolicy.ALLOW
    failure_policy: FailurePolicy = FailurePolicy.PROPAGATE

    def thaw(self) -> MutableBroadcasterConfig:
        """Return a mutable builder with every field set from this snapshot.

        Returns:
            MutableBroadcasterConfig: A builder initialized from this config.
        """
        return MutableBroadcasterConfig(
            message_level=self.message_level,
            completion_level=self.completion_level,
            error_level=self.error_level,
            clone_policy=self.clone_policy,
            completion_policy=self.completion_policy,
            failure_policy=self.failure_policy,
        )

    def to_dict(self) -> dict[str, str]:
        """Return a TOML-friendly mapping (level names and policy keys)."""
        return {
            "message_level": self.message_level.name.lower(),
            "completion_level": self.completion_level.name.lower(),
            "error_level": self.error_level.name.lower(),
            "clone_policy": self.clone_policy.key,
            "completion_policy": self.completion_policy.key,
            "failure_policy": self.failure_policy.key,
        }


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableBroadcasterConfig:
    """Tri-state builder for `BroadcasterConfig`.

    Every field is optional; ``None`` means "inherit from the base" when frozen.
    Later layers win in `merge_with`.
    """

    message_level: LogLevel | None = None
    completion_level: LogLevel | None = None
    error_level: LogLevel | None = None
    clone_policy: ClonePolicy | None = None
    completion_policy: CompletionPolicy | None = None
    failure_policy: FailurePolicy | None = None

    def merge_with(self, other: MutableBroadcasterConfig) -> MutableBroadcasterConfig:
        """Return a new builder where fields set on ``other`` override this one.

        Args:
            other (MutableBroadcasterConfig): The higher-precedence layer.

        Returns:
            MutableBroadcasterConfig: The merged builder (inputs are not modified).
        """
        merged = MutableBroadcasterConfig()
        for f in fields(self):
            theirs: Any = getattr(other, f.name)
            setattr(merged, f.name, theirs if theirs is not None else getattr(self, f.name))
        return merged

    def freeze(self, base: BroadcasterConfig | None = None) -> BroadcasterConfig:
        """Resolve unset fields against ``base`` and return an immutable config.

        Args:
            base (BroadcasterConfig | None): Fallback values; defaults to
                ``BroadcasterConfig()``.

        Returns:
            BroadcasterConfig: The resolved snapshot.
        """
        resolved: BroadcasterConfig = base or BroadcasterConfig()
        return BroadcasterConfig(
            message_level=self.message_level or resolved.message_level,
            completion_level=self.completion_level or resolved.completion_level,
            error_level=self.error_level or resolved.error_level,
            clone_policy=self.clone_policy or resolved.clone_policy,
            completion_policy=self.completion_policy or resolved.completion_policy,
            failure_policy=self.failure_policy or resolved.failure_policy,
        )

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> MutableBroadcasterConfig:
        """Build a builder from a parsed TOML table (or any plain mapping).

        Unknown keys and unparsable values are logged as warnings and left unset,
        so a typo never changes defaulting behavior.

        Args:
            table (Mapping[str, Any]): Key/value pairs, typically ``[tool.logcast]``.

        Returns:
            MutableBroadcasterConfig: The partially populated builder.
        """
        draft = cls()
        known: set[str] = {f.name for f in fields(cls)}
        for key in table:
            if key not in known:
                logger.warning("Ignoring unknown broadcaster config key: %r", key)

        for key in LEVEL_KEYS:
            if key not in table:
                continue
            level: LogLevel | None = LogLevel.parse(table[key])
            if level is None:
                logger.warning("Invalid severity for %s: %r (ignored)", key, table[key])
                continue
            setattr(draft, key, level)

        draft.clone_policy = _policy_or_none(table, "clone_policy", ClonePolicy)
        draft.completion_policy = _policy_or_none(table, "completion_policy", CompletionPolicy)
        draft.failure_policy = _policy_or_none(table, "failure_policy", FailurePolicy)

        logger.debug("Broadcaster config draft from mapping: %s", draft)
        return draft


def _policy_or_none(table: Mapping[str, Any], key: str, enum_cls: type[_KS]) -> _KS | None:
    """Parse an optional policy value, warning on anything unrecognized."""
    raw: Any = table.get(key)
    if raw is None:
        return None
    value: _KS | None = enum_cls.parse(raw) if isinstance(raw, str) else None
    if value is None:
        logger.warning("Invalid value for %s: %r (ignored)", key, raw)
    return value
