# topmark:header:start
#
#   project      : LogCast
#   file         : enum_mixins.py
#   file_relpath : src/logcast/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums for policy switches.

``KeyedStrEnum`` members carry a stable machine key (``.value``, used in TOML
config), a human label and optional aliases. ``parse()`` normalizes user input
so ``"continue"``, ``"Continue"`` and ``"keep-going"`` (when declared as an
alias) all resolve to the same member.

Example:
    ```python
    class Mode(KeyedStrEnum):
        FAST = ("fast", "Skip validation", ("quick",))
        SAFE = ("safe", "Validate everything")

    assert Mode.parse("Quick") is Mode.FAST
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def norm_token(s: str) -> str:
    """Normalize an identifier-like string for case- and separator-insensitive matching."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a member from its key, label and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label.
            aliases (Iterable[str]): Extra tokens accepted by `parse()`.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Resolve a token against keys, member names and aliases.

        Returns:
            _KS | None: The matching member, or ``None`` when ``raw`` is ``None``
            or nothing matches.
        """
        if raw is None:
            return None
        token: str = norm_token(raw)
        for m in cls:
            if token in (norm_token(m.value), norm_token(m.name)):
                return m
            if any(token == norm_token(a) for a in m.aliases):
                return m
        return None
