# topmark:header:start
#
#   project      : LogCast
#   file         : severity.py
#   file_relpath : src/logcast/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity scale shared by messages and observer thresholds.

`LogLevel` is a closed, totally ordered set of ranks. Comparison is ordinal
(``LogLevel.INFO < LogLevel.ERROR``), never by identity, so a message severity
can be checked directly against an observer threshold.

The numeric values mirror the standard library `logging` levels, which keeps the
bridge between both worlds trivial (see `LogLevel.from_logging_level`).
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

_ALIASES: Final[dict[str, str]] = {
    "WARN": "WARNING",
    "FATAL": "CRITICAL",
}


class LogLevel(IntEnum):
    """Ordered severity ranks: DEBUG < INFO < WARNING < ERROR < CRITICAL."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def label(self) -> str:
        """Upper-case display name (e.g. ``"INFO"``)."""
        return self.name

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this level.
        """
        return cast(
            "Callable[[str], str]",
            {
                LogLevel.DEBUG: chalk.gray,
                LogLevel.INFO: chalk.green,
                LogLevel.WARNING: chalk.yellow,
                LogLevel.ERROR: chalk.red,
                LogLevel.CRITICAL: chalk.red_bright,
            }[self],
        )

    @classmethod
    def parse(cls, raw: LogLevel | int | str | None) -> LogLevel | None:
        """Parse a level from a member, an integer rank or a (case-insensitive) name.

        ``"WARN"`` and ``"FATAL"`` are accepted as aliases. Digit strings are treated
        as integer ranks.

        Args:
            raw (LogLevel | int | str | None): The value to parse.

        Returns:
            LogLevel | None: The matching level, or ``None`` if ``raw`` is ``None``
            or does not name a level.
        """
        if raw is None:
            return None
        if isinstance(raw, LogLevel):
            return raw
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            try:
                return cls(raw)
            except ValueError:
                return None
        if not isinstance(raw, str):
            return None
        token: str = raw.strip().upper()
        if token.isdigit():
            return cls.parse(int(token))
        token = _ALIASES.get(token, token)
        return cls.__members__.get(token)

    @classmethod
    def from_logging_level(cls, levelno: int) -> LogLevel:
        """Map a standard library logging level to the closest rank at or below it.

        Levels below ``DEBUG`` (e.g. TRACE) clamp to `LogLevel.DEBUG`.

        Args:
            levelno (int): A `logging` level number.

        Returns:
            LogLevel: The matching severity.
        """
        result: LogLevel = cls.DEBUG
        for member in cls:
            if member.value <= levelno:
                result = member
        return result
