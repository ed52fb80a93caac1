# topmark:header:start
#
#   project      : LogCast
#   file         : errors.py
#   file_relpath : src/logcast/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by LogCast.

Usage:
    Application failures are *not* raised through a broadcaster; they are routed
    to observers as data via ``Broadcaster.broadcast_error``. The exceptions below
    signal misuse of LogCast itself (a policy violation or broken configuration).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class LogcastError(Exception):
    """Base class for all LogCast errors."""


class BroadcasterCompletedError(LogcastError):
    """Raised when a message or error is broadcast after completion.

    Only raised when the broadcaster's completion policy is
    ``CompletionPolicy.RAISE``.
    """

    def __init__(self, ident: int, operation: str) -> None:
        self.ident: int = ident
        self.operation: str = operation
        super().__init__(
            f"Broadcaster ({ident}) has already completed; refusing to {operation}."
        )


class LogcastConfigError(LogcastError):
    """Error for configuration problems (unreadable or malformed TOML)."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path: Path | None = path
        super().__init__(f"{path}: {message}" if path is not None else message)
