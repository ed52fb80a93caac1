# topmark:header:start
#
#   project      : LogCast
#   file         : logging.py
#   file_relpath : src/logcast/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCast internal logging with a TRACE level.

This module extends the standard logging module with a custom TRACE level below
DEBUG, a logger class exposing ``trace()``, and a formatter that colors records
with the same palette as `logcast.severity.LogLevel`.

This is LogCast's *own* diagnostic logging (subscribe/dispose/clone tracing,
policy decisions). It is unrelated to the messages a broadcaster disseminates.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from logcast.constants import LOG_LEVEL_ENV_VAR
from logcast.severity import LogLevel

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class LogcastLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(LogcastLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors records using the `LogLevel` palette."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and colorize it according to its level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        message: str = super().format(record)
        if record.levelno < logging.DEBUG:
            # TRACE and anything below it
            return chalk.blue(message)
        return LogLevel.from_logging_level(record.levelno).color(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors ``LOGCAST_LOG_LEVEL`` (e.g. ``"TRACE"``, ``"DEBUG"``, ``"warn"``, ``"10"``).
    Unknown values yield ``None``.
    """
    val: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    token: str = val.strip().upper()
    if token.isdigit():
        return int(token)
    if token == "TRACE":
        return TRACE_LEVEL
    if token == "NOTSET":
        return logging.NOTSET
    level: LogLevel | None = LogLevel.parse(token)
    return int(level) if level is not None else None


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> LogcastLogger:
    """Retrieve a LogcastLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        LogcastLogger: A LogcastLogger instance.
    """
    return cast("LogcastLogger", logging.getLogger(name))
