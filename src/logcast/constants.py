# topmark:header:start
#
#   project      : LogCast
#   file         : constants.py
#   file_relpath : src/logcast/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCast Constants."""

from __future__ import annotations

from typing import Final

PROJECT_NAME: Final[str] = "logcast"

# Environment variable consulted by `logcast.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "LOGCAST_LOG_LEVEL"

# TOML locations for broadcaster configuration.
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "logcast")
STANDALONE_SECTION: Final[tuple[str, ...]] = ("logcast",)

# Tag prefix used by the string flavor when addressing debug-threshold observers.
OBSERVER_TAG_PREFIX: Final[str] = "OBSERVER"
