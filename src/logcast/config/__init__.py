# topmark:header:start
#
#   project      : LogCast
#   file         : __init__.py
#   file_relpath : src/logcast/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for LogCast broadcasters.

Re-exports the configuration model, policy enums and TOML loaders. The logging
helpers stay importable as ``logcast.config.logging``.
"""

from __future__ import annotations

from logcast.config.io import extract_logcast_table, load_config, parse_toml_text, to_toml
from logcast.config.model import BroadcasterConfig, MutableBroadcasterConfig
from logcast.config.policy import ClonePolicy, CompletionPolicy, FailurePolicy

__all__ = [
    "BroadcasterConfig",
    "ClonePolicy",
    "CompletionPolicy",
    "FailurePolicy",
    "MutableBroadcasterConfig",
    "extract_logcast_table",
    "load_config",
    "parse_toml_text",
    "to_toml",
]
