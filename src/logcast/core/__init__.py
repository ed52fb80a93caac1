# topmark:header:start
#
#   project      : LogCast
#   file         : __init__.py
#   file_relpath : src/logcast/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared, dependency-free building blocks (errors and enum helpers)."""
