# topmark:header:start
#
#   project      : LogCast
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LogCast test suite.

Sets LogCast's internal logging to TRACE for every run and provides typed
wrappers around pytest decorators. Shared observer doubles live in
`tests.observers_support`.

Notes:
    Broadcasters keep no global state apart from the identity counter, so tests
    build fresh instances instead of sharing fixtures across modules. Never assert
    on a concrete ``ident`` value; compare against ``broadcaster.ident``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from logcast.config import logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)


@pytest.fixture(autouse=True)
def clear_logcast_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LOGCAST_LOG_LEVEL from the developer's shell does not leak into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop the environment variable.
    """
    monkeypatch.delenv("LOGCAST_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set LogCast's internal logging to TRACE for the whole session.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
