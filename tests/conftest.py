# topmark:header:start
#
#   project      : GridNotices
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the GridNotices test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

import pytest

from gridnotices.config import logging
from gridnotices.notice.registry import NoticeRegistry
from gridnotices.rendering.context import GridRenderContext

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_gridnotices_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    GRIDNOTICES_LOG_LEVEL in their shell.
    """
    monkeypatch.delenv("GRIDNOTICES_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@dataclass
class RecordingContext:
    """Render context that records trace messages instead of logging them."""

    grid_id: str | None = "g1"
    width: int | float | str | None = 300
    theme_flag: bool = False
    label: str | None = "System message"
    tracing: bool = True
    traces: list[str] = field(default_factory=lambda: [])
    label_lookups: list[str] = field(default_factory=lambda: [])

    def lookup_label(self, key: str) -> str | None:
        self.label_lookups.append(key)
        return self.label

    def is_tracing(self) -> bool:
        return self.tracing

    def trace(self, message: str) -> None:
        self.traces.append(message)


@pytest.fixture
def grid_context() -> GridRenderContext:
    """A plain-themed 300px grid with id ``g1``."""
    return GridRenderContext(grid_id="g1", width=300)


@pytest.fixture
def recording_context() -> RecordingContext:
    """A tracing render context that records its traces."""
    return RecordingContext()


@pytest.fixture
def registry(grid_context: GridRenderContext) -> NoticeRegistry:
    """An empty registry bound to `grid_context`."""
    return NoticeRegistry(grid_context)
