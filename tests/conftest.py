"""
Shared test fixtures for the railyard test suite.

Provides a call recorder for asserting how often (and with what) railway
callbacks were invoked, and resets structlog between tests so log
configuration never leaks from one test into another.
"""

from __future__ import annotations

from typing import Any

import pytest
import structlog


class CallRecorder:
    """Callable that remembers every argument tuple it was called with."""

    def __init__(self, returns: Any = None) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._returns = returns

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self._returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def recorder() -> CallRecorder:
    """A fresh CallRecorder returning None."""
    return CallRecorder()


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
