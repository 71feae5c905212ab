"""Pytest configuration for the chat_functions test suite.

Pins logging configuration so tests do not depend on the caller's
environment variables.
"""

from __future__ import annotations

from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_logging_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear package logging env toggles for the duration of a test."""

    monkeypatch.delenv("CHAT_FUNCTIONS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHAT_FUNCTIONS_LOG_JSON", raising=False)
    yield
