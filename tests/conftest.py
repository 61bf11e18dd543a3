"""Pytest configuration for the jobwire test suite."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from jobwire.core.logging import LogConfig, configure_logging


@pytest.fixture
def log_stream() -> Iterator[io.StringIO]:
    """Route structured logs into a buffer for the duration of a test."""

    stream = io.StringIO()
    configure_logging(LogConfig(level="DEBUG", console_stream=stream))
    yield stream
    configure_logging()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's JOBWIRE_ environment out of the tests."""

    for name in ("JOBWIRE_DEBUG", "JOBWIRE_WIRE__MAX_FIELD_BYTES", "JOBWIRE_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)
