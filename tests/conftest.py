"""
Pytest configuration and shared fixtures for common_helpers tests.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
import structlog

from common_helpers import config
from common_helpers.errorsx import CallSite


@pytest.fixture
def io_error() -> OSError:
    """Provide a low-level cause for wrapping."""
    return OSError("disk not ready")


@pytest.fixture
def fixed_location() -> CallSite:
    """Provide a deterministic call site for golden output tests."""
    return CallSite(filename="app/upload.py", lineno=42, function="handle_upload")


@pytest.fixture
def backtrace_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable backtrace capture for the duration of a test."""
    monkeypatch.setattr(config.settings, "CAPTURE_BACKTRACE", False)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after tests that configure logging."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
