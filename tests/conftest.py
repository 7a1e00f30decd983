"""Shared pytest fixtures."""

import logging
from collections.abc import Generator

import pytest
import structlog

from appconfig.features.http.metrics import HttpMetrics
from appconfig.features.observability.logging import TRANSPORT_LOGGERS


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_metrics() -> Generator[None]:
    """Start every test with fresh metrics."""
    HttpMetrics.reset()
    yield
    HttpMetrics.reset()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Undo logging configured by a test (e.g. through the CLI)."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    transport_levels = {
        name: logging.getLogger(name).level for name in TRANSPORT_LOGGERS
    }
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, transport_level in transport_levels.items():
        logging.getLogger(name).setLevel(transport_level)
