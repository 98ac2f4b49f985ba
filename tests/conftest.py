"""Shared pytest fixtures for magedeps tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo CLI logging setup so handlers never point at a closed runner stream."""
    yield
    package_logger = logging.getLogger("magedeps")
    package_logger.handlers.clear()
    package_logger.propagate = True
    structlog.reset_defaults()
