"""Tests for magedeps logging setup."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

from magedeps.core.logging import setup_logging


class TestSetupLogging:
    def test_default_level_is_warning(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("MAGEDEPS_LOG_LEVEL", None)
            setup_logging()
        logger = logging.getLogger("magedeps")
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_env_level(self):
        with patch.dict(os.environ, {"MAGEDEPS_LOG_LEVEL": "info"}):
            setup_logging()
        assert logging.getLogger("magedeps").level == logging.INFO

    def test_explicit_level_wins(self):
        with patch.dict(os.environ, {"MAGEDEPS_LOG_LEVEL": "error"}):
            setup_logging("DEBUG")
        assert logging.getLogger("magedeps").level == logging.DEBUG

    def test_json_format(self):
        with patch.dict(os.environ, {"MAGEDEPS_LOG_FORMAT": "json"}):
            setup_logging()
        handler = logging.getLogger("magedeps").handlers[0]
        record = logging.LogRecord("magedeps.scanner", logging.WARNING, __file__, 1, "hello", None, None)
        assert '"event": "hello"' in handler.format(record)
