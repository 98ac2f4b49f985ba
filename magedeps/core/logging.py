"""Structured logging for the magedeps CLI: structlog rendered through stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


def setup_logging(level: str | None = None) -> None:
    """Route structlog events to stderr, leaving stdout for scan results.

    *level* wins over ``MAGEDEPS_LOG_LEVEL`` (default WARNING, so a clean scan
    prints nothing but its results). ``MAGEDEPS_LOG_FORMAT=json`` switches the
    renderer for log shipping; anything else renders for a terminal.
    """
    log_level = (level or os.environ.get("MAGEDEPS_LOG_LEVEL", "WARNING")).upper()
    as_json = os.environ.get("MAGEDEPS_LOG_FORMAT", "console").lower() == "json"

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if as_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "magedeps": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "magedeps",
                },
            },
            "loggers": {
                "magedeps": {"handlers": ["stderr"], "level": log_level, "propagate": False},
            },
        }
    )
