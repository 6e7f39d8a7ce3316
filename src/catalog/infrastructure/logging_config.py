"""structlog setup for the CLI.

Events go through the stdlib ``logging`` root logger to stderr, so command
output on stdout stays clean. ``DEBUG`` switches to the coloured console
renderer; the level always comes from ``LOG_LEVEL``.
"""

from __future__ import annotations

import logging

import structlog

from catalog.infrastructure.config import Settings


def _renderer(settings: Settings):
    if settings.DEBUG:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(settings: Settings) -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(settings),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    )
