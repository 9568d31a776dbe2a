"""Structured logging for floorplan.

Events are snake_case structlog calls (``log.info("units_built", count=3)``)
rendered to stdout and a rotating file in ``logs/``. Level and renderer come
from ``FloorPlanSettings`` unless passed explicitly.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog

LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "floorplan.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_configured: bool = False


def _handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    # Test runs stay off disk
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers
    try:
        LOG_DIR.mkdir(exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            str(LOG_FILE), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        ))
    except OSError:
        pass
    return handlers


def _processors(json_output: bool) -> list[Any]:
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Set up stdlib logging and structlog once per process.

    Args:
        level: DEBUG, INFO, WARNING or ERROR; ``FLOORPLAN_LOG_LEVEL`` otherwise
        json_output: Render JSON lines; ``FLOORPLAN_JSON_LOGS`` otherwise
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    # Settings import domain models, which must not pull logging in first
    from floorplan.core.settings import get_settings

    settings = get_settings()
    if json_output is None:
        json_output = settings.json_logs
    numeric_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", level=numeric_level, handlers=_handlers(), force=True)
    structlog.configure(
        processors=_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger bound to ``logger_name``; configures logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger


@contextmanager
def floor_context(floor_number: int, **extra: Any) -> Iterator[None]:
    """Tag every event logged inside the block with the floor being handled.

    ``with floor_context(2): log.info("floor_saved")`` logs
    ``floor_number=2`` without passing it to the call.
    """
    with structlog.contextvars.bound_contextvars(floor_number=floor_number, **extra):
        yield
