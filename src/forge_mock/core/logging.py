"""
Logging configuration for the forge mock service.

Service modules log through the standard library with ``extra=`` context
(``resource_id``, ``kind`` and so on). A single root handler renders those
records through structlog, so stdlib and structlog loggers share one format
and the extra fields appear as event keys.
"""

import logging
import sys
from typing import IO, Optional, Union

import structlog

from forge_mock.core.config import Settings, settings as default_settings

HANDLER_NAME = "forge_mock"


def _shared_processors() -> list:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def setup_logging(settings: Optional[Settings] = None, stream: Optional[IO[str]] = None) -> logging.Handler:
    """
    Route all logging through one structlog-formatted root handler.

    Calling it again replaces the handler installed by the previous call.

    Returns:
        The installed handler
    """
    settings = settings or default_settings
    level = getattr(logging, settings.LOG_LEVEL.upper())

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + _shared_processors()
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.ExtraAdder()] + _shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _get_renderer(settings, stream),
            ],
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # uvicorn keeps its own handlers unless told to propagate
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    return handler


def _get_renderer(settings: Settings, stream: IO[str]) -> Union[structlog.processors.JSONRenderer, structlog.dev.ConsoleRenderer]:
    """Get the appropriate log renderer based on configuration."""
    if settings.LOG_FORMAT.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=hasattr(stream, "isatty") and stream.isatty())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
