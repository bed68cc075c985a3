"""
Structured Logging
structlog on top of the `tabular_input` stdlib logger, driven by Settings.

Only the package logger gets a handler; the host application's root logger
is left as the application configured it.
"""

import logging
import sys

import structlog
from pythonjsonlogger import jsonlogger

from .config import Settings, get_settings

PACKAGE_LOGGER = "tabular_input"

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _build_handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter(_JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    # Marks handlers installed here so reconfiguring replaces them
    handler.set_name(PACKAGE_LOGGER)
    return handler


def _processors(json_logs: bool) -> list:
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        # widget_id bound around a render pass
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Apply Settings.log_level and Settings.json_logs to the package logger.

    Safe to call again: the handler installed by a previous call is replaced.

    Args:
        settings: Settings to apply (environment settings if omitted)

    Returns:
        The configured package logger
    """
    settings = settings or get_settings()
    json_logs = settings.json_logs

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            package_logger.removeHandler(handler)
    package_logger.addHandler(_build_handler(json_logs))
    package_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    package_logger.propagate = False

    structlog.configure(
        processors=_processors(json_logs),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach module-level loggers
        cache_logger_on_first_use=False,
    )
    return package_logger


def get_logger(name: str) -> structlog.BoundLogger:
    """Structured logger for a module of this package (pass __name__)."""
    return structlog.get_logger(name)
