"""Structured logging setup using structlog.

The same shared processor chain feeds either a coloured ConsoleRenderer
(development) or a JSONRenderer (production).  The renderer follows the
``APP_ENV`` environment variable unless ``json_output`` forces JSON.

Standard-library ``logging`` is routed through the same formatter so that
httpx request logs line up with engine events.  Output goes to stderr so
the CLI can keep stdout for results.

Library modules only call :func:`get_logger`, which never configures
structlog.  An application that embeds the engines without calling
:func:`configure_logging` (or its own ``structlog.configure``) gets
structlog's defaults, which print engine events to **stdout**.  Call
``configure_logging`` at start-up whenever stdout carries data.
"""

import logging
import os
import sys

import structlog


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Configure structlog with environment-appropriate rendering.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        json_output: Force JSON output. When False, JSON is used only when
                     ``APP_ENV`` is ``"production"``.

    Returns:
        A configured structlog BoundLogger.
    """
    app_env = os.environ.get("APP_ENV", "development")
    use_json = json_output or app_env == "production"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger bound with ``logger_name``.

    Unlike an application entry point, library modules never force a
    configuration: an unconfigured structlog falls back to its defaults.
    """
    return structlog.get_logger(logger_name=name)
