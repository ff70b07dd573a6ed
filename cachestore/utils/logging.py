"""Structured logging setup using structlog.

Dual-renderer setup: one shared processor chain feeds either a coloured
ConsoleRenderer (development) or a JSONRenderer (production).  The
environment comes from the ``app_env`` argument, falling back to the
``APP_ENV`` environment variable.

Standard-library ``logging`` is routed through the same formatter so the
redis / fakeredis clients' own records share the output format.  Those
engine loggers are held at WARNING unless the store itself runs at DEBUG,
since they log every connection event.
"""

import logging
import os
import sys

import structlog

_ENGINE_LOGGERS = ("redis", "fakeredis")


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    app_env: str | None = None,
) -> structlog.BoundLogger:
    """Configure structlog with environment-appropriate rendering.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR, FATAL).
        json_output: Force JSON output regardless of environment.
        app_env: Deployment environment; ``"production"`` selects JSON.
                 Read from ``APP_ENV`` when omitted.

    Returns:
        A configured structlog BoundLogger.
    """
    env = app_env or os.environ.get("APP_ENV", "development")
    use_json = json_output or env == "production"
    level = log_level.upper()

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
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, renderer],
        # Drops records below the level before any processor runs.
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    engine_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in _ENGINE_LOGGERS:
        logging.getLogger(name).setLevel(engine_level)

    return structlog.get_logger()


def get_logger(name: str, **initial_values: object) -> structlog.BoundLogger:
    """Get a named structlog logger, configuring defaults on first use.

    Args:
        name: Logger name, typically the module name.
        **initial_values: Extra context bound to every event, e.g. ``store="redis-mock"``.

    Returns:
        A structlog BoundLogger bound with the given name.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name, **initial_values)
