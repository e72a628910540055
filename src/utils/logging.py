"""Structured logging setup using structlog.

Implements a **dual-renderer pattern**: the same shared processor chain
(context vars, log level, timestamps, stack info) feeds into either a
coloured ConsoleRenderer for local development or a JSONRenderer for
production.  The caller picks the renderer and level, normally from
:meth:`configure_logging_from_settings`, so ``APP_ENV`` and ``LOG_ENABLED``
are read once, by Settings.

Standard-library ``logging`` is also rewired through the same structlog
formatter so that httpx, redis and uvicorn produce identically formatted
output.

Each request served by the API binds ``client_ip``, ``host`` and
``user_agent`` via :func:`bind_request_context`; every event logged while
the request is in flight carries them.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from src.config.settings import Settings

NO_HOST = "**NO HOST**"
NO_USER_AGENT = "**NO UA**"


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        json_output: ``True`` renders one JSON object per line; ``False``
                     renders coloured console output.

    Returns:
        A configured structlog BoundLogger.
    """
    # Order matters: contextvars first so the request bindings from
    # bind_request_context() land on every event, then level/timestamps.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,                   # exc_info on .error() inside except
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # Only the final renderer differs between environments.
    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            renderer,
        ],
        # Drops events below log_level before any processor runs; with
        # LOG_ENABLED=false the level is WARNING and per-request INFO events
        # (cache_hit, http_request) cost nothing.
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # httpx and redis log through stdlib; route them through the same chain.
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
    root_logger.handlers.clear()   # uvicorn installs its own on reload
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    return structlog.get_logger()


def configure_logging_from_settings(settings: Settings) -> structlog.BoundLogger:
    """Configure logging from :class:`Settings`.

    JSON output in production, console elsewhere; the level honours
    ``LOG_ENABLED`` via :meth:`Settings.effective_log_level`.
    """
    return configure_logging(
        log_level=settings.effective_log_level(),
        json_output=settings.app_env == "production",
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a named structlog logger.

    If structlog has not been configured yet, calls configure_logging() with defaults.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)


def bind_request_context(*, client_ip: str, host: str, user_agent: str) -> None:
    """Attach the caller's address, host and user agent to every log event.

    Missing values are logged as ``**NO HOST**`` / ``**NO UA**`` so the
    fields are always present for grepping.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        client_ip=client_ip or "-",
        host=host or NO_HOST,
        user_agent=user_agent or NO_USER_AGENT,
    )


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
