"""
Structured logging for LureDB.

The API writes events to stdout; the CLI writes them to stderr so that
search results on stdout stay machine-readable. Values bound with
`bind_log_context` (the API binds a request id per request) are merged
into every event logged while they are bound, including the loader and
index events emitted by the core.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from luredb.config.settings import get_settings

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp events with the app version and the catalog being served."""
    settings = get_settings()
    event_dict.setdefault("version", settings.app_version)
    event_dict.setdefault("catalog", str(settings.catalog.data_path))
    return event_dict


def configure_logging(
    level: str | None = None,
    stream: TextIO | None = None,
    json_output: bool | None = None,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name; defaults to `settings.log_level`.
        stream: Where events go; defaults to stdout.
        json_output: JSON lines instead of console output; defaults to
            JSON everywhere except the development environment.
    """
    global _handler
    settings = get_settings()

    if json_output is None:
        json_output = settings.environment != "development"

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
    ]
    if json_output:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream is None))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Replace only our own handler so test and host handlers survive
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stdout)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(getattr(logging, (level or settings.log_level).upper()))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def bind_log_context(**values: Any) -> None:
    """Attach values to every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
