"""structlog output for the ``island`` logger.

island never configures logging on import; applications opt in by calling
:func:`configure_logging` or :func:`configure_logging_from_settings`.

Only the ``island`` logger is touched: it gets one handler of its own and
stops propagating, so the root logger's handlers and level stay as the
host application left them.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from island.config.settings import IslandSettings

LOGGER_NAME = "island"

# Marks the handler island installed so a later call can replace just that one.
_HANDLER_MARKER = "_island_handler"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _ensure_structlog_routing() -> None:
    """Route structlog loggers through stdlib unless the host configured structlog."""
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def _build_handler(*, log_json: bool) -> logging.Handler:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Attach structlog rendering to the ``island`` logger.

    Repeated calls replace the handler from the previous call instead of
    stacking a new one.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    _ensure_structlog_routing()

    island_logger = logging.getLogger(LOGGER_NAME)
    for existing in island_logger.handlers[:]:
        if getattr(existing, _HANDLER_MARKER, False):
            island_logger.removeHandler(existing)
            existing.close()

    island_logger.addHandler(_build_handler(log_json=log_json))
    island_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    island_logger.propagate = False


def configure_logging_from_settings(settings: IslandSettings) -> None:
    """Apply the ``[logging]`` section of *settings*."""
    configure_logging(
        verbose=settings.logging.verbose,
        log_json=settings.logging.log_json,
    )
