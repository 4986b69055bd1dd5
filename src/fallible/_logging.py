"""Structured logging for fallible.

fallible logs through structlog loggers wrapping stdlib loggers under the
``fallible`` namespace. Records are level-filtered before any processing,
so the library costs nothing and prints nothing until the application
enables the ``fallible`` logger, through its own logging setup or with
:func:`configure_logging`.

Records from other stdlib loggers routed to the same handler are rendered
with the same timestamp and level keys.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'fallible'

_LEVELS = logging.getLevelNamesMapping()


def _enrich() -> list[Any]:
    # Applied to fallible's own events and, as foreign_pre_chain, to stdlib records.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
    ]


def _chain() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        *_enrich(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send fallible's events to stderr.

    Replaces any handler previously installed on the ``fallible`` logger and
    stops propagation to the root logger; nothing else is touched.

    Args:
        level: Minimum level name, case-insensitive. Unknown names mean INFO.
        json_output: One JSON object per line when True, else the structlog
            console format.
    """
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrich(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    target = logging.getLogger(LOGGER_NAME)
    target.handlers[:] = [handler]
    target.setLevel(_LEVELS.get(level.upper(), logging.INFO))
    target.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger for ``name`` (default ``fallible``).

    Independent of ``structlog.configure``, so an application's own structlog
    setup neither affects nor is affected by fallible.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
