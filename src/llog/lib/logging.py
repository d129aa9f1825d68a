"""Structlog configuration helpers.

Library modules log through stdlib loggers wrapped by structlog, so an
application that never calls `configure_logging()` gets stdlib defaults:
nothing below WARNING, and never a byte on stdout.
"""

from __future__ import annotations

import logging as std_logging
import sys

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that renders into the stdlib logger `name`."""

    return structlog.wrap_logger(
        std_logging.getLogger(name),
        processors=[structlog.stdlib.render_to_log_kwargs],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Configure llog diagnostics for the CLI."""

    level = _level_from_verbosity(verbosity)
    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if json_mode:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
        ],
        processors=processors,
    )
    # Diagnostics go to stderr; stdout carries only printed records.
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    std_logging.basicConfig(level=level, handlers=[handler], force=True)
