"""Structured logging configuration.

Library loggers are structlog loggers backed by the standard library logger
tree under ``disjoint_set``. That tree only carries a NullHandler until the
host calls configure_logging(), so nothing is printed by default.
"""

import logging
import sys
from typing import Final, TextIO

import structlog

LOGGER_NAME: Final = "disjoint_set"
HANDLER_NAME: Final = "disjoint_set.structlog"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(
    *,
    json_output: bool = False,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Route library log events to a stream through structlog renderers.

    Calling this again replaces the handler installed by the previous call.

    Args:
        json_output: If True, output JSON logs. Otherwise, pretty console output.
        level: Logging level (default: INFO).
        stream: Where to write log lines (default: stderr).
    """
    stream = stream if stream is not None else sys.stderr
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ExtraAdder(),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(library_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    library_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the standard library logger ``name``."""
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger
