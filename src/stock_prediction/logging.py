"""Structured logging for pipeline runs, built on structlog.

Pipeline events are snake_case names with keyword context. The exchange
being walked is bound through ``structlog.contextvars`` (see
``exchange_context``), so every per-file event carries it without threading
it through each call.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    stream: TextIO | None = None,
) -> None:
    """Route structlog through stdlib logging with one stderr handler.

    Args:
        log_level: Root level name, e.g. "INFO" or "DEBUG". Unknown names fall
            back to INFO.
        log_format: "json" for one JSON object per line, anything else for
            the console renderer.
        stream: Destination stream. Defaults to ``sys.stderr`` so logs never
            mix with the CLI's stdout messages.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


@contextmanager
def exchange_context(exchange: str) -> Iterator[None]:
    """Bind ``exchange=<name>`` to every log event inside the block."""
    with structlog.contextvars.bound_contextvars(exchange=exchange):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
