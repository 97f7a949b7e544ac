"""Logging configuration for the fulfillment CLI."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Route structlog events to stderr, dropping those below *level*."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=_stderr_logger,
    )


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    # Looked up per logger: CliRunner swaps sys.stderr between invocations.
    return structlog.PrintLogger(sys.stderr)
