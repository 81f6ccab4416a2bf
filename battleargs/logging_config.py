"""Logging configuration for the battle action argument decoder."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "WARNING", format_json: bool = False) -> None:
    """
    Configure logging for command line use.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to emit one JSON object per log line
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    if format_json:
        formatter = logging.Formatter(
            '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)

    handler._battleargs = True  # type: ignore[attr-defined]

    # Repeated calls replace the handler installed by the previous call.
    for existing in list(logging.root.handlers):
        if getattr(existing, "_battleargs", False):
            logging.root.removeHandler(existing)

    logging.root.setLevel(log_level)
    logging.root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name (usually __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)


__all__ = ["get_logger", "setup_logging"]
