"""Logging setup shared by the API server, the writer and the CLI client."""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str | None) -> int:
    """Turn an int, a level name or the BLOG_WRITER_LOG_LEVEL env var into a level."""
    if level is None:
        level = os.getenv("BLOG_WRITER_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.INFO
    return level


def setup_logging(
    level: int | str | None = None,
    module_name: str = "blog_writer",
    stream=None,
) -> logging.Logger:
    """Configure and return a named logger.

    Handlers are attached once per logger name, so modules can call this
    at import time without duplicating output.

    Args:
        level: Logging level as int or name. Defaults to BLOG_WRITER_LOG_LEVEL or INFO.
        module_name: Name for the logger instance.
        stream: Output stream for the handler (default stderr, so the CLI
            can keep stdout for generated text).

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    resolved = _resolve_level(level)
    logger.setLevel(resolved)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

    return logger
