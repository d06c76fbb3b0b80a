"""Verbose logging configuration for debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None,
    verbose: bool = False,
    logger_name: str = "unitlite",
) -> logging.Logger:
    """
    Configure and return a logger for debug output.

    Writes to debug_file when one is given. Also writes to stderr if verbose=True.

    Args:
        debug_file: Path to debug log file, or None for no file output
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance (allows multiple independent loggers)

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers for this specific logger
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
