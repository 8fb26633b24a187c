"""Logging setup.

Every component logs to a named stream below the ``heprecord`` logger
(``heprecord.GHEP`` for the event record). Library code never configures
handlers; applications call :func:`setup_logger` once.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT = "heprecord"


def get_logger(stream: str = "GHEP") -> logging.Logger:
    """Return the logger of a message stream."""
    return logging.getLogger(f"{ROOT}.{stream}")


def setup_logger(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up console and optional file output for all streams.

    Args:
        level: Console logging level.
        log_file: Optional path to a log file.
        file_level: Logging level for file output.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT)
    logger.setLevel(min(level, file_level) if log_file else level)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    return logger
