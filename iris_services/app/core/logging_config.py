"""
Basic logging configuration for the functions and the local server.

The ``setup_logging`` function configures the root logger with a
console handler.  On Lambda the console stream is shipped to
CloudWatch, so no file handler is attached by default.  Warm Lambda
containers reuse the interpreter between invocations, so handlers are
attached at most once per process.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    The root logger's level is always set from ``level``.  If no
    handlers are attached yet, attach a console handler and optionally
    a file handler.  The Lambda runtime installs its own handler on the
    root logger before any user code runs; in that case only the level
    is applied.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
