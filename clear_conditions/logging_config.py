"""Logging configuration for clear-conditions.

Report lines (``Cleared:``/``Failed:``) go to stdout through the console;
log records always go to stderr or a file so piped reports stay clean.
"""

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV_VAR = "CLEAR_CONDITIONS_LOG_LEVEL"

# The API client logs full request/response bodies at DEBUG
QUIET_LOGGERS = ("urllib3", "kubernetes", "kubernetes.client.rest")


def resolve_level(level: str | None = None, verbose: bool = False) -> int:
    """Pick the root level: --verbose, then the explicit level, then the environment."""
    if verbose:
        return logging.DEBUG
    name = (level or os.environ.get(LEVEL_ENV_VAR) or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _file_handler(log_file: Path, formatter: logging.Formatter) -> logging.Handler | None:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    except OSError as e:
        logging.warning(f"Failed to create log file handler for {log_file}: {e}")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None, log_file: Path | None = None, verbose: bool = False
) -> None:
    """Configure logging for a clear-conditions run.

    Args:
        level: Root logging level name; falls back to CLEAR_CONDITIONS_LOG_LEVEL, then INFO
        log_file: Optional path to a log file that receives every record
        verbose: Show DEBUG records on stderr as well
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level, verbose))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        handler = _file_handler(log_file, formatter)
        if handler:
            root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
