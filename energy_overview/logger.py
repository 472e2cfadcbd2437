"""
Logging configuration for the energy overview.
Provides centralized logging setup.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOG_LEVEL, LOG_FORMAT

# Log file path
LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_DIR.mkdir(exist_ok=True)
LOG_FILE = LOG_DIR / "energy_overview.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with both file and console handlers.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # File handler - detailed logs
    file_handler = logging.FileHandler(LOG_FILE)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    # Console handler - INFO and above
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def log_records_stats(records: list[dict], logger: logging.Logger, name: str = "Records",
                      label_key: Optional[str] = None):
    """Log statistics about a parsed record sequence."""
    if not records:
        logger.warning(f"{name}: No records")
        return

    if label_key is None:
        label_key = next(iter(records[0]), None)

    summary = f"{name}: {len(records)} rows, {len(records[0])} columns"
    if label_key not in records[0]:
        logger.warning(f"{summary}, label column {label_key!r} missing")
        return

    logger.info(f"{summary}, range: {records[0][label_key]} to {records[-1].get(label_key)}")
