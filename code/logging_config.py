"""
Logging for the storm events pipeline.

Each pipeline stage writes to its own rotating file under logs/, chosen from
the stage keyword in the logger name ("clean.storm_data" -> logs/clean.log).
The orchestrator logs to pipeline.log and anything else to general.log.
INFO and above is echoed to stdout.

    from logging_config import setup_logger
    logger = setup_logger("clean.storm_data")
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGS_DIR = Path(__file__).resolve().parent.parent / "logs"

# Stage order is also the order run_pipeline.py executes them in
PIPELINE_STAGES = ("fetch", "clean", "analyze", "report")
LOG_CATEGORIES = PIPELINE_STAGES + ("pipeline", "general")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3


def _get_log_category(name: str) -> str:
    """Return the first category keyword found in *name*, else "general"."""
    name_lower = name.lower()
    return next((c for c in LOG_CATEGORIES if c in name_lower), "general")


def log_file_for(name: str) -> Path:
    """Path of the log file a logger called *name* writes to."""
    return LOGS_DIR / f"{_get_log_category(name)}.log"


def setup_logger(name: str, level: int = logging.DEBUG,
                 console_level: int = logging.INFO) -> logging.Logger:
    """
    Return the named logger with one file handler and one console handler.

    Calling it again for the same name returns the logger unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = RotatingFileHandler(
        log_file_for(name), maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
