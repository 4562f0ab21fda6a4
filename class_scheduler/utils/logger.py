# File: class_scheduler/utils/logger.py
"""
Centralized logging configuration for the class schedule visualizer.

Every logger writes INFO and above to stdout, and DEBUG and above to a
daily file under Config.LOGS_DIR.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from class_scheduler.core.config_manager import Config

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s'


def _daily_file_handler(log_dir: Path) -> logging.Handler:
    """Handler appending to class_scheduler_YYYYMMDD.log inside log_dir."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"class_scheduler_{datetime.now().strftime('%Y%m%d')}.log"

    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logger(
    name: str = "class_scheduler",
    level: int = logging.INFO,
    log_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Console logging level (default: INFO)
        log_dir: Directory for the daily log file (default: Config.LOGS_DIR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    log_dir = Path(log_dir or Config.LOGS_DIR)
    try:
        logger.addHandler(_daily_file_handler(log_dir))
    except OSError as e:
        logger.warning(f"File logging disabled, cannot write to {log_dir}: {e}")

    return logger


class LoggerMixin:
    """Mixin to add logging capability to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Logger named after the concrete class."""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(self.__class__.__name__)
        return self._logger
