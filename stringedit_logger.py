# -*- coding: utf-8 -*-
"""
StringEdit Central Logging Module

Provides the standard logging configuration for the whole library.
Log files are kept under ~/.stringedit/logs/ (override with STRINGEDIT_LOG_DIR).

Handlers are only configured on the root 'stringedit' logger.
Child loggers propagate to root and do not add handlers themselves.
"""

import logging
import os
from pathlib import Path
from datetime import datetime

# Log directory
LOG_DIR = Path(os.environ.get("STRINGEDIT_LOG_DIR", Path.home() / ".stringedit" / "logs"))

# Daily log file
LOG_FILE = LOG_DIR / f"stringedit_{datetime.now().strftime('%Y%m%d')}.log"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-28s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_root_configured = False


def _configure_root_logger():
    """Configure the root 'stringedit' logger with handlers (once only)."""
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger("stringedit")
    root_logger.setLevel(logging.DEBUG)

    # Prevent propagation to Python's root logger to avoid duplicates
    root_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)
    except OSError as e:
        # Read-only home directories still get console logging
        root_logger.warning(f"File logging disabled ({LOG_FILE}): {e}")

    _root_configured = True


_configure_root_logger()
logger = logging.getLogger("stringedit")


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger for a module.

    Child loggers do NOT add handlers - they propagate to the root 'stringedit' logger.

    Args:
        name: Module name, e.g. "controllers.session"

    Returns:
        Logger named stringedit.{name}
    """
    _configure_root_logger()
    return logging.getLogger(f"stringedit.{name}")
