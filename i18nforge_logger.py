# -*- coding: utf-8 -*-
"""
I18nForge Logging Module

Provides the standard logging configuration for the whole application.
Log files are kept under ~/.i18nforge/logs/.

Handlers are only configured on the root 'i18nforge' logger.
Child loggers propagate to root and do not add handlers themselves.
"""

import logging
from pathlib import Path
from datetime import datetime

LOG_DIR = Path.home() / ".i18nforge" / "logs"

# One log file per day
LOG_FILE = LOG_DIR / f"i18nforge_{datetime.now().strftime('%Y%m%d')}.log"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_root_configured = False


def _configure_root_logger():
    """Configure the root 'i18nforge' logger with handlers (once only)."""
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger("i18nforge")
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
        # Read-only home directories still get console output
        root_logger.warning(f"File logging disabled: {e}")

    _root_configured = True


def set_console_level(level: int):
    """Change the console verbosity (used by the CLI --verbose flag)."""
    _configure_root_logger()
    for handler in logging.getLogger("i18nforge").handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(level)


# Main application logger - configure root on module load
_configure_root_logger()
logger = logging.getLogger("i18nforge")


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger for a module.

    Child loggers do NOT add handlers - they propagate to the root
    'i18nforge' logger. This prevents duplicate log lines.

    Args:
        name: Module name

    Returns:
        Logger named i18nforge.{name}
    """
    _configure_root_logger()
    return logging.getLogger(f"i18nforge.{name}")
