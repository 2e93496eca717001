"""
Logging configuration with a colored console handler.

Usage:
    from soulswap.config.logging import get_logger
    logger = get_logger("soul_evil")
    logger.info("Override active", extra={"workspace": "/home/me/clawd"})
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

# ANSI color codes for console output
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# Module-specific colors for tags
TAG_COLORS = {
    "soulswap.soul_evil": "\033[95m",  # Magenta
    "soulswap.workspace": "\033[94m",  # Blue
    "soulswap.config": "\033[92m",  # Green
    "soulswap.cli": "\033[93m",  # Yellow
}


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that adds colors and a [tag] per logger name."""

    def format(self, record: logging.LogRecord) -> str:
        level_color = COLORS.get(record.levelname, "")
        reset = COLORS["RESET"]

        tag = record.name
        tag_color = TAG_COLORS.get(tag, "\033[37m")

        timestamp = datetime.now().strftime("%H:%M:%S")
        level_str = f"{level_color}{record.levelname:8}{reset}"
        tag_str = f"{tag_color}[{tag}]{reset}"

        extra_parts = []
        if hasattr(record, "workspace") and record.workspace:
            extra_parts.append(f"workspace={record.workspace}")
        if hasattr(record, "reason") and record.reason:
            extra_parts.append(f"reason={record.reason}")

        extra_str = f" ({', '.join(extra_parts)})" if extra_parts else ""
        msg = f"{timestamp} {level_str} {tag_str} {record.getMessage()}{extra_str}"

        if record.exc_info:
            msg += "\n" + self.formatException(record.exc_info)

        return msg


_initialized = False


def _get_console_level() -> int:
    """Get console log level from LOG_LEVEL, falling back to settings."""
    level_name = os.getenv("LOG_LEVEL")
    if not level_name:
        from soulswap.config import get_settings

        level_name = get_settings().logging.level
    return getattr(logging, level_name.upper(), logging.INFO)


def init_logging(console_level: int | None = None) -> None:
    """Initialize the logging system with a colored console handler."""
    global _initialized

    if _initialized:
        return

    if console_level is None:
        console_level = _get_console_level()

    # Clear any existing handlers on root logger (from basicConfig or other sources)
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColoredConsoleFormatter())

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    if not _initialized:
        init_logging()
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop the initialized flag so the next call reconfigures (tests)."""
    global _initialized
    _initialized = False
