"""
Shared Logger

Centralized logging configuration for the application.

Console output plus, optionally, three daily files per directory:
    <date>.log        INFO and WARNING
    <date>-debug.log  DEBUG
    <date>-error.log  ERROR and CRITICAL
"""

import json
import logging
import sys
from datetime import UTC, date, datetime
from pathlib import Path

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console log formatter."""

    COLORS = {
        "DEBUG": "\033[35m",     # Magenta
        "INFO": "\033[36m",      # Cyan
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[31m",  # Red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors without altering the shared record."""
        color = self.COLORS.get(record.levelname, self.RESET)
        plain_level = record.levelname
        record.levelname = f"{color}{plain_level}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain_level


class LevelRangeFilter(logging.Filter):
    """Let through records with min_level <= level <= max_level."""

    def __init__(self, min_level: int, max_level: int = logging.CRITICAL):
        super().__init__()
        self.min_level = min_level
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return self.min_level <= record.levelno <= self.max_level


def _file_handler(path: Path, level_filter: LevelRangeFilter) -> logging.FileHandler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.addFilter(level_filter)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_dir: str | Path | None = None,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'colored', 'json', or 'plain'
        log_dir: Optional directory for the per-level log files
    """
    log_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    elif format_type == "colored":
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))

    root_logger.addHandler(console_handler)

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        stamp = date.today().isoformat()

        root_logger.addHandler(
            _file_handler(directory / f"{stamp}.log", LevelRangeFilter(logging.INFO, logging.WARNING))
        )
        root_logger.addHandler(
            _file_handler(directory / f"{stamp}-debug.log", LevelRangeFilter(logging.DEBUG, logging.DEBUG))
        )
        root_logger.addHandler(
            _file_handler(directory / f"{stamp}-error.log", LevelRangeFilter(logging.ERROR))
        )

    # httpx logs every request at INFO, including the token endpoint
    logging.getLogger("httpx").setLevel(logging.WARNING)


def mask_secret(value: str | None, visible: int = 6) -> str:
    """Render a secret as its first characters followed by '***'."""
    if not value:
        return "<empty>"
    if len(value) <= visible:
        return "***"
    return f"{value[:visible]}***"
