"""
Logging configuration for TALLY.

Provides:
- Rich console output with colors and formatting
- Optional rotating file logs, human-readable or JSON
"""
import logging
import json
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..core.config import get_config


# Global console instance (shared with progress bars)
console = Console(stderr=True)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        if hasattr(record, "tracker"):
            log_data["tracker"] = record.tracker
        if hasattr(record, "completed"):
            log_data["completed"] = record.completed

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for file logs."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(name)-24s | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logging(
    level: Optional[str] = None,
    enable_file_logging: bool = False,
    log_file: Optional[Path] = None,
    json_format: bool = False,
) -> None:
    """
    Initialize the logging system.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR); defaults to config
        enable_file_logging: Whether to write logs to files
        log_file: Custom log file path (uses default if None)
        json_format: Use JSON format for file logs
    """
    config = get_config()
    level = level or config.log.level

    root_logger = logging.getLogger("tally")
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=False,
    )
    console_handler.setLevel(getattr(logging, level.upper()))
    root_logger.addHandler(console_handler)

    if enable_file_logging:
        log_path = log_file or (config.logs_dir / "tally.log")
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.log.max_file_size,
            backupCount=config.log.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # File captures everything

        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(HumanFormatter())

        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (will be prefixed with 'tally.')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"tally.{name}")
