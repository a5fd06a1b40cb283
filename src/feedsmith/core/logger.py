"""Structured logging with JSON and plain console output."""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone
import json

from .settings import get_settings


EXTRA_FIELDS = ("field", "entries", "namespaces", "channel_fields", "size")


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields
        for attr in EXTRA_FIELDS:
            if hasattr(record, attr):
                log_data[attr] = getattr(record, attr)

        # Add exception info
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = "INFO", log_format: str = "text", log_dir: Optional[Path] = None):
    """Setup logging configuration for the ``feedsmith`` logger tree."""
    package_logger = logging.getLogger("feedsmith")
    package_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    package_logger.handlers.clear()

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime('%Y%m%d')

        if log_format == "json":
            file_handler = logging.FileHandler(log_dir / f"feedsmith_{stamp}.jsonl")
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler = logging.FileHandler(log_dir / f"feedsmith_{stamp}.log")
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
        package_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    if log_format == "json" and log_dir is None:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter("%(levelname)s: %(message)s")
        )
    package_logger.addHandler(console_handler)

    return package_logger


def configure_logging(settings=None) -> logging.Logger:
    """Setup logging from FeedSettings (log_level, log_format, log_dir)."""
    if settings is None:
        settings = get_settings()
    return setup_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        log_dir=settings.log_dir,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
