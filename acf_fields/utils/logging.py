"""
Structured Logging

Provides JSON-formatted logging for applications embedding the field
builders. The library itself only creates module loggers; call
setup_structured_logging() from the host application to install handlers.
"""

import json
import logging
from datetime import datetime, timezone

from acf_fields.config import settings


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs in a format suitable for log aggregation systems
    like ELK Stack, Loki, or CloudWatch.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        for key in ["field_type", "field_name", "setting"]:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


def setup_structured_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR), defaults to settings.log_level
        json_format: Use JSON formatter, defaults to settings.log_json
        log_file: Optional file path for log output
    """
    if log_level is None:
        log_level = settings.log_level
    if json_format is None:
        json_format = settings.log_json

    # Get root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    root_logger.handlers.clear()

    # Create handler
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()

    # Set formatter
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root_logger.addHandler(handler)

    logging.getLogger("acf_fields").setLevel(getattr(logging, log_level.upper()))
