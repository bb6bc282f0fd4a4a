#!/usr/bin/env python3
"""
Logging configuration for cratedocs.

Both the MCP server and the environment refresher write structured JSON
records to a date-named, size-rotated file under the logs directory.
"""

import datetime
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""
    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        # Structured fields passed as extra={'extra_data': {...}}
        if hasattr(record, 'extra_data'):
            log_record.update(record.extra_data)
        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def setup_logging(logs_dir: Path = None, name: str = "CrateDocsServer", level: int = logging.INFO):
    """
    Configure and return the named JSON logger.

    Args:
        logs_dir: Directory for log files. Defaults to "./logs"
        name: Logger name, one per entry point
        level: Minimum level to record

    Returns:
        Configured logger instance. Calling again with the same name returns
        the already configured logger untouched.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if logs_dir is None:
        logs_dir = Path("./logs")
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger.setLevel(level)
    logger.propagate = False

    log_file = logs_dir / f"{datetime.date.today()}.log"
    handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    handler.setFormatter(JsonFormatter())

    logger.addHandler(handler)
    return logger
