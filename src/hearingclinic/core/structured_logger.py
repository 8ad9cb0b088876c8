"""
Structured logging utilities for application logging
"""

import json
import logging
import sys
from datetime import datetime, timezone

from .config import LoggingSettings

LOGGER_NAME = "hearingclinic"
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        if hasattr(record, "extra_data"):
            log_obj.update(record.extra_data)

        return json.dumps(log_obj, default=str)


class StructuredLogger:
    """
    Structured logger that attaches keyword fields to each record as
    ``extra_data`` so the JSON formatter emits them as top-level keys
    """

    def __init__(self, name: str = LOGGER_NAME):
        self.logger = logging.getLogger(name)

    def log(self, level: int, message: str, _stacklevel: int = 2, **kwargs):
        """Log with structured data, attributed to the caller's frame"""
        self.logger.log(
            level, message, extra={"extra_data": kwargs}, stacklevel=_stacklevel
        )

    def info(self, message: str, **kwargs):
        self.log(logging.INFO, message, _stacklevel=3, **kwargs)

    def warning(self, message: str, **kwargs):
        self.log(logging.WARNING, message, _stacklevel=3, **kwargs)

    def error(self, message: str, **kwargs):
        self.log(logging.ERROR, message, _stacklevel=3, **kwargs)

    def debug(self, message: str, **kwargs):
        self.log(logging.DEBUG, message, _stacklevel=3, **kwargs)


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Install a stdout handler on the application logger.

    Calling this more than once replaces the handler rather than stacking them.
    Records do not propagate to the root logger, so a root handler installed by
    the launcher does not print them a second time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, "_hearingclinic_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if settings.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler._hearingclinic_handler = True
    logger.addHandler(handler)
    return logger


def get_logger(name: str = LOGGER_NAME) -> StructuredLogger:
    """Get or create a structured logger"""
    return StructuredLogger(name)
