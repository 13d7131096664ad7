"""
Structured logging configuration.

Library modules obtain loggers through :func:`get_logger` or
:func:`get_context_logger`; handlers are installed only by applications that
call :func:`setup_logging`. Context passed as ``extra_data`` ends up as
top-level JSON keys or as ``key=value`` pairs in text output.
"""

import sys
import logging
from typing import Any, Dict, Mapping
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import get_settings
from .digits import int_to_digits

# json.dumps goes through int.__repr__, which has a digit limit
_JSON_INT_BITS = 4096


def _jsonable(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, int):
        return value
    if value.bit_length() > _JSON_INT_BITS:
        return int_to_digits(value)
    return value


def _context(record: logging.LogRecord) -> Mapping[str, Any]:
    return getattr(record, "extra_data", None) or {}


class StructuredFormatter(logging.Formatter):
    """JSON formatter: one object per record, context merged at the top level"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in _context(record).items():
            log_data[key] = _jsonable(value)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter; context is appended as ``key=value`` pairs"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={_jsonable(value)}" for key, value in context.items())
        return f"{line} [{pairs}]"


def setup_logging() -> None:
    """Configure the ``arith`` logger hierarchy from settings"""
    settings = get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
    formatter = StructuredFormatter() if settings.LOG_FORMAT == "json" else TextFormatter()

    handlers: list = [logging.StreamHandler(sys.stderr)]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    package_logger = logging.getLogger("arith")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter carrying permanent context.

    Per-call context is given as ``extra_data={...}`` and overrides the
    permanent keys.
    """

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = kwargs.pop("extra_data", {})
        extra = kwargs.setdefault("extra", {})
        extra["extra_data"] = {**self.extra, **extra_data}
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Get logger with permanent context"""
    return ContextLogger(get_logger(name), context)
