"""
Movie Catalog API - Logging Configuration
=========================================

Structured logging on top of the standard library, with a request id
carried through contextvars so every line emitted while serving a request
can be correlated.

Usage:
    from movie_api.core.logging import get_logger, setup_logging

    # Setup logging (call once at startup)
    setup_logging()

    # Get logger for module
    logger = get_logger(__name__)
    logger.info("Movie created", movie_id=42)
"""

import json
import logging
import logging.handlers
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog
from structlog.dev import ConsoleRenderer
from structlog.processors import StackInfoRenderer, TimeStamper, format_exc_info
from structlog.stdlib import LoggerFactory, add_log_level, add_logger_name

from movie_api.core.config import settings

# ==========================================
# CONTEXT VARIABLES FOR REQUEST TRACKING
# ==========================================

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


# ==========================================
# CUSTOM STRUCTLOG PROCESSORS
# ==========================================

def add_request_context(logger, method_name, event_dict):
    """Add request context to log entries"""
    request_id = request_id_var.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_app_context(logger, method_name, event_dict):
    """Add application context to log entries"""
    event_dict.update({
        "app_name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    })
    return event_dict


SENSITIVE_KEYS = {"password", "token", "secret", "authorization", "cookie", "database_url"}


def censor_sensitive_data(logger, method_name, event_dict):
    """Mask sensitive values before they reach any handler"""

    def _censor(obj, max_depth=5):
        if max_depth <= 0:
            return obj
        if isinstance(obj, dict):
            return {
                k: "***CENSORED***" if any(sens in k.lower() for sens in SENSITIVE_KEYS)
                else _censor(v, max_depth - 1)
                for k, v in obj.items()
            }
        if isinstance(obj, (list, tuple)):
            return type(obj)(_censor(item, max_depth - 1) for item in obj)
        return obj

    return _censor(event_dict)


# ==========================================
# CUSTOM FORMATTERS
# ==========================================

class JSONFormatter(logging.Formatter):
    """JSON formatter for file output"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info) if settings.DEBUG else None,
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        level_color = self.COLORS.get(record.levelname, "")
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{level_color}{record.levelname}{self.RESET}"
        return super().format(record)


# ==========================================
# FILE HANDLERS WITH ROTATION
# ==========================================

def parse_size(max_size: str) -> int:
    """Convert a size such as '100MB' into bytes"""
    size_multipliers = {"KB": 1024, "MB": 1024 ** 2, "GB": 1024 ** 3}
    size_str = max_size.strip().upper()

    for suffix, multiplier in size_multipliers.items():
        if size_str.endswith(suffix):
            return int(size_str[:-len(suffix)]) * multiplier
    return int(size_str)


def create_file_handler(filename: str, max_size: str = "100MB", backup_count: int = 5) -> logging.Handler:
    """Create rotating file handler"""
    return logging.handlers.RotatingFileHandler(
        filename=filename,
        maxBytes=parse_size(max_size),
        backupCount=backup_count,
        encoding="utf-8",
    )


# ==========================================
# LOGGING SETUP
# ==========================================

def setup_logging() -> None:
    """Setup structured logging with console and optional file output"""

    if settings.LOG_FILE:
        Path(settings.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)

    processors = [
        add_request_context,
        add_app_context,
        censor_sensitive_data,
        add_logger_name,
        add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    elif settings.LOG_FORMAT == "structured":
        processors.append(ConsoleRenderer(colors=sys.stdout.isatty()))
    else:  # simple format
        processors.append(ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT == "json":
        # structlog already rendered the event as JSON
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    elif settings.LOG_FORMAT == "structured" and sys.stdout.isatty():
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        ))
    elif settings.LOG_FORMAT == "structured":
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        ))
    else:
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE:
        file_handler = create_file_handler(
            settings.LOG_FILE,
            settings.LOG_MAX_SIZE,
            settings.LOG_BACKUP_COUNT,
        )
        # Always use JSON format for file logs
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    # Quiet noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    if settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    else:
        logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    get_logger(__name__).debug(
        "Logging configured", level=settings.LOG_LEVEL, format=settings.LOG_FORMAT
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for the given name"""
    return structlog.get_logger(name)


# ==========================================
# CONTEXT MANAGERS FOR REQUEST TRACKING
# ==========================================

class LogContext:
    """Context manager binding a request id for the duration of a block"""

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id
        self.token = None

    def __enter__(self):
        if self.request_id:
            self.token = request_id_var.set(self.request_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            request_id_var.reset(self.token)
            self.token = None


def with_request_context(request_id: str) -> LogContext:
    """Context manager for request logging"""
    return LogContext(request_id=request_id)


# ==========================================
# STRUCTURED LOGGING HELPERS
# ==========================================

def log_api_request(
    method: str,
    path: str,
    status_code: int,
    duration: float,
    client: Optional[str] = None,
):
    """Log API request with structured data"""

    api_logger = get_logger("api")

    log_data = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": round(duration * 1000, 2),
    }
    if client:
        log_data["client"] = client

    # Determine log level based on status code
    if status_code >= 500:
        api_logger.error("API request failed", **log_data)
    elif status_code >= 400:
        api_logger.warning("API request error", **log_data)
    else:
        api_logger.info("API request completed", **log_data)


__all__ = [
    "setup_logging",
    "get_logger",
    "LogContext",
    "with_request_context",
    "log_api_request",
    "request_id_var",
    "JSONFormatter",
    "ColoredFormatter",
    "parse_size",
]
