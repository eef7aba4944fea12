"""
Logging setup for the BhashaBazaar voice API

Provides:
- One stdout handler on the root logger, text in development and JSON lines in production
- Request ID propagation from the HTTP middleware into every log record
- Transcript previews so raw speech never floods the logs

Usage:
    from bhashabazaar.core.logging_config import setup_logging, transcript_preview

    setup_logging()                      # once, in the app lifespan
    logger.info(f"Voice order: {transcript_preview(transcript)}")
"""

import sys
import json
import logging
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Optional

from bhashabazaar.core.config import settings

__all__ = [
    "setup_logging",
    "bind_request_id",
    "reset_request_id",
    "current_request_id",
    "transcript_preview",
    "RequestIdFilter",
    "JsonFormatter",
    "TEXT_LOG_FORMAT",
]

TEXT_LOG_FORMAT = "%(asctime)s [%(levelname)8s] [%(request_id)s] %(name)s: %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty libraries that only log at WARNING and above
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "httpx", "multipart")

TRANSCRIPT_PREVIEW_LENGTH = 60

_request_id: ContextVar[Optional[str]] = ContextVar("bhashabazaar_request_id", default=None)

# Attributes of a bare LogRecord; anything else arrived through `extra`
_STANDARD_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message", "asctime", "request_id",
}


# =============================================================================
# Request context
# =============================================================================

def bind_request_id(request_id: Optional[str]) -> Token:
    """Attach a request ID to the current context; returns a token for reset_request_id"""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def current_request_id() -> Optional[str]:
    return _request_id.get()


def transcript_preview(transcript: Optional[str], limit: int = TRANSCRIPT_PREVIEW_LENGTH) -> str:
    """Quoted, single-line, length-capped transcript for log messages"""
    text = " ".join((transcript or "").split())
    if len(text) > limit:
        text = text[:limit] + "..."
    return repr(text)


# =============================================================================
# Filters and formatters
# =============================================================================

class RequestIdFilter(logging.Filter):
    """Stamp every record with the request ID bound by the HTTP middleware ("-" outside a request)"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id() or "-"
        return True


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line. Transcripts stay readable: non-ASCII text
    (Devanagari, Bengali, Tamil, Telugu) is written as-is, not escaped.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.module}:{record.lineno}",
            "request_id": getattr(record, "request_id", "-"),
            "message": record.getMessage(),
        }

        entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


# =============================================================================
# Setup
# =============================================================================

def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Replace the root logger's handlers with a single stdout handler.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: settings.log_level)
        log_format: "json" or "text" (default: settings.log_format)
    """
    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT, datefmt=TEXT_DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging configured: level={level}, format={log_format}, env={settings.ENVIRONMENT}"
    )
