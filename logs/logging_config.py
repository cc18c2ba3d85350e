"""
Logging setup for the summarizer service.

Provides:
- A single "summarizer" logger tree with console and rotating file handlers
- Request id injection into every record via contextvars
- Helpers for logging Gemini requests and responses with previews

Usage:
    from logs.logging_config import get_app_logger, RequestContext

    logger = get_app_logger(__name__)

    with RequestContext(request_id):
        logger.info("[SUMMARIZE] START | chars=1200")
"""
import logging
import uuid
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import (
    LOG_OUTPUT_DIR,
    LOG_TO_FILE,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    LOG_PREVIEW_LENGTH,
    LOG_DATE_FORMAT,
    LOG_DETAILED_FORMAT,
    LOG_SIMPLE_FORMAT,
    LOG_FILE_REQUESTS,
    LOG_FILE_ERRORS,
)

LOG_DIR = Path(LOG_OUTPUT_DIR)
APP_LOGGER_NAME = "summarizer"

_request_id_var: ContextVar[str] = ContextVar("request_id", default="-")
_configured = False


# =========================
# Request ID tracking
# =========================

def generate_request_id() -> str:
    """Generate a new request id."""
    return str(uuid.uuid4())


def set_request_id(request_id: str) -> Token:
    """Bind a request id to the current context."""
    return _request_id_var.set(request_id)


def get_request_id() -> str:
    """Request id bound to the current context, or '-'."""
    return _request_id_var.get()


class RequestIdFilter(logging.Filter):
    """Adds the current request id to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


class RequestContext:
    """
    Context manager that binds a request id for the duration of a block.

    The previous id is restored on exit, so contexts can nest.
    """

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id or generate_request_id()
        self._token: Optional[Token] = None

    def __enter__(self) -> "RequestContext":
        self._token = set_request_id(self.request_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self._token is not None:
            _request_id_var.reset(self._token)
            self._token = None
        return False


# =========================
# Setup
# =========================

def _build_handler(handler: logging.Handler, fmt: str, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, LOG_DATE_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE) -> logging.Logger:
    """
    Configure the service logger. Safe to call more than once.

    Args:
        level: Logging level name for the service logger
        to_file: Also write rotating request and error log files under LOG_DIR

    Returns:
        The root service logger
    """
    global _configured
    logger = logging.getLogger(APP_LOGGER_NAME)
    if _configured:
        return logger

    log_level = getattr(logging, level, logging.INFO)
    logger.setLevel(log_level)
    logger.propagate = False

    logger.addHandler(_build_handler(logging.StreamHandler(), LOG_SIMPLE_FORMAT, log_level))

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_build_handler(
            RotatingFileHandler(
                LOG_DIR / LOG_FILE_REQUESTS,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            ),
            LOG_DETAILED_FORMAT,
            log_level,
        ))
        logger.addHandler(_build_handler(
            RotatingFileHandler(
                LOG_DIR / LOG_FILE_ERRORS,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            ),
            LOG_DETAILED_FORMAT,
            logging.ERROR,
        ))

    _configured = True
    logger.debug(f"[LOGGING] Configured | level={level} | to_file={to_file} | dir={LOG_DIR}")
    return logger


def get_app_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the service logger, or a named child of it."""
    if name:
        return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
    return logging.getLogger(APP_LOGGER_NAME)


# =========================
# Gemini call logging
# =========================

def _preview(text: str) -> str:
    text = text.replace("\n", " ")
    if len(text) <= LOG_PREVIEW_LENGTH:
        return text
    return text[:LOG_PREVIEW_LENGTH] + "..."


def log_llm_request(
    model: str,
    task: str,
    prompt: str,
    temperature: float,
    max_tokens: int
) -> str:
    """
    Log an outgoing generation request.

    Returns:
        Call id used to correlate the matching response log line
    """
    call_id = uuid.uuid4().hex[:12]
    get_app_logger("llm").info(
        f"[LLM_REQUEST] call_id={call_id} | task={task} | model={model} | "
        f"temperature={temperature} | max_tokens={max_tokens} | "
        f"prompt_chars={len(prompt)} | prompt={_preview(prompt)}"
    )
    return call_id


def log_llm_response(
    call_id: str,
    model: str,
    response: str,
    latency_ms: float,
    status: str,
    error_message: Optional[str] = None
) -> None:
    """Log the outcome of a generation request."""
    logger = get_app_logger("llm")
    if status == "success":
        logger.info(
            f"[LLM_RESPONSE] call_id={call_id} | model={model} | status={status} | "
            f"latency_ms={latency_ms:.1f} | response_chars={len(response)} | "
            f"response={_preview(response)}"
        )
    else:
        logger.error(
            f"[LLM_RESPONSE] call_id={call_id} | model={model} | status={status} | "
            f"latency_ms={latency_ms:.1f} | error={error_message}"
        )
