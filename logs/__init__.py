"""
Logs Module

Provides:
- Logging configuration for the summarizer service
- Gemini request/response logging
- Request id tracking across a request
"""

from .logging_config import (
    setup_logging,
    get_app_logger,
    log_llm_request,
    log_llm_response,
    RequestContext,
    set_request_id,
    get_request_id,
    generate_request_id,
    LOG_DIR,
)

__all__ = [
    "setup_logging",
    "get_app_logger",
    "log_llm_request",
    "log_llm_response",
    "RequestContext",
    "set_request_id",
    "get_request_id",
    "generate_request_id",
    "LOG_DIR",
]
