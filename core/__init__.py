"""
Core Module

Shared infrastructure components:
- Gemini client and its configuration
- Validators
"""

from .llm_client_base import (
    GeminiClient,
    LLMConfig,
    GenerationResult,
    build_llm_client,
    extract_response_text,
)
from .validators import (
    InvalidArgumentError,
    validate_sentence_count,
    validate_token_count,
    validate_required_field,
)

__all__ = [
    "GeminiClient",
    "LLMConfig",
    "GenerationResult",
    "build_llm_client",
    "extract_response_text",
    "InvalidArgumentError",
    "validate_sentence_count",
    "validate_token_count",
    "validate_required_field",
]
