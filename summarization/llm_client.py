"""
Summarization LLM Client

Builds the Gemini client configuration for the summarization service.
The client itself is created by the application at startup.
"""

from typing import Optional

from core import GeminiClient, LLMConfig, build_llm_client
from .config import (
    SUMMARIZATION_API_KEY,
    SUMMARIZATION_BASE_URL,
    SUMMARIZATION_DEFAULT_MODEL,
    SUMMARIZATION_TEMPERATURE,
    SUMMARIZATION_MAX_TOKENS,
    SUMMARIZATION_MAX_TOKEN_PERCENT,
    SUMMARIZATION_CONNECTION_TIMEOUT,
    SUMMARIZATION_CONNECTION_POOL_LIMIT,
)


def build_llm_config(api_key: Optional[str] = None) -> LLMConfig:
    """
    Create the summarization LLMConfig from environment settings.

    Args:
        api_key: Override the configured Gemini API key
    """
    return LLMConfig(
        api_key=SUMMARIZATION_API_KEY if api_key is None else api_key,
        base_url=SUMMARIZATION_BASE_URL,
        model=SUMMARIZATION_DEFAULT_MODEL,
        temperature=SUMMARIZATION_TEMPERATURE,
        max_tokens=SUMMARIZATION_MAX_TOKENS,
        max_token_percent=SUMMARIZATION_MAX_TOKEN_PERCENT,
        timeout=SUMMARIZATION_CONNECTION_TIMEOUT,
        pool_limit=SUMMARIZATION_CONNECTION_POOL_LIMIT,
        task_name="summarize"
    )


def create_summarization_client(config: Optional[LLMConfig] = None) -> Optional[GeminiClient]:
    """Create the summarization client, or None if Gemini is not configured."""
    return build_llm_client(config or build_llm_config())
