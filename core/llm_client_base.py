"""
Base LLM Client

Gemini generation client shared by the summarization module.
The application builds one instance from configuration at startup and
injects it into the request handlers.

Features:
- Gemini generateContent API over a pooled aiohttp session
- Context-length guardrail before any network call
- Request/response logging
- Failures reported as GenerationResult values, never raised

Usage:
    from core.llm_client_base import GeminiClient, LLMConfig

    config = LLMConfig(api_key="...", model="gemini-2.0-flash", task_name="summarize")

    client = GeminiClient(config)
    result = await client.generate_text_with_logging(prompt)
    if result.ok:
        print(result.text)
"""

import time
import asyncio
import aiohttp
from dataclasses import dataclass
from typing import Optional, Dict, Any

from config import (
    GEMINI_API_KEY_PLACEHOLDER,
    estimate_tokens,
    get_model_context_length,
)
from logs.logging_config import (
    get_app_logger,
    log_llm_request,
    log_llm_response,
)
from .validators import InvalidArgumentError, validate_token_count

logger = get_app_logger("llm")


@dataclass
class LLMConfig:
    """
    Configuration for a Gemini client instance.

    Example:
        config = LLMConfig(
            api_key=os.environ["GEMINI_API_KEY"],
            model="gemini-2.0-flash",
            task_name="summarize"
        )
    """
    api_key: str = ""
    base_url: str = "https://generativelanguage.googleapis.com"

    # Model settings
    model: str = "gemini-2.0-flash"
    temperature: float = 0.3
    max_tokens: int = 1024

    # Share of the model context a prompt may use
    max_token_percent: int = 80

    # Connection settings
    timeout: int = 60
    pool_limit: int = 20

    # Logging identifier
    task_name: str = "summarize"

    def is_configured(self) -> bool:
        """True when an API key other than the .env.example placeholder is set."""
        return bool(self.api_key) and self.api_key != GEMINI_API_KEY_PLACEHOLDER

    def get_endpoint_url(self, model: Optional[str] = None) -> str:
        return f"{self.base_url.rstrip('/')}/v1beta/models/{model or self.model}:generateContent"

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary with the API key masked."""
        return {
            "api_key": "***" if self.api_key else "",
            "base_url": self.base_url,
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "max_token_percent": self.max_token_percent,
            "timeout": self.timeout,
            "pool_limit": self.pool_limit,
            "task_name": self.task_name,
        }


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a generation call: either text or an error message."""
    text: Optional[str] = None
    error: Optional[str] = None
    model: Optional[str] = None
    latency_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None

    @classmethod
    def success(cls, text: str, model: str, latency_ms: float = 0.0) -> "GenerationResult":
        return cls(text=text, model=model, latency_ms=latency_ms)

    @classmethod
    def failure(cls, error: str, model: Optional[str] = None, latency_ms: float = 0.0) -> "GenerationResult":
        return cls(error=error, model=model, latency_ms=latency_ms)


class GeminiClient:
    """
    Gemini client with a per-instance connection pool.

    generate_text_with_logging() always returns a GenerationResult; callers
    branch on result.ok instead of catching transport exceptions.
    """

    def __init__(self, config: LLMConfig):
        """
        Initialize client.

        Args:
            config: LLMConfig with API key, model, and connection settings
        """
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

        logger.debug(
            f"[{config.task_name.upper()}_LLM] Initialized | "
            f"model={config.model} | url={config.get_endpoint_url()}"
        )

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session for this instance."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            connector = aiohttp.TCPConnector(
                limit=self.config.pool_limit,
                limit_per_host=self.config.pool_limit
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector,
                headers={"x-goog-api-key": self.config.api_key}
            )
            logger.debug(f"[{self.config.task_name.upper()}_LLM] Session created")
        return self._session

    async def close(self):
        """Close this instance's session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
            logger.debug(f"[{self.config.task_name.upper()}_LLM] Session closed")

    def check_context(self, prompt: str, model: Optional[str] = None) -> Optional[str]:
        """
        Check the prompt against the model's context share.

        Returns:
            None if the prompt fits, otherwise an error message
        """
        model_name = model or self.config.model
        max_tokens = int(get_model_context_length(model_name) * (self.config.max_token_percent / 100))
        try:
            validate_token_count(estimate_tokens(prompt), max_tokens, module_name="Gemini")
        except InvalidArgumentError as e:
            logger.warning(f"[GUARDRAIL] Token limit exceeded | model={model_name} | {e}")
            return str(e)
        return None

    async def generate_text_with_logging(
        self,
        prompt: str,
        model: str = None,
        temperature: float = None,
        max_tokens: int = None,
    ) -> GenerationResult:
        """
        Generate text with Gemini and log the call.

        Args:
            prompt: The prompt to send
            model: Override model (uses config.model if not specified)
            temperature: Override temperature
            max_tokens: Override maximum output tokens

        Returns:
            GenerationResult with text on success or error on failure
        """
        model_name = model or self.config.model
        temp = temperature if temperature is not None else self.config.temperature
        max_tok = max_tokens if max_tokens is not None else self.config.max_tokens

        context_error = self.check_context(prompt, model_name)
        if context_error:
            return GenerationResult.failure(context_error, model=model_name)

        call_id = log_llm_request(
            model=model_name,
            task=self.config.task_name,
            prompt=prompt,
            temperature=temp,
            max_tokens=max_tok
        )

        start_time = time.time()
        text, error = await self._call_gemini(prompt, model_name, temp, max_tok)
        latency_ms = (time.time() - start_time) * 1000

        if error is not None:
            log_llm_response(
                call_id=call_id,
                model=model_name,
                response="",
                latency_ms=latency_ms,
                status="error",
                error_message=error
            )
            return GenerationResult.failure(error, model=model_name, latency_ms=latency_ms)

        log_llm_response(
            call_id=call_id,
            model=model_name,
            response=text,
            latency_ms=latency_ms,
            status="success"
        )
        return GenerationResult.success(text, model=model_name, latency_ms=latency_ms)

    async def _call_gemini(
        self,
        prompt: str,
        model: str,
        temperature: float,
        max_tokens: int
    ) -> tuple:
        """
        Call the Gemini generateContent endpoint.

        Returns:
            (text, None) on success, (None, error message) on failure
        """
        url = self.config.get_endpoint_url(model)
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_tokens
            }
        }

        logger.debug(f"[{self.config.task_name.upper()}_LLM] Calling Gemini | model={model}")

        try:
            session = await self.get_session()
            async with session.post(url, json=payload) as r:
                r.raise_for_status()
                response_data = await r.json()
        except asyncio.TimeoutError:
            logger.error(f"[{self.config.task_name.upper()}_LLM] Gemini timeout | model={model}")
            return None, "Gemini request timed out"
        except aiohttp.ClientError as e:
            logger.error(
                f"[{self.config.task_name.upper()}_LLM] Gemini request failed | "
                f"model={model} | error={e}"
            )
            return None, f"Gemini request failed: {e}"
        except ValueError as e:
            logger.error(
                f"[{self.config.task_name.upper()}_LLM] Gemini returned malformed response | "
                f"model={model} | error={e}"
            )
            return None, f"Gemini returned malformed response: {e}"

        text = extract_response_text(response_data)
        if not text:
            return None, "Gemini returned no text"
        return text, None

    def get_backend_info(self) -> Dict[str, Any]:
        """Information about this client's configuration, key masked."""
        info = self.config.to_dict()
        info["backend"] = "gemini"
        info["active_url"] = self.config.get_endpoint_url()
        return info


def extract_response_text(response_data: Any) -> str:
    """
    Pull the generated text out of a generateContent response.

    Concatenates candidates[0].content.parts[*].text; returns "" when the
    response has no usable candidate.
    """
    if not isinstance(response_data, dict):
        return ""
    candidates = response_data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts")
    if not isinstance(parts, list):
        return ""
    return "".join(
        part["text"] for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ).strip()


def build_llm_client(config: Optional[LLMConfig]) -> Optional[GeminiClient]:
    """Create a client, or None when no usable API key is configured."""
    if config is None or not config.is_configured():
        logger.info("[LLM] Gemini API key not found or invalid, generative summaries disabled")
        return None
    logger.info(f"[LLM] Gemini client initialized | model={config.model}")
    return GeminiClient(config)
