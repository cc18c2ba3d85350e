"""
Summarization method dispatch.

Chooses between Gemini and the local extractive summarizer:
- "gemini": Gemini when a client is configured, local summary otherwise
- "auto" / "tfidf": local summary

A failed Gemini result falls back to the local summary with a note.
"""
import time
from dataclasses import dataclass
from typing import Optional

from core import GeminiClient, GenerationResult
from core.validators import InvalidArgumentError, validate_sentence_count
from logs.logging_config import get_app_logger
from .config import SUMMARIZATION_DEFAULT_SENTENCES, SUMMARIZATION_SUPPORTED_METHODS
from .extractive import summarize
from .prompts import get_summary_prompt

logger = get_app_logger("summarization")

METHOD_GEMINI = "gemini"
METHOD_TFIDF = "tfidf"

FALLBACK_NOTE = "Fell back to alternative method due to Gemini API error"


@dataclass(frozen=True)
class SummaryOutcome:
    """Summary text plus the method that produced it."""
    summary: str
    method: str
    note: Optional[str] = None
    error: Optional[str] = None


def _local_summary(text: str, num_sentences: int, note: Optional[str] = None,
                   error: Optional[str] = None) -> SummaryOutcome:
    start_time = time.time()
    summary = summarize(text, num_sentences)
    elapsed = time.time() - start_time
    logger.info(
        f"[SUMMARIZE] method={METHOD_TFIDF} | sentences={num_sentences} | "
        f"output_chars={len(summary)} | elapsed={elapsed:.3f}s"
    )
    return SummaryOutcome(summary=summary, method=METHOD_TFIDF, note=note, error=error)


async def summarize_with_method(
    text: str,
    method: str = "auto",
    num_sentences: int = SUMMARIZATION_DEFAULT_SENTENCES,
    client: Optional[GeminiClient] = None,
) -> SummaryOutcome:
    """
    Summarize text with the requested method.

    Args:
        text: Text to summarize
        method: "auto", "gemini" or "tfidf"
        num_sentences: Sentence count for the local summarizer
        client: Gemini client, or None when Gemini is not configured

    Returns:
        SummaryOutcome with the summary and the method actually used

    Raises:
        InvalidArgumentError: Unknown method or invalid num_sentences
    """
    if method not in SUMMARIZATION_SUPPORTED_METHODS:
        raise InvalidArgumentError(
            f"Summarizer: method must be one of {', '.join(SUMMARIZATION_SUPPORTED_METHODS)}, got {method!r}."
        )
    validate_sentence_count(num_sentences)

    logger.info(f"[SUMMARIZE] START | method={method} | chars={len(text)} | gemini_available={client is not None}")

    if method != METHOD_GEMINI or client is None:
        return _local_summary(text, num_sentences)

    result: GenerationResult = await client.generate_text_with_logging(get_summary_prompt(text))

    if result.ok:
        logger.info(f"[SUMMARIZE] method={METHOD_GEMINI} | model={result.model} | latency_ms={result.latency_ms:.1f}")
        return SummaryOutcome(summary=result.text, method=METHOD_GEMINI)

    logger.warning(f"[SUMMARIZE] Gemini failed, falling back | error={result.error}")
    return _local_summary(text, num_sentences, note=FALLBACK_NOTE, error=result.error)
