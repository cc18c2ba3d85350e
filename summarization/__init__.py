"""
Summarization Module

Summarizes text with Gemini or a local extractive summarizer:
- Sentence segmentation with an abbreviation list
- Term-frequency sentence scoring
- Top-K selection in reading order

Gemini failures fall back to the local summarizer.
"""

from .service import router, get_llm_client
from .extractive import (
    summarize,
    segment_sentences,
    score_sentences,
    select_top_sentences,
    Sentence,
    ScoredSentence,
)
from .summarizer import summarize_with_method, SummaryOutcome
from .llm_client import build_llm_config, create_summarization_client
from .schemas import (
    SummarizeRequest,
    SummarizeResponse,
    HealthResponse,
    SummaryMethod,
)

__all__ = [
    # Router
    "router",
    "get_llm_client",
    # Extractive summarizer
    "summarize",
    "segment_sentences",
    "score_sentences",
    "select_top_sentences",
    "Sentence",
    "ScoredSentence",
    # Dispatch
    "summarize_with_method",
    "SummaryOutcome",
    # Client
    "build_llm_config",
    "create_summarization_client",
    # Schemas
    "SummarizeRequest",
    "SummarizeResponse",
    "HealthResponse",
    "SummaryMethod",
]
