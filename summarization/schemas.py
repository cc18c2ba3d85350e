"""
Pydantic schemas for the summarization API.
"""
from pydantic import BaseModel, Field
from typing import Optional, Literal, Dict, Any

from .config import SUMMARIZATION_DEFAULT_METHOD, SUMMARIZATION_DEFAULT_SENTENCES

# Summarization methods
SummaryMethod = Literal["auto", "gemini", "tfidf"]


class SummarizeRequest(BaseModel):
    """Request to summarize a block of text."""
    request_id: Optional[str] = Field(None, description="Request ID (generated if not provided)")
    text: str = Field(..., description="Text to summarize")
    method: SummaryMethod = Field(SUMMARIZATION_DEFAULT_METHOD, description="auto, gemini or tfidf")
    num_sentences: int = Field(
        SUMMARIZATION_DEFAULT_SENTENCES,
        description="Sentences kept by the local summarizer"
    )


class SummarizeResponse(BaseModel):
    """Summary and the method that produced it."""
    request_id: str = Field(..., description="Unique request identifier")
    summary: str = Field(..., description="Generated summary")
    method: Literal["gemini", "tfidf"] = Field(..., description="Method actually used")
    note: Optional[str] = Field(None, description="Set when the request fell back to the local summarizer")


class HealthResponse(BaseModel):
    status: str
    gemini_available: bool
    environment: str
    python_version: str
    backend: Optional[Dict[str, Any]] = None
    system: Dict[str, Any]
