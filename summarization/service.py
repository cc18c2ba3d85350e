"""
FastAPI router for text summarization endpoints.

Endpoints:
1. POST /api/summarize - summarize text with Gemini or the local summarizer
2. GET /api/health - service and Gemini availability
"""
import sys
import time
import uuid
import platform
import traceback
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from config import APP_ENV, is_development
from core import GeminiClient
from core.validators import InvalidArgumentError, validate_required_field
from logs.logging_config import get_app_logger, RequestContext
from .config import SUMMARIZATION_DEFAULT_METHOD
from .schemas import SummarizeRequest, SummarizeResponse, HealthResponse
from .summarizer import summarize_with_method

logger = get_app_logger("service")

REQUEST_EXAMPLE = {
    "text": "Your text to summarize",
    "method": SUMMARIZATION_DEFAULT_METHOD
}

router = APIRouter(prefix="/api", tags=["Summarization"])


def get_llm_client(request: Request) -> Optional[GeminiClient]:
    """Gemini client created at startup, or None when Gemini is not configured."""
    return getattr(request.app.state, "llm_client", None)


# =====================
# API Endpoints
# =====================

@router.post("/summarize", response_model=SummarizeResponse, response_model_exclude_none=True)
async def summarize_endpoint(
    request: SummarizeRequest,
    client: Optional[GeminiClient] = Depends(get_llm_client)
):
    """
    Summarize text.

    **Request Body:**
    - `request_id`: Request ID for tracking (generated if not provided)
    - `text`: Text to summarize (required)
    - `method`: `auto`, `gemini` or `tfidf` (default: `auto`)
    - `num_sentences`: Sentences kept by the local summarizer (default: 3)

    **Returns:**
    - `summary`: Generated summary
    - `method`: `gemini` or `tfidf`
    - `note`: Present when Gemini failed and the local summarizer was used
    """
    request_id = request.request_id or str(uuid.uuid4())

    with RequestContext(request_id):
        logger.info(
            f"[SUMMARIZE_TEXT] START | request_id={request_id} | chars={len(request.text)} | "
            f"method={request.method} | num_sentences={request.num_sentences}"
        )

        try:
            validate_required_field(request.text, "text", module_name="Summarizer")
            outcome = await summarize_with_method(
                text=request.text,
                method=request.method,
                num_sentences=request.num_sentences,
                client=client
            )

            if outcome.error:
                logger.warning(f"[SUMMARIZE_TEXT] FALLBACK | request_id={request_id} | gemini_error={outcome.error}")
            logger.info(f"[SUMMARIZE_TEXT] END | method={outcome.method} | output_chars={len(outcome.summary)}")

            return SummarizeResponse(
                request_id=request_id,
                summary=outcome.summary,
                method=outcome.method,
                note=outcome.note
            )

        except InvalidArgumentError as e:
            logger.warning(f"[SUMMARIZE_TEXT] INVALID | request_id={request_id} | error={str(e)}")
            raise HTTPException(
                status_code=400,
                detail={
                    "error": "Invalid request",
                    "details": str(e),
                    "example": REQUEST_EXAMPLE
                }
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"[SUMMARIZE_TEXT] ERROR | request_id={request_id} | error={str(e)}")
            detail = {
                "error": "Failed to generate summary",
                "details": str(e)
            }
            if is_development():
                detail["stack"] = traceback.format_exc()
            raise HTTPException(status_code=500, detail=detail)


@router.get("/health", response_model=HealthResponse)
async def health_endpoint(
    request: Request,
    client: Optional[GeminiClient] = Depends(get_llm_client)
):
    """
    Report service status and whether Gemini summaries are available.
    """
    started_at = getattr(request.app.state, "started_at", time.time())

    response = HealthResponse(
        status="ok",
        gemini_available=client is not None,
        environment=APP_ENV,
        python_version=sys.version.split()[0],
        backend=client.get_backend_info() if client is not None else None,
        system={
            "uptime_seconds": round(time.time() - started_at, 3),
            "platform": platform.system().lower()
        }
    )
    logger.debug(f"[HEALTH] gemini_available={response.gemini_available}")
    return response
