"""
Text Summarizer API

FastAPI application exposing:
- GET /             - service info and usage
- GET /api/health   - health check
- POST /api/summarize - summarize text (Gemini or local extractive)

Run:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import (
    APP_NAME,
    APP_VERSION,
    APP_HOST,
    APP_PORT,
    CORS_ALLOW_ORIGINS,
    CORS_ALLOW_CREDENTIALS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_HEADERS,
)
from core import LLMConfig, build_llm_client
from logs.logging_config import setup_logging, get_app_logger
from summarization import router as summarization_router
from summarization.llm_client import build_llm_config
from summarization.service import REQUEST_EXAMPLE

logger = get_app_logger("app")

AVAILABLE_ENDPOINTS = {
    "root": "/",
    "health": "/api/health",
    "summarize": "/api/summarize (POST)"
}


def create_app(llm_config: Optional[LLMConfig] = None) -> FastAPI:
    """
    Build the application.

    Args:
        llm_config: Gemini configuration; read from the environment if not given.
            The client is created at startup and closed at shutdown.
    """
    setup_logging()
    config = llm_config or build_llm_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.llm_client = build_llm_client(config)
        logger.info(f"[APP] Startup | gemini_available={app.state.llm_client is not None}")
        try:
            yield
        finally:
            if app.state.llm_client is not None:
                await app.state.llm_client.close()
            logger.info("[APP] Shutdown")

    app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)
    app.state.started_at = time.time()
    app.state.llm_client = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=CORS_ALLOW_CREDENTIALS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.include_router(summarization_router)

    @app.get("/")
    async def root():
        """Service info and usage."""
        return {
            "status": "ok",
            "message": f"{APP_NAME} is running",
            "endpoints": {
                "health": "/api/health",
                "summarize": "/api/summarize (POST)"
            },
            "usage": {
                "summarize": {
                    "method": "POST",
                    "url": "/api/summarize",
                    "body": {
                        "text": "Your text to summarize",
                        "method": "auto",
                        "num_sentences": 3
                    }
                }
            }
        }

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"[APP] Invalid request body | path={request.url.path} | errors={len(exc.errors())}")
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request body",
                "details": [
                    {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
                    for err in exc.errors()
                ],
                "example": REQUEST_EXAMPLE
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Not Found",
                    "path": request.url.path,
                    "method": request.method,
                    "available_endpoints": AVAILABLE_ENDPOINTS
                }
            )
        content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
