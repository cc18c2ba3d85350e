"""
Summarization Configuration

Module-specific settings for text summarization.
"""
import os

from config import GEMINI_API_KEY, GEMINI_BASE_URL, GEMINI_MODEL

# =========================
# Gemini Settings
# =========================

SUMMARIZATION_API_KEY = os.getenv("SUMMARIZATION_API_KEY", GEMINI_API_KEY)
SUMMARIZATION_BASE_URL = os.getenv("SUMMARIZATION_BASE_URL", GEMINI_BASE_URL)
SUMMARIZATION_DEFAULT_MODEL = os.getenv("SUMMARIZATION_DEFAULT_MODEL", GEMINI_MODEL)

# =========================
# Method Settings
# =========================

SUMMARIZATION_DEFAULT_METHOD = os.getenv("SUMMARIZATION_DEFAULT_METHOD", "auto")
SUMMARIZATION_SUPPORTED_METHODS = ["auto", "gemini", "tfidf"]

# =========================
# Extractive Settings
# =========================

# Sentences kept by the local summarizer
SUMMARIZATION_DEFAULT_SENTENCES = int(os.getenv("SUMMARIZATION_DEFAULT_SENTENCES", "3"))

# =========================
# LLM Settings for Summarization
# =========================

SUMMARIZATION_TEMPERATURE = float(os.getenv("SUMMARIZATION_TEMPERATURE", "0.3"))
SUMMARIZATION_MAX_TOKENS = int(os.getenv("SUMMARIZATION_MAX_TOKENS", "1024"))

# =========================
# Connection Settings
# =========================

SUMMARIZATION_CONNECTION_TIMEOUT = int(os.getenv("SUMMARIZATION_CONNECTION_TIMEOUT", "60"))
SUMMARIZATION_CONNECTION_POOL_LIMIT = int(os.getenv("SUMMARIZATION_CONNECTION_POOL_LIMIT", "20"))

# =========================
# Token Limits
# =========================

# Maximum tokens allowed for the prompt (percentage of model context)
SUMMARIZATION_MAX_TOKEN_PERCENT = int(os.getenv("SUMMARIZATION_MAX_TOKEN_PERCENT", "80"))
