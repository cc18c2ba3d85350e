import os

# Keep test runs off the network and the filesystem
os.environ["GEMINI_API_KEY"] = ""
os.environ["SUMMARIZATION_API_KEY"] = ""
os.environ["LOG_TO_FILE"] = "false"
os.environ["APP_ENV"] = "test"

import pytest

from core import GenerationResult


class FakeGeminiClient:
    """Stands in for GeminiClient; returns a preset result and records prompts."""

    def __init__(self, result: GenerationResult):
        self.result = result
        self.prompts = []
        self.closed = False

    async def generate_text_with_logging(self, prompt, model=None, temperature=None, max_tokens=None):
        self.prompts.append(prompt)
        return self.result

    async def close(self):
        self.closed = True

    def get_backend_info(self):
        return {"backend": "gemini", "model": "fake-model", "api_key": "***"}


@pytest.fixture
def ok_client():
    return FakeGeminiClient(GenerationResult.success("Gemini summary.", model="fake-model", latency_ms=12.0))


@pytest.fixture
def failing_client():
    return FakeGeminiClient(GenerationResult.failure("Gemini request timed out", model="fake-model"))


@pytest.fixture
def five_sentence_text():
    return (
        "Morning fog covers the hills. "
        "Farmers wake early. "
        "The river, the river, the river feeds every field. "
        "Children walk to school. "
        "Fishermen love the river."
    )
