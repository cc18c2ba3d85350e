import asyncio

import pytest

from core.validators import InvalidArgumentError
from summarization.extractive import summarize
from summarization.summarizer import FALLBACK_NOTE, summarize_with_method
from tests.test_llm_client import FakeResponse, FakeSession, make_client


def run(coro):
    return asyncio.run(coro)


def test_tfidf_method_uses_local_summary(five_sentence_text, ok_client):
    outcome = run(summarize_with_method(five_sentence_text, "tfidf", 2, client=ok_client))
    assert outcome.method == "tfidf"
    assert outcome.summary == summarize(five_sentence_text, 2)
    assert outcome.note is None
    assert ok_client.prompts == []


def test_auto_method_uses_local_summary(five_sentence_text, ok_client):
    outcome = run(summarize_with_method(five_sentence_text, "auto", 2, client=ok_client))
    assert outcome.method == "tfidf"
    assert ok_client.prompts == []


def test_gemini_method(five_sentence_text, ok_client):
    outcome = run(summarize_with_method(five_sentence_text, "gemini", client=ok_client))
    assert outcome.method == "gemini"
    assert outcome.summary == "Gemini summary."
    assert ok_client.prompts == [
        "Please provide a concise summary of the following text:\n\n" + five_sentence_text
    ]


def test_gemini_without_client_uses_local_summary(five_sentence_text):
    outcome = run(summarize_with_method(five_sentence_text, "gemini", 2, client=None))
    assert outcome.method == "tfidf"
    assert outcome.note is None


def test_gemini_failure_falls_back(five_sentence_text, failing_client):
    outcome = run(summarize_with_method(five_sentence_text, "gemini", 2, client=failing_client))
    assert outcome.method == "tfidf"
    assert outcome.summary == summarize(five_sentence_text, 2)
    assert outcome.note == FALLBACK_NOTE
    assert outcome.error == "Gemini request timed out"
    assert len(failing_client.prompts) == 1


def test_unknown_method_rejected(ok_client):
    with pytest.raises(InvalidArgumentError, match="method must be one of"):
        run(summarize_with_method("Some text.", "bert", client=ok_client))


def test_invalid_sentence_count_rejected_before_gemini(ok_client):
    with pytest.raises(InvalidArgumentError):
        run(summarize_with_method("Some text.", "gemini", 0, client=ok_client))
    assert ok_client.prompts == []


@pytest.mark.parametrize("response", [
    FakeResponse(body="{not json"),
    FakeResponse({"candidates": [None]}),
])
def test_malformed_gemini_reply_falls_back(five_sentence_text, response):
    client = make_client(FakeSession(response=response))

    outcome = run(summarize_with_method(five_sentence_text, "gemini", 2, client=client))

    assert outcome.method == "tfidf"
    assert outcome.summary == summarize(five_sentence_text, 2)
    assert outcome.note == FALLBACK_NOTE
    assert outcome.error
