"""
Extractive summarization by term-frequency sentence scoring.

Pipeline:
1. Split the document into sentences (punctuation heuristics with an
   abbreviation list)
2. Score each sentence by the document-level weight of the terms it contains
3. Keep the top-K sentences and restore their reading order

The document is the only corpus entry, so IDF is the same constant for every
term and the ranking reduces to summed term frequencies.

Pure and synchronous; safe to call from concurrent requests.
"""
import re
from dataclasses import dataclass
from typing import List

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from core.validators import validate_sentence_count
from .config import SUMMARIZATION_DEFAULT_SENTENCES

# Words that end with "." without ending a sentence (compared lowercase, final dot stripped)
ABBREVIATIONS = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "rev", "gen", "col",
    "capt", "lt", "sgt", "gov", "sen", "rep", "hon",
    "e.g", "i.e", "etc", "vs", "cf", "al", "approx", "ca", "viz",
    "inc", "ltd", "co", "corp", "bros", "dept", "est", "fig", "vol",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct",
    "nov", "dec", "u.s", "u.k", "a.m", "p.m",
})

# Terminal punctuation, optional closing quotes/brackets, then whitespace
_BOUNDARY = re.compile(r"[.!?]+[\"'’”)\]]*\s+")
_OPENERS = "\"'‘“(["
_LAST_WORD = re.compile(r"(\S+)$")


@dataclass(frozen=True)
class Sentence:
    """A sentence of the document and its 0-based position."""
    index: int
    text: str


@dataclass(frozen=True)
class ScoredSentence:
    sentence: Sentence
    score: float

    @property
    def index(self) -> int:
        return self.sentence.index


def _starts_sentence(text: str, pos: int) -> bool:
    """Whether the text at pos (after optional openers) begins with an uppercase letter."""
    while pos < len(text) and text[pos] in _OPENERS:
        pos += 1
    return pos < len(text) and text[pos].isupper()


def _ends_with_abbreviation(chunk: str) -> bool:
    match = _LAST_WORD.search(chunk)
    if not match:
        return False
    word = match.group(1).lstrip(_OPENERS).rstrip(".").lower()
    return word in ABBREVIATIONS


def segment_sentences(text: str) -> List[Sentence]:
    """
    Split text into sentences in reading order.

    A boundary is terminal punctuation followed by whitespace and a capital
    letter, except after a known abbreviation. Text without a boundary is a
    single sentence; blank text yields no sentences.
    """
    sentences: List[Sentence] = []
    start = 0

    for match in _BOUNDARY.finditer(text):
        if not _starts_sentence(text, match.end()):
            continue
        if text[match.start()] == "." and _ends_with_abbreviation(text[start:match.start()]):
            continue
        punct_end = match.start() + len(match.group().rstrip())
        piece = text[start:punct_end].strip()
        if piece:
            sentences.append(Sentence(index=len(sentences), text=piece))
        start = match.end()

    tail = text[start:].strip()
    if tail:
        sentences.append(Sentence(index=len(sentences), text=tail))
    return sentences


def _build_vectorizer() -> TfidfVectorizer:
    # norm=None keeps raw term weights; smooth_idf over one document gives idf == 1
    return TfidfVectorizer(lowercase=True, stop_words="english", norm=None, smooth_idf=True)


def score_sentences(sentences: List[Sentence]) -> List[ScoredSentence]:
    """
    Score sentences against the term weights of the whole document.

    A sentence's score is the sum, over each term occurrence in it, of that
    term's weight in the document. Sentences with no weighted terms score 0.
    """
    if not sentences:
        return []

    texts = [s.text for s in sentences]
    vectorizer = _build_vectorizer()
    analyzer = vectorizer.build_analyzer()

    if not any(analyzer(t) for t in texts):
        scores = np.zeros(len(sentences))
    else:
        document_vector = vectorizer.fit_transform([" ".join(texts)])
        sentence_counts = vectorizer.transform(texts)
        scores = (sentence_counts @ document_vector.T).toarray().ravel()

    return [
        ScoredSentence(sentence=sentence, score=float(score))
        for sentence, score in zip(sentences, scores)
    ]


def select_top_sentences(scored: List[ScoredSentence], num_sentences: int) -> List[Sentence]:
    """
    Pick the num_sentences best-scoring sentences, returned in reading order.

    Equal scores prefer the earlier sentence.

    Raises:
        InvalidArgumentError: If num_sentences is not a positive integer
    """
    validate_sentence_count(num_sentences)
    ranked = sorted(scored, key=lambda s: (-s.score, s.index))
    selected = sorted(ranked[:num_sentences], key=lambda s: s.index)
    return [s.sentence for s in selected]


def summarize(text: str, num_sentences: int = SUMMARIZATION_DEFAULT_SENTENCES) -> str:
    """
    Extractive summary of text.

    Args:
        text: Document to summarize (may be empty)
        num_sentences: Maximum sentences in the summary, >= 1

    Returns:
        The text unchanged when it has at most num_sentences sentences,
        otherwise the selected sentences joined by single spaces

    Raises:
        InvalidArgumentError: If num_sentences is not a positive integer
    """
    validate_sentence_count(num_sentences)

    sentences = segment_sentences(text)
    if len(sentences) <= num_sentences:
        return text

    selected = select_top_sentences(score_sentences(sentences), num_sentences)
    return " ".join(s.text for s in selected)
