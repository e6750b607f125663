"""
Keyword and sentence extraction for learning-module text.

Purely lexical: lowercase, strip punctuation, filter short words and stopwords,
rank by frequency. No stemming, no semantics.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

MAX_KEYWORDS = 20
MAX_SENTENCES = 50
MIN_KEYWORD_LENGTH = 4
MIN_SENTENCE_LENGTH = 40

STOPWORDS = frozenset({
    # Function words
    "a", "about", "above", "after", "again", "against", "all", "also", "although",
    "among", "an", "and", "any", "are", "around", "because", "been", "before",
    "being", "below", "between", "both", "but", "can", "cannot", "could", "does",
    "doing", "down", "during", "each", "either", "else", "even", "every", "from",
    "further", "have", "having", "here", "hers", "herself", "himself", "however",
    "into", "itself", "just", "least", "less", "like", "many", "more", "most",
    "much", "must", "neither", "next", "often", "once", "only", "other", "ours",
    "ourselves", "over", "same", "shall", "should", "since", "some", "such",
    "than", "that", "their", "theirs", "them", "themselves", "then", "there",
    "these", "they", "this", "those", "through", "under", "until", "upon", "very",
    "want", "well", "were", "what", "whatever", "when", "where", "whether",
    "which", "while", "whom", "whose", "will", "with", "within", "without",
    "would", "your", "yours", "yourself", "yourselves",
    # Course filler
    "learn", "learning", "lesson", "lessons", "module", "modules", "course",
    "courses", "chapter", "section", "material", "materials", "introduction",
    "understand", "understanding", "guide", "overview", "topic", "topics",
})

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s-]")
_ALNUM = re.compile(r"[a-z0-9]")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


@dataclass(frozen=True)
class Keyword:
    """A ranked content word."""

    word: str
    frequency: int


def _candidate_words(content: str) -> list[str]:
    cleaned = _NON_WORD_CHARS.sub("", content.lower())
    return [
        word
        for word in cleaned.split()
        if len(word) >= MIN_KEYWORD_LENGTH
        and word not in STOPWORDS
        and _ALNUM.search(word)
    ]


def rank_keywords(content: str, limit: int = MAX_KEYWORDS) -> list[Keyword]:
    """
    Rank content words by frequency.

    Ties keep first-occurrence order: Counter preserves insertion order and
    sorted() is stable.
    """
    counts = Counter(_candidate_words(content or ""))
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [Keyword(word, freq) for word, freq in ranked[:limit]]


def extract_keywords(content: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Top keywords of ``content``, most frequent first (at most ``limit``)."""
    return [kw.word for kw in rank_keywords(content, limit)]


def extract_sentences(content: str, limit: int = MAX_SENTENCES) -> list[str]:
    """
    Split ``content`` into sentences of at least 40 characters.

    Whitespace (including newlines) is collapsed first; a sentence ends at
    ``.``, ``!`` or ``?`` followed by whitespace. Source order is preserved.
    """
    collapsed = _WHITESPACE.sub(" ", content or "").strip()
    if not collapsed:
        return []

    sentences = []
    for sentence in _SENTENCE_BOUNDARY.split(collapsed):
        sentence = sentence.strip()
        if len(sentence) >= MIN_SENTENCE_LENGTH:
            sentences.append(sentence)
            if len(sentences) == limit:
                break
    return sentences


def count_words(content: str) -> int:
    """Number of whitespace-separated tokens."""
    return len((content or "").split())
