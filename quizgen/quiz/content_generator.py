"""
Content-derived questions.

Turns the keywords and sentences of a module's text into:
- keyword multiple-choice questions ("which term is mentioned?")
- fill-in-the-blank questions built from the first sentence using a keyword

Distractors are drawn from the other keywords. Option order is shuffled with
the injected ``rng`` so tests can pin it with a seeded ``random.Random``.
"""

from __future__ import annotations

import random
import re

from loguru import logger

from .models import (
    BLANK,
    NONE_OF_THE_ABOVE,
    FillBlankQuestion,
    MultipleChoiceQuestion,
    QuizQuestion,
)
from .text_analyzer import extract_keywords, extract_sentences

OPTION_COUNT = 4
KEYWORD_QUESTION_LIMIT = 8
FILL_BLANK_LIMIT = 5

KEYWORD_QUESTION = "Which term is mentioned in this learning material?"


def build_options(
    correct: str,
    pool: list[str],
    count: int = OPTION_COUNT,
    rng: random.Random | None = None,
) -> list[str]:
    """
    ``count`` shuffled options containing ``correct`` once.

    Distractors are drawn without replacement from the de-duplicated ``pool``
    (minus ``correct``); a dry pool is padded with NONE_OF_THE_ABOVE.
    """
    rng = rng or random.Random()

    remaining = [item for item in dict.fromkeys(pool) if item != correct]
    options = [correct]
    while len(options) < count and remaining:
        options.append(remaining.pop(rng.randrange(len(remaining))))
    while len(options) < count:
        options.append(NONE_OF_THE_ABOVE)

    rng.shuffle(options)
    return options


def keyword_questions(
    keywords: list[str],
    rng: random.Random | None = None,
    limit: int = KEYWORD_QUESTION_LIMIT,
) -> list[QuizQuestion]:
    """One "which term is mentioned" MCQ per leading keyword."""
    rng = rng or random.Random()
    questions: list[QuizQuestion] = []

    for index, keyword in enumerate(keywords[:limit], start=1):
        options = build_options(keyword, keywords, OPTION_COUNT, rng)
        questions.append(
            MultipleChoiceQuestion(
                id=f"kw{index}",
                question=KEYWORD_QUESTION,
                options=options,
                correct_answer=options.index(keyword),
                explanation=f'"{keyword}" appears in the material.',
            )
        )
    return questions


def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


def _blank_site(pattern: re.Pattern[str], sentences: list[str]) -> tuple[str, re.Match[str]] | None:
    """First (sentence, match) where blanking the match leaves a lone marker."""
    for sentence in sentences:
        # A sentence that already holds the marker would yield two blanks
        if BLANK in sentence:
            continue
        for match in pattern.finditer(sentence):
            # \b treats "_" as a word character; a blank touching one would merge into it
            before = sentence[match.start() - 1 : match.start()]
            after = sentence[match.end() : match.end() + 1]
            if "_" in (before, after):
                continue
            return sentence, match
    return None


def fill_blank_questions(
    keywords: list[str],
    sentences: list[str],
    rng: random.Random | None = None,
    limit: int = FILL_BLANK_LIMIT,
) -> list[QuizQuestion]:
    """
    Blank out the first whole-word occurrence of a keyword in the first
    sentence containing it. Keywords found in no sentence are skipped.
    """
    rng = rng or random.Random()
    questions: list[QuizQuestion] = []

    for keyword in keywords[:limit]:
        site = _blank_site(_keyword_pattern(keyword), sentences)
        if site is None:
            logger.debug(f"No sentence contains {keyword!r}, skipping fill-in-the-blank")
            continue

        sentence, match = site
        template = f"{sentence[:match.start()]}{BLANK}{sentence[match.end():]}"
        questions.append(
            FillBlankQuestion(
                id=f"fb{len(questions) + 1}",
                question=f"Fill in the blank: {template}",
                template=template,
                word_bank=build_options(keyword, keywords, OPTION_COUNT, rng),
                correct_word=keyword,
                explanation=f'The original sentence reads: "{sentence}"',
            )
        )
    return questions


def content_questions(content: str, rng: random.Random | None = None) -> list[QuizQuestion]:
    """Keyword MCQs followed by fill-in-the-blank questions for ``content``."""
    rng = rng or random.Random()
    keywords = extract_keywords(content)
    if not keywords:
        return []

    sentences = extract_sentences(content)
    return keyword_questions(keywords, rng) + fill_blank_questions(keywords, sentences, rng)
