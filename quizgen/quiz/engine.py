"""
Quiz assembly for a learning module.

generate_quiz_questions() is a stateless transform from module metadata to an
ordered question list:

    base questions + category questions + keyword MCQs + fill-in-the-blanks
        -> drop repeated question texts (first one wins)
        -> truncate to the target count (never more than MAX_QUESTIONS)

The list may come out shorter than the target when there are not enough
distinct questions; it is never padded.
"""

from __future__ import annotations

import math
import random

from loguru import logger

from .content_generator import content_questions
from .models import QuizQuestion
from .question_bank import base_questions, category_questions, extract_main_topic, normalize_category
from .text_analyzer import count_words

MAX_QUESTIONS = 20

# (minimum word count, target question count), highest first
TARGET_COUNT_BANDS: tuple[tuple[int, int], ...] = (
    (600, 20),
    (350, 15),
    (180, 12),
    (80, 10),
    (0, 8),
)

PERFORMANCE_BANDS: tuple[tuple[int, str], ...] = (
    (90, "Outstanding! You've mastered this material! 🏆"),
    (80, "Excellent! You have a strong understanding! ⭐"),
    (70, "Good job! You grasped the key concepts! 👍"),
    (60, "Nice effort! Review the material again to improve! 📚"),
)
FALLBACK_PERFORMANCE_MESSAGE = "Keep learning! Review the material and try again! 💪"


def compute_target_question_count(word_count: int) -> int:
    """How many questions a module of ``word_count`` words should get."""
    for min_words, target in TARGET_COUNT_BANDS:
        if word_count >= min_words:
            return target
    return TARGET_COUNT_BANDS[-1][1]


def _module_content(module_title: str | None, module_description: str | None) -> str:
    return f"{module_title or ''}\n{module_description or ''}"


def module_target_question_count(module_title: str | None, module_description: str | None) -> int:
    """Target question count for a module's title and description."""
    return compute_target_question_count(count_words(_module_content(module_title, module_description)))


def _dedupe(questions: list[QuizQuestion]) -> list[QuizQuestion]:
    seen: set[str] = set()
    unique = []
    for question in questions:
        key = question.dedup_key
        if key in seen:
            logger.debug(f"Dropping duplicate question {question.id}: {question.question!r}")
            continue
        seen.add(key)
        unique.append(question)
    return unique


def generate_quiz_questions(
    module_title: str,
    module_description: str,
    category: str,
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    """
    Build the quiz for one learning module.

    Args:
        module_title: Module title (also part of the analyzed text)
        module_description: Free-text module description
        category: Category label, e.g. "business-plan" or "Business Planning"
        rng: Random source for option shuffling (seed it for repeatable output)

    Returns:
        Ordered questions, at most min(target count, MAX_QUESTIONS)
    """
    title = module_title or ""
    content = _module_content(title, module_description)

    target = module_target_question_count(title, module_description)
    limit = min(target, MAX_QUESTIONS)

    topic = extract_main_topic(title)
    module_category = normalize_category(category)

    assembled = [
        *base_questions(topic),
        *category_questions(module_category, topic),
        *content_questions(content, rng),
    ]
    questions = _dedupe(assembled)[:limit]

    logger.debug(
        f"Generated {len(questions)} questions for {topic!r} "
        f"(category={module_category.value}, target={target}, candidates={len(assembled)})"
    )
    return questions


def calculate_score_percentage(score: int, total_questions: int) -> int:
    """Score as a whole percentage, rounded half up. 0 when there are no questions."""
    if total_questions <= 0:
        return 0
    return math.floor(score / total_questions * 100 + 0.5)


def get_performance_message(score: int, total_questions: int) -> str:
    """Encouragement line for a finished quiz, banded by percentage."""
    percentage = calculate_score_percentage(score, total_questions)
    for threshold, message in PERFORMANCE_BANDS:
        if percentage >= threshold:
            return message
    return FALLBACK_PERFORMANCE_MESSAGE
