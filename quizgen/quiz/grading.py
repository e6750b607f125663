"""
Answer checking for generated questions.

Expected answer shapes per question type:
- multiple_choice: option index (int)
- match_pairs: {term: definition}
- order_steps: [step, ...] in the learner's order
- categorize: {item label: category}
- fill_blank: the chosen word (str)

A wrong-shaped answer is graded incorrect, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from .models import (
    CategorizeQuestion,
    FillBlankQuestion,
    MatchPairsQuestion,
    MultipleChoiceQuestion,
    OrderStepsQuestion,
    QuizQuestion,
)


@dataclass
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    feedback: str
    user_answer: str
    correct_answer: str
    explanation: str | None = None


def is_response_complete(question: QuizQuestion, answer: Any) -> bool:
    """True once the learner has answered every part of the question."""
    if answer is None:
        return False

    if isinstance(question, MultipleChoiceQuestion):
        return isinstance(answer, int) and not isinstance(answer, bool)
    if isinstance(question, MatchPairsQuestion):
        return isinstance(answer, dict) and all(answer.get(p.term) for p in question.pairs)
    if isinstance(question, OrderStepsQuestion):
        return isinstance(answer, (list, tuple)) and len(answer) == len(question.steps)
    if isinstance(question, CategorizeQuestion):
        return isinstance(answer, dict) and all(answer.get(i.label) for i in question.items)
    if isinstance(question, FillBlankQuestion):
        return isinstance(answer, str) and bool(answer)
    return False


def _expected(question: QuizQuestion) -> str:
    if isinstance(question, MultipleChoiceQuestion):
        return question.correct_option
    if isinstance(question, MatchPairsQuestion):
        return "; ".join(f"{p.term} -> {p.definition}" for p in question.pairs)
    if isinstance(question, OrderStepsQuestion):
        return " > ".join(question.steps)
    if isinstance(question, CategorizeQuestion):
        return "; ".join(f"{i.label} -> {i.category}" for i in question.items)
    if isinstance(question, FillBlankQuestion):
        return question.correct_word
    return ""


def _describe(question: QuizQuestion, answer: Any) -> str:
    if isinstance(question, MultipleChoiceQuestion) and isinstance(answer, int):
        if 0 <= answer < len(question.options):
            return question.options[answer]
    if isinstance(answer, dict):
        return "; ".join(f"{k} -> {v}" for k, v in answer.items())
    if isinstance(answer, (list, tuple)):
        return " > ".join(str(a) for a in answer)
    return "" if answer is None else str(answer)


def _is_correct(question: QuizQuestion, answer: Any) -> bool:
    if isinstance(question, MultipleChoiceQuestion):
        return answer == question.correct_answer
    if isinstance(question, MatchPairsQuestion):
        return all(answer.get(p.term) == p.definition for p in question.pairs)
    if isinstance(question, OrderStepsQuestion):
        return list(answer) == question.steps
    if isinstance(question, CategorizeQuestion):
        return all(answer.get(i.label) == i.category for i in question.items)
    if isinstance(question, FillBlankQuestion):
        return answer == question.correct_word
    return False


def check_answer(question: QuizQuestion, answer: Any) -> AnswerResult:
    """Grade ``answer`` against ``question``."""
    expected = _expected(question)
    user_answer = _describe(question, answer)

    if not is_response_complete(question, answer):
        logger.warning(f"Incomplete or malformed answer for {question.type} question {question.id}")
        return AnswerResult(
            correct=False,
            feedback="Incomplete answer.",
            user_answer=user_answer,
            correct_answer=expected,
            explanation=question.explanation,
        )

    correct = _is_correct(question, answer)
    return AnswerResult(
        correct=correct,
        feedback="Correct!" if correct else f"Incorrect. Answer: {expected}",
        user_answer=user_answer,
        correct_answer=expected,
        explanation=question.explanation,
    )
