"""
Quiz router.

Endpoints for:
- Quiz generation for a learning module
- Score percentage and performance message
- Checking a single answer
"""
from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from loguru import logger
from pydantic import BaseModel, Field

from quizgen.config import get_settings
from quizgen.quiz import (
    QuizQuestion,
    calculate_score_percentage,
    check_answer,
    dump_questions,
    generate_quiz_questions,
    get_performance_message,
    module_target_question_count,
)

router = APIRouter()


# ========================================
# Request/Response Models
# ========================================


class GenerateRequest(BaseModel):
    """Request model for generating a module quiz."""

    title: str = Field("", description="Module title")
    description: str = Field("", description="Module description")
    category: str = Field("", description="Module category, e.g. business-plan")
    seed: Optional[int] = Field(None, description="Seed for option shuffling")


class GenerateResponse(BaseModel):
    """Response model for a generated quiz."""

    targetCount: int
    questions: List[Dict[str, Any]]


class ScoreResponse(BaseModel):
    """Response model for a scored quiz."""

    percentage: int
    message: str
    passed: bool


class CheckRequest(BaseModel):
    """Request model for checking one answer."""

    question: QuizQuestion
    answer: Any = None


class CheckResponse(BaseModel):
    """Response model for a checked answer."""

    correct: bool
    feedback: str
    userAnswer: str
    correctAnswer: str
    explanation: Optional[str] = None


# ========================================
# Endpoints
# ========================================


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Generate module quiz",
)
def generate_quiz(request: GenerateRequest) -> GenerateResponse:
    """
    Generate the quiz for a learning module.

    Questions come back in camelCase, in display order: self-assessment
    questions, category questions, then questions drawn from the text.
    """
    seed = request.seed if request.seed is not None else get_settings().random_seed
    questions = generate_quiz_questions(
        request.title,
        request.description,
        request.category,
        rng=random.Random(seed),
    )
    target = module_target_question_count(request.title, request.description)
    logger.info(f"Generated {len(questions)} questions for {request.title!r}")

    return GenerateResponse(targetCount=target, questions=dump_questions(questions))


@router.get(
    "/score",
    response_model=ScoreResponse,
    summary="Score a finished quiz",
)
def score_quiz(
    score: int = Query(..., ge=0, description="Correct answers"),
    total: int = Query(..., gt=0, description="Total questions"),
    pass_mark: Optional[int] = Query(None, ge=0, le=100, description="Pass percentage"),
) -> ScoreResponse:
    """Percentage, performance message and pass/fail for a score."""
    if score > total:
        raise HTTPException(status_code=400, detail="score cannot exceed total")

    if pass_mark is None:
        pass_mark = get_settings().pass_percentage

    percentage = calculate_score_percentage(score, total)
    return ScoreResponse(
        percentage=percentage,
        message=get_performance_message(score, total),
        passed=percentage >= pass_mark,
    )


@router.post(
    "/check",
    response_model=CheckResponse,
    summary="Check one answer",
)
def check(request: CheckRequest) -> CheckResponse:
    """Grade an answer against a question previously returned by /generate."""
    result = check_answer(request.question, request.answer)
    return CheckResponse(
        correct=result.correct,
        feedback=result.feedback,
        userAnswer=result.user_answer,
        correctAnswer=result.correct_answer,
        explanation=result.explanation,
    )
