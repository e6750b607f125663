"""
Quiz attempts: walking a learner through a generated quiz and recording the outcome.

QuizSession keeps the running score, answer streak and XP for one attempt.
finish() produces a QuizAttempt whose to_event() payload is what the learning
progress backend records (QUIZ_STARTED / QUIZ_PASSED / QUIZ_FAILED).
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quizgen.config import get_settings

from .engine import calculate_score_percentage, get_performance_message
from .grading import AnswerResult, check_answer
from .models import QuizQuestion

BASE_XP = 10
MAX_STREAK_BONUS = 20


class AttemptStatus(str, Enum):
    STARTED = "STARTED"
    PASSED = "PASSED"
    FAILED = "FAILED"

    @property
    def event(self) -> str:
        """Progress event name for this status."""
        return f"QUIZ_{self.value}"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class QuizAttempt(BaseModel):
    """One learner's attempt at a module quiz."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_email: str
    material_id: str
    status: AttemptStatus = AttemptStatus.STARTED
    score: int | None = None
    total_questions: int | None = None
    percentage: int | None = None
    started_at: datetime = Field(default_factory=_now)
    completed_at: datetime | None = None

    def to_event(self) -> dict[str, Any]:
        """Progress-event payload for this attempt."""
        occurred_at = self.completed_at or self.started_at
        payload: dict[str, Any] = {
            "userEmail": self.user_email,
            "materialId": self.material_id,
            "event": self.status.event,
            "occurredAt": occurred_at.isoformat(),
        }
        if self.status is not AttemptStatus.STARTED:
            payload.update(
                score=self.score,
                totalQuestions=self.total_questions,
                percentage=self.percentage,
            )
        return payload


class QuizSession:
    """
    Drives one attempt over a list of questions.

    Answers are submitted in question order; each submission grades the
    current question and advances.
    """

    def __init__(
        self,
        questions: list[QuizQuestion],
        user_email: str,
        material_id: str,
        pass_percentage: int | None = None,
    ):
        if pass_percentage is None:
            pass_percentage = get_settings().pass_percentage

        self.questions = list(questions)
        self.pass_percentage = pass_percentage
        self.attempt = QuizAttempt(user_email=user_email, material_id=material_id)
        self.results: list[AnswerResult] = []
        self.score = 0
        self.streak = 0
        self.xp = 0

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_index(self) -> int:
        return len(self.results)

    @property
    def current_question(self) -> QuizQuestion | None:
        if self.completed:
            return None
        return self.questions[self.current_index]

    @property
    def completed(self) -> bool:
        return self.current_index >= self.total_questions

    @property
    def progress(self) -> int:
        """Percentage of questions reached, counting the one on screen."""
        if not self.total_questions:
            return 0
        reached = min(self.current_index + 1, self.total_questions)
        return calculate_score_percentage(reached, self.total_questions)

    @property
    def percentage(self) -> int:
        return calculate_score_percentage(self.score, self.total_questions)

    @property
    def passed(self) -> bool:
        return self.percentage >= self.pass_percentage

    def submit(self, answer: Any) -> AnswerResult:
        """Grade ``answer`` for the current question and move on."""
        question = self.current_question
        if question is None:
            raise RuntimeError("Quiz already completed")

        result = check_answer(question, answer)
        if result.correct:
            self.score += 1
            self.xp += BASE_XP + min(MAX_STREAK_BONUS, self.streak * 2)
            self.streak += 1
        else:
            self.streak = 0

        self.results.append(result)
        return result

    def finish(self) -> QuizAttempt:
        """Close the attempt with its final score and pass/fail status."""
        status = AttemptStatus.PASSED if self.passed else AttemptStatus.FAILED
        self.attempt = self.attempt.model_copy(
            update={
                "status": status,
                "score": self.score,
                "total_questions": self.total_questions,
                "percentage": self.percentage,
                "completed_at": _now(),
            }
        )
        logger.info(
            f"Quiz {self.attempt.material_id} {status.value.lower()} by {self.attempt.user_email}: "
            f"{self.score}/{self.total_questions} ({self.percentage}%)"
        )
        return self.attempt

    @property
    def message(self) -> str:
        return get_performance_message(self.score, self.total_questions)
