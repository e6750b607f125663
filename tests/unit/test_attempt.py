"""
Unit tests for quiz sessions and attempt records.
"""

import pytest

from quizgen.config import get_settings
from quizgen.quiz import AttemptStatus, QuizAttempt, QuizSession
from quizgen.quiz.question_bank import base_questions, category_questions


@pytest.fixture
def questions():
    """Four multiple-choice questions with correct answers 0, 2, 3, 0."""
    return base_questions("Cash Flow") + category_questions("default", "Cash Flow")


@pytest.fixture
def session(questions):
    return QuizSession(questions, user_email="owner@example.com", material_id="mat-42", pass_percentage=70)


class TestQuizSession:
    """Test score, streak and XP tracking."""

    def test_starts_empty(self, session):
        assert session.current_index == 0
        assert session.current_question.id == "q1"
        assert session.progress == 25
        assert session.completed is False

    def test_streak_and_xp(self, session):
        session.submit(0)  # correct, streak 0 -> +10
        session.submit(2)  # correct, streak 1 -> +12
        session.submit(0)  # wrong, streak reset
        session.submit(0)  # correct, streak 0 -> +10

        assert session.score == 3
        assert session.streak == 1
        assert session.xp == 32
        assert session.completed is True
        assert session.current_question is None

    def test_streak_bonus_is_capped(self):
        questions = category_questions("business-plan", "Planning")
        mcq = questions[0]
        session = QuizSession([mcq] * 15, "owner@example.com", "mat-42", pass_percentage=70)
        for _ in range(15):
            session.submit(0)

        # bonus grows by 2 per streak step and stops at 20
        expected = sum(10 + min(20, streak * 2) for streak in range(15))
        assert session.xp == expected

    def test_submit_after_completion_raises(self, session):
        for answer in (0, 2, 3, 0):
            session.submit(answer)
        with pytest.raises(RuntimeError):
            session.submit(0)

    def test_finish_passed(self, session):
        for answer in (0, 2, 0, 0):
            session.submit(answer)
        attempt = session.finish()

        assert attempt.status is AttemptStatus.PASSED
        assert attempt.score == 3
        assert attempt.total_questions == 4
        assert attempt.percentage == 75
        assert attempt.completed_at is not None
        assert session.message.startswith("Good job")

    def test_finish_failed(self, session):
        for answer in (1, 1, 1, 0):
            session.submit(answer)
        attempt = session.finish()

        assert attempt.status is AttemptStatus.FAILED
        assert attempt.percentage == 25
        assert session.message.startswith("Keep learning")

    def test_empty_quiz(self):
        session = QuizSession([], "owner@example.com", "mat-42", pass_percentage=50)

        assert session.completed is True
        assert session.percentage == 0
        assert session.progress == 0
        assert session.finish().status is AttemptStatus.FAILED

    def test_pass_mark_from_settings(self, questions, monkeypatch):
        monkeypatch.setenv("QUIZGEN_PASS_PERCENTAGE", "50")
        get_settings.cache_clear()
        try:
            session = QuizSession(questions, "owner@example.com", "mat-42")
            assert session.pass_percentage == 50
        finally:
            get_settings.cache_clear()


class TestQuizAttempt:
    """Test the progress-event payload."""

    def test_started_event(self):
        attempt = QuizAttempt(user_email="owner@example.com", material_id="mat-42")
        event = attempt.to_event()

        assert event["event"] == "QUIZ_STARTED"
        assert event["userEmail"] == "owner@example.com"
        assert event["materialId"] == "mat-42"
        assert "score" not in event

    def test_completed_event(self, session):
        for answer in (0, 2, 3, 0):
            session.submit(answer)
        event = session.finish().to_event()

        assert event["event"] == "QUIZ_PASSED"
        assert event["score"] == 4
        assert event["totalQuestions"] == 4
        assert event["percentage"] == 100

    def test_camel_case_dump(self):
        attempt = QuizAttempt(user_email="owner@example.com", material_id="mat-42")
        dumped = attempt.model_dump(by_alias=True)

        assert dumped["userEmail"] == "owner@example.com"
        assert dumped["status"] is AttemptStatus.STARTED
