"""
Quiz generation for learning modules.

This module provides:
- generate_quiz_questions: module metadata -> ordered question list
- calculate_score_percentage / get_performance_message: scoring helpers
- check_answer: grading for every question type
- QuizSession / QuizAttempt: one learner's pass through a quiz

Question Types:
- multiple_choice: Pick one option
- fill_blank: Pick the missing word from a word bank
- match_pairs: Match terms to definitions
- order_steps: Put steps in order
- categorize: Sort items into categories
"""

from .attempt import AttemptStatus, QuizAttempt, QuizSession
from .engine import (
    MAX_QUESTIONS,
    calculate_score_percentage,
    compute_target_question_count,
    generate_quiz_questions,
    get_performance_message,
    module_target_question_count,
)
from .grading import AnswerResult, check_answer, is_response_complete
from .models import (
    CategorizeQuestion,
    FillBlankQuestion,
    MatchPairsQuestion,
    MultipleChoiceQuestion,
    OrderStepsQuestion,
    QuestionType,
    QuizQuestion,
    dump_questions,
    parse_question,
    parse_questions,
)
from .question_bank import ModuleCategory

__all__ = [
    "MAX_QUESTIONS",
    "AnswerResult",
    "AttemptStatus",
    "CategorizeQuestion",
    "FillBlankQuestion",
    "MatchPairsQuestion",
    "ModuleCategory",
    "MultipleChoiceQuestion",
    "OrderStepsQuestion",
    "QuestionType",
    "QuizAttempt",
    "QuizQuestion",
    "QuizSession",
    "calculate_score_percentage",
    "check_answer",
    "compute_target_question_count",
    "dump_questions",
    "generate_quiz_questions",
    "get_performance_message",
    "is_response_complete",
    "module_target_question_count",
    "parse_question",
    "parse_questions",
]
