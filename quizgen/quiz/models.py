"""
Quiz question records.

A generated quiz is a list of question records, one per question. Records are
a discriminated union keyed by ``type``:

- multiple_choice: ``options`` + ``correctAnswer`` index
- fill_blank: ``template`` with one blank + ``wordBank`` + ``correctWord``
- match_pairs: ``pairs`` of term/definition
- order_steps: ``steps`` in their correct order
- categorize: ``categories`` + ``items`` labelled with their category

Every variant keeps ``options`` and ``correctAnswer`` so the JSON shape the quiz
UI consumes is the same for all five types (empty list / placeholder ``0`` for
the non-MCQ types). Field names serialize in camelCase.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel

# Blank marker used in fill_blank templates
BLANK = "_____"

# Padding option when the distractor pool runs dry
NONE_OF_THE_ABOVE = "none of the above"


class QuestionType(str, Enum):
    """Question shapes the quiz UI can render."""

    MULTIPLE_CHOICE = "multiple_choice"
    FILL_BLANK = "fill_blank"
    MATCH_PAIRS = "match_pairs"
    ORDER_STEPS = "order_steps"
    CATEGORIZE = "categorize"


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class MatchPair(_Record):
    term: str
    definition: str


class CategorizedItem(_Record):
    label: str
    category: str


class _QuestionBase(_Record):
    id: str
    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer: int = 0
    explanation: str | None = None

    @property
    def dedup_key(self) -> str:
        """Trimmed, lowercased question text."""
        return self.question.strip().lower()

    def _require_no_options(self) -> None:
        if self.options:
            raise ValueError(f"{self.type} questions carry no options")


class MultipleChoiceQuestion(_QuestionBase):
    type: Literal["multiple_choice"] = "multiple_choice"
    options: list[str]
    correct_answer: int

    @model_validator(mode="after")
    def _check_options(self) -> MultipleChoiceQuestion:
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} out of range for {len(self.options)} options"
            )
        real = [opt for opt in self.options if opt != NONE_OF_THE_ABOVE]
        if len(set(real)) != len(real):
            raise ValueError("options must not repeat")
        return self

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]


class FillBlankQuestion(_QuestionBase):
    type: Literal["fill_blank"] = "fill_blank"
    template: str
    word_bank: list[str]
    correct_word: str

    @model_validator(mode="after")
    def _check_template(self) -> FillBlankQuestion:
        self._require_no_options()
        if self.template.count(BLANK) != 1:
            raise ValueError("template must contain exactly one blank")
        if self.correct_word not in self.word_bank:
            raise ValueError("correct_word must appear in word_bank")
        return self

    def filled(self, word: str | None = None) -> str:
        """Template with the blank replaced (by ``correct_word`` unless given)."""
        return self.template.replace(BLANK, word if word is not None else self.correct_word, 1)


class MatchPairsQuestion(_QuestionBase):
    type: Literal["match_pairs"] = "match_pairs"
    pairs: list[MatchPair]

    @model_validator(mode="after")
    def _check_pairs(self) -> MatchPairsQuestion:
        self._require_no_options()
        if not self.pairs:
            raise ValueError("match_pairs needs at least one pair")
        return self


class OrderStepsQuestion(_QuestionBase):
    type: Literal["order_steps"] = "order_steps"
    steps: list[str]

    @model_validator(mode="after")
    def _check_steps(self) -> OrderStepsQuestion:
        self._require_no_options()
        if len(self.steps) < 2:
            raise ValueError("order_steps needs at least two steps")
        return self


class CategorizeQuestion(_QuestionBase):
    type: Literal["categorize"] = "categorize"
    categories: list[str]
    items: list[CategorizedItem]

    @model_validator(mode="after")
    def _check_items(self) -> CategorizeQuestion:
        self._require_no_options()
        if not self.categories or not self.items:
            raise ValueError("categorize needs categories and items")
        unknown = {item.category for item in self.items} - set(self.categories)
        if unknown:
            raise ValueError(f"items use undeclared categories: {sorted(unknown)}")
        return self


QuizQuestion = Annotated[
    Union[
        MultipleChoiceQuestion,
        FillBlankQuestion,
        MatchPairsQuestion,
        OrderStepsQuestion,
        CategorizeQuestion,
    ],
    Field(discriminator="type"),
]

_QUESTION_LIST = TypeAdapter(list[QuizQuestion])
_QUESTION = TypeAdapter(QuizQuestion)


def parse_question(data: dict[str, Any]) -> QuizQuestion:
    """Validate one question payload (camelCase or snake_case keys)."""
    return _QUESTION.validate_python(data)


def parse_questions(data: Iterable[dict[str, Any]]) -> list[QuizQuestion]:
    """Validate a list of question payloads."""
    return _QUESTION_LIST.validate_python(list(data))


def dump_questions(questions: Iterable[QuizQuestion]) -> list[dict[str, Any]]:
    """Serialize questions to the camelCase JSON shape the quiz UI reads."""
    return [q.model_dump(mode="json", by_alias=True, exclude_none=True) for q in questions]
