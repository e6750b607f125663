"""
Fixed self-assessment questions and category question templates.

Every learning module gets the same three self-assessment questions, then a
category block: five typed questions for business planning, a single
multiple-choice question for the other known categories, and a generic
fallback for anything else.
"""

from __future__ import annotations

import re
from enum import Enum

from loguru import logger

from .models import (
    BLANK,
    CategorizedItem,
    CategorizeQuestion,
    FillBlankQuestion,
    MatchPair,
    MatchPairsQuestion,
    MultipleChoiceQuestion,
    OrderStepsQuestion,
    QuizQuestion,
)

DEFAULT_TOPIC = "the material"

_LEADING_FILLER = re.compile(
    r"^(Understanding|Mastering|Introduction to|Guide to|Complete|Advanced)\s+",
    re.IGNORECASE,
)
_TRAILING_CLAUSE = re.compile(r"\s+(for|in|of)\s+.*$", re.IGNORECASE)
_SEPARATORS = re.compile(r"[\s_]+")


class ModuleCategory(str, Enum):
    """Learning-module categories with their own question templates."""

    BUSINESS_PLAN = "business-plan"
    MARKETING = "marketing"
    FINANCE = "finance"
    OPERATIONS = "operations"
    LEADERSHIP = "leadership"
    DEFAULT = "default"


_CATEGORY_ALIASES = {
    "business-planning": ModuleCategory.BUSINESS_PLAN,
    "businessplanning": ModuleCategory.BUSINESS_PLAN,
}


def normalize_category(category: str | None) -> ModuleCategory:
    """
    Map a free-form category label onto a ModuleCategory.

    Lowercases, turns runs of spaces/underscores into ``-`` and resolves
    aliases. Anything unrecognised becomes DEFAULT.
    """
    label = _SEPARATORS.sub("-", (category or "").strip().lower())
    if label in _CATEGORY_ALIASES:
        return _CATEGORY_ALIASES[label]
    try:
        return ModuleCategory(label)
    except ValueError:
        logger.debug(f"Unknown category {category!r}, using default questions")
        return ModuleCategory.DEFAULT


def extract_main_topic(title: str | None) -> str:
    """Core topic of a module title, without filler prefixes or trailing qualifiers."""
    topic = _LEADING_FILLER.sub("", (title or "").strip())
    topic = _TRAILING_CLAUSE.sub("", topic).strip()
    return topic or DEFAULT_TOPIC


def base_questions(topic: str) -> list[QuizQuestion]:
    """The three self-assessment questions asked for every module."""
    return [
        MultipleChoiceQuestion(
            id="q1",
            question=f"What is the main purpose of {topic}?",
            options=[
                "To understand key concepts",
                "To memorize information",
                "To apply skills practically",
                "To complete requirements",
            ],
            correct_answer=0,
            explanation=(
                "The main purpose of learning materials is to understand key concepts "
                "that can be applied in real scenarios."
            ),
        ),
        MultipleChoiceQuestion(
            id="q2",
            question=f"Which of the following best describes your understanding of {topic}?",
            options=[
                "I need more practice",
                "I understand the basics",
                "I feel confident applying this",
                "I could teach others",
            ],
            correct_answer=2,
            explanation="Self-assessment helps identify areas for improvement and builds confidence.",
        ),
        MultipleChoiceQuestion(
            id="q3",
            question=f"How would you rate the difficulty level of this {topic} material?",
            options=[
                "Very Easy",
                "Easy",
                "Just Right",
                "Challenging but manageable",
            ],
            correct_answer=3,
            explanation="Understanding difficulty helps set realistic learning expectations and goals.",
        ),
    ]


def _business_plan_questions(topic: str) -> list[QuizQuestion]:
    return [
        MultipleChoiceQuestion(
            id="cat1",
            question=f"What's the most important takeaway from this {topic} module for business planning?",
            options=[
                "Strategic thinking skills",
                "Financial planning basics",
                "Market analysis techniques",
                "Operational efficiency tips",
            ],
            correct_answer=0,
            explanation="Business planning requires strategic thinking to create sustainable competitive advantages.",
        ),
        MatchPairsQuestion(
            id="cat2",
            question="Match each business plan section to what it covers.",
            pairs=[
                MatchPair(term="Executive Summary", definition="A one-page overview of the whole plan"),
                MatchPair(term="Market Analysis", definition="Customers, competitors and market size"),
                MatchPair(term="Financial Projections", definition="Expected revenue, costs and cash flow"),
                MatchPair(term="Operations Plan", definition="How the business delivers its product day to day"),
            ],
            explanation="Each section answers a different question an investor or lender will ask.",
        ),
        OrderStepsQuestion(
            id="cat3",
            question="Put the steps of writing a business plan in the right order.",
            steps=[
                "Research your market and competitors",
                "Define your product and value proposition",
                "Plan marketing and operations",
                "Build financial projections",
                "Write the executive summary",
            ],
            explanation="The executive summary comes last because it condenses every other section.",
        ),
        CategorizeQuestion(
            id="cat4",
            question="Sort each factor into the right side of a SWOT analysis.",
            categories=["Internal", "External"],
            items=[
                CategorizedItem(label="Strengths", category="Internal"),
                CategorizedItem(label="Weaknesses", category="Internal"),
                CategorizedItem(label="Opportunities", category="External"),
                CategorizedItem(label="Threats", category="External"),
            ],
            explanation="Strengths and weaknesses come from inside the business; opportunities and threats from its environment.",
        ),
        FillBlankQuestion(
            id="cat5",
            question="Complete the sentence about who a business plan is written for.",
            template=f"A business plan shows {BLANK} how the business will make money and repay them.",
            word_bank=["investors", "competitors", "suppliers", "customers"],
            correct_word="investors",
            explanation="Investors and lenders read the plan to judge whether their money will come back.",
        ),
    ]


def _single_question(topic: str, category: ModuleCategory) -> MultipleChoiceQuestion:
    if category is ModuleCategory.MARKETING:
        question = f"Which marketing principle from the {topic} module will you apply first?"
        options = ["Customer segmentation", "Content strategy", "Performance analytics", "Brand positioning"]
        correct = 1
        explanation = (
            "Content strategy is foundational - great content enables effective "
            "marketing across all channels."
        )
    elif category is ModuleCategory.FINANCE:
        question = f"What financial concept from {topic} is most valuable for your role?"
        options = ["Budget management", "Investment strategies", "Risk assessment", "Financial reporting"]
        correct = 0
        explanation = "Budget management is the foundation of financial control and business sustainability."
    elif category is ModuleCategory.OPERATIONS:
        question = f"Which operational efficiency tip from {topic} will you implement?"
        options = ["Process automation", "Quality control systems", "Team workflow optimization", "Resource allocation"]
        correct = 2
        explanation = "Team workflow optimization creates immediate efficiency gains and improves collaboration."
    elif category is ModuleCategory.LEADERSHIP:
        question = f"What leadership skill from {topic} resonates most with your style?"
        options = ["Communication", "Decision making", "Team motivation", "Strategic planning"]
        correct = 3
        explanation = "Strategic planning combines all leadership skills and drives long-term success."
    else:
        question = f"How will you use what you learned about {topic}?"
        options = ["In my current role", "For personal development", "To help my team", "In future projects"]
        correct = 0
        explanation = "Applying learning in your current role creates immediate value and reinforces knowledge."

    return MultipleChoiceQuestion(
        id="cat1",
        question=question,
        options=options,
        correct_answer=correct,
        explanation=explanation,
    )


def category_questions(category: str | ModuleCategory | None, topic: str) -> list[QuizQuestion]:
    """Template questions for a module category."""
    if not isinstance(category, ModuleCategory):
        category = normalize_category(category)

    if category is ModuleCategory.BUSINESS_PLAN:
        return _business_plan_questions(topic)
    return [_single_question(topic, category)]
