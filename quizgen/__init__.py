"""
quizgen - heuristic quiz generation for learning modules.

Builds self-assessment quizzes (multiple choice, fill in the blank, matching,
ordering and categorization) from a module's title, description and category.
"""

__version__ = "1.0.0"
