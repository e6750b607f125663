"""
Entry point for running quizgen as a module.

Usage:
    python -m quizgen generate --title "Mastering Cash Flow" --category finance
    python -m quizgen score 8 10
    python -m quizgen --help
"""
from .cli import main

if __name__ == "__main__":
    main()
