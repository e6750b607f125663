"""
quizgen command line.

Commands:
    generate  Build the quiz for a learning module
    score     Percentage, performance message and pass/fail for a score
    target    Target question count for a word count
"""

from __future__ import annotations

import json
import random

import typer
from rich.console import Console
from rich.table import Table

from quizgen.config import get_settings
from quizgen.logger import configure_logging
from quizgen.quiz import (
    CategorizeQuestion,
    FillBlankQuestion,
    MatchPairsQuestion,
    MultipleChoiceQuestion,
    OrderStepsQuestion,
    QuizQuestion,
    calculate_score_percentage,
    compute_target_question_count,
    dump_questions,
    generate_quiz_questions,
    get_performance_message,
)

app = typer.Typer(
    name="quizgen",
    help="Generate self-assessment quizzes for learning modules",
    no_args_is_help=True,
)

console = Console()


def _answer_summary(question: QuizQuestion) -> str:
    if isinstance(question, MultipleChoiceQuestion):
        return question.correct_option
    if isinstance(question, FillBlankQuestion):
        return question.correct_word
    if isinstance(question, MatchPairsQuestion):
        return "\n".join(f"{p.term} = {p.definition}" for p in question.pairs)
    if isinstance(question, OrderStepsQuestion):
        return "\n".join(f"{i}. {step}" for i, step in enumerate(question.steps, 1))
    if isinstance(question, CategorizeQuestion):
        return "\n".join(f"{item.label} -> {item.category}" for item in question.items)
    return ""


@app.command("generate")
def generate(
    title: str = typer.Option(..., "--title", "-t", help="Module title"),
    description: str = typer.Option("", "--description", "-d", help="Module description"),
    category: str = typer.Option("", "--category", "-c", help="Module category (e.g. business-plan)"),
    seed: int = typer.Option(None, "--seed", "-s", help="Seed for option shuffling"),
    as_json: bool = typer.Option(False, "--json", help="Print questions as JSON"),
):
    """
    Build the quiz for a learning module.

    Examples:
        quizgen generate -t "How to Create a Winning Business Plan" -c business-plan
        quizgen generate -t "Mastering Cash Flow" -d "$(cat notes.txt)" --json
    """
    if seed is None:
        seed = get_settings().random_seed
    rng = random.Random(seed)

    questions = generate_quiz_questions(title, description, category, rng=rng)

    if as_json:
        typer.echo(json.dumps(dump_questions(questions), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Quiz: {title}", show_lines=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Question")
    table.add_column("Answer", style="green")

    for i, question in enumerate(questions, 1):
        table.add_row(str(i), question.type, question.question, _answer_summary(question))

    console.print(table)
    console.print(f"[dim]{len(questions)} questions[/dim]")


@app.command("score")
def score(
    correct: int = typer.Argument(..., help="Number of correct answers"),
    total: int = typer.Argument(..., help="Number of questions"),
    pass_mark: int = typer.Option(None, "--pass-mark", "-p", help="Pass percentage (default from settings)"),
):
    """Show the percentage, performance message and pass/fail for a quiz score."""
    if total <= 0 or correct < 0 or correct > total:
        console.print(f"[red]Error: score must be between 0 and total (got {correct}/{total})[/red]")
        raise typer.Exit(1)

    if pass_mark is None:
        pass_mark = get_settings().pass_percentage

    percentage = calculate_score_percentage(correct, total)
    passed = percentage >= pass_mark
    verdict = "[green]PASS[/green]" if passed else "[red]FAIL[/red]"

    console.print(f"Score: {correct}/{total} ({percentage}%) {verdict}")
    console.print(get_performance_message(correct, total))


@app.command("target")
def target(
    words: int = typer.Argument(..., help="Word count of the module text"),
):
    """Show how many questions a module of WORDS words gets."""
    if words < 0:
        console.print("[red]Error: word count cannot be negative[/red]")
        raise typer.Exit(1)
    console.print(str(compute_target_question_count(words)))


def main() -> None:
    """CLI entry point."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
