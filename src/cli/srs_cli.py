"""
vocab-srs - review scheduler simulator.

Drives the scheduling core from the terminal so ladder and threshold
settings can be checked without a session UI.

Usage:
    vocab-srs simulate yyny            # Replay outcomes from a fresh card
    vocab-srs simulate yyyy -r 1500    # ...with a fixed response time
    vocab-srs classify -t 50 -c 40     # Tier + content for a metrics snapshot
    vocab-srs ladder                   # Show the configured box ladder
"""

from __future__ import annotations

import sys
from dataclasses import replace
from datetime import datetime
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from config import get_settings
from src.srs import (
    AlgorithmMetrics,
    SchedulingError,
    SchedulingOrchestrator,
    create_card,
    mastery_label,
)

CORRECT_MARKS = {"y", "1", "c"}
INCORRECT_MARKS = {"n", "0", "x"}

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="vocab-srs",
    help="Leitner review scheduler simulator",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


def _parse_answers(answers: str) -> list[bool]:
    """Turn a string like 'yyn' into correctness flags."""
    outcomes = []
    for mark in answers.lower():
        if mark in CORRECT_MARKS:
            outcomes.append(True)
        elif mark in INCORRECT_MARKS:
            outcomes.append(False)
        elif not mark.isspace() and mark not in ",-":
            raise typer.BadParameter(f"Unknown answer mark {mark!r} (use y/n, 1/0 or c/x)")
    if not outcomes:
        raise typer.BadParameter("No answers given")
    return outcomes


def _bool_mark(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[red]no[/red]"


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """Configure logging before any command runs."""
    _configure_logging("DEBUG" if verbose else get_settings().log_level)


# =============================================================================
# Commands
# =============================================================================


@app.command("simulate")
def simulate(
    answers: Annotated[str, typer.Argument(help="Outcomes in order, e.g. 'yyny'")],
    response_ms: Annotated[
        int, typer.Option("--response-ms", "-r", min=0, help="Response time for every answer")
    ] = 2500,
    start_interval: Annotated[
        int, typer.Option("--start-interval", "-s", help="Interval of the card before the first review")
    ] = 1,
) -> None:
    """
    Replay a sequence of review outcomes through the scheduler.

    Starts from a fresh card and empty metrics, printing the card, metrics
    and content configuration after each review.
    """
    outcomes = _parse_answers(answers)
    settings = get_settings()
    orchestrator = SchedulingOrchestrator.from_settings(settings)

    now = datetime.now()
    card = replace(
        create_card("sim-card", now=now, ease_factor=settings.default_ease_factor),
        interval=start_interval,
    )
    metrics = AlgorithmMetrics()

    table = Table(title="Review Simulation", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Answer")
    table.add_column("Interval", justify="right")
    table.add_column("Streak", justify="right")
    table.add_column("Accuracy", justify="right")
    table.add_column("Avg ms", justify="right")
    table.add_column("Tier")
    table.add_column("Vocabulary")
    table.add_column("Complexity")
    table.add_column("Hints")

    for was_correct in outcomes:
        result = orchestrator.record_review(card, metrics, was_correct, response_ms, now=now)
        card, metrics = result.updated_card, result.updated_metrics
        content = result.content_config

        table.add_row(
            str(card.review_count),
            _bool_mark(was_correct),
            f"{card.interval}d",
            str(card.success_streak),
            f"{metrics.accuracy:.0%}",
            f"{metrics.average_response_time:.0f}",
            result.tier.value,
            content.vocabulary_level.value,
            content.question_complexity.value,
            _bool_mark(content.hint_available),
        )

    console.print(table)
    console.print(
        f"Next review: [bold]{card.next_review_date:%Y-%m-%d}[/bold]  "
        f"Mastery: [bold]{mastery_label(card)}[/bold]"
    )


@app.command("classify")
def classify(
    total: Annotated[int, typer.Option("--total", "-t", help="Total reviews")],
    correct: Annotated[int, typer.Option("--correct", "-c", min=0, help="Correct answers")],
    avg_ms: Annotated[
        float, typer.Option("--avg-ms", "-a", min=0, help="Average response time in ms")
    ] = 3000,
) -> None:
    """Show the difficulty tier and content configuration for a metrics snapshot."""
    if correct > total:
        raise typer.BadParameter(f"--correct ({correct}) cannot exceed --total ({total})")

    metrics = AlgorithmMetrics(
        total_reviews=total,
        correct_answers=correct,
        incorrect_answers=total - correct,
        average_response_time=avg_ms,
    )
    orchestrator = SchedulingOrchestrator.from_settings()

    try:
        tier = orchestrator.classifier.calculate_difficulty(metrics)
    except SchedulingError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    content = orchestrator.adjuster.adjust_content(tier)

    console.print(f"Accuracy: [bold]{metrics.accuracy:.1%}[/bold]  Avg response: {avg_ms:.0f}ms")
    console.print(f"Tier: [bold cyan]{tier.value}[/bold cyan]")
    console.print(f"  Vocabulary level:    {content.vocabulary_level.value}")
    console.print(f"  Question complexity: {content.question_complexity.value}")
    console.print(f"  Hints:               {'on' if content.hint_available else 'off'}")


@app.command("ladder")
def ladder() -> None:
    """Show the configured Leitner box ladder."""
    boxes = SchedulingOrchestrator.from_settings().scheduler.boxes

    table = Table(title="Leitner Boxes")
    table.add_column("Box", justify="right")
    table.add_column("Interval (days)", justify="right")
    for index, days in enumerate(boxes):
        table.add_row(str(index), str(days))
    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


def run() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    run()
