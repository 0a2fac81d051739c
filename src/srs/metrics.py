"""Aggregation of review outcomes into a learner's rolling metrics."""

from __future__ import annotations

from dataclasses import replace

from .exceptions import InvalidReviewError
from .models import AlgorithmMetrics


def record_outcome(
    metrics: AlgorithmMetrics,
    was_correct: bool,
    response_time_ms: float,
    streak: int,
) -> AlgorithmMetrics:
    """
    Fold one review outcome into a metrics snapshot.

    The average response time is a running arithmetic mean over every
    review, including this one.

    Args:
        metrics: Snapshot before the review
        was_correct: Whether the learner answered correctly
        response_time_ms: Time taken to answer
        streak: Success streak of the reviewed card after scheduling

    Returns:
        New AlgorithmMetrics
    """
    if response_time_ms < 0:
        raise InvalidReviewError(f"response_time_ms must be >= 0, got {response_time_ms}")

    total = metrics.total_reviews + 1
    average = (metrics.average_response_time * metrics.total_reviews + response_time_ms) / total

    return replace(
        metrics,
        total_reviews=total,
        correct_answers=metrics.correct_answers + (1 if was_correct else 0),
        incorrect_answers=metrics.incorrect_answers + (0 if was_correct else 1),
        average_response_time=average,
        streak_count=streak,
    )
