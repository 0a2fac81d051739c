"""
Scheduling Orchestrator.

Single entry point for a review event. Sequences:

1. LeitnerBoxScheduler       - promote/reset the card
2. metrics.record_outcome    - fold the outcome into rolling metrics
3. AdaptiveDifficultyClassifier - derive the learner's tier
4. ContentAdjuster           - derive the next question's parameters

Nothing here touches storage. The caller persists the returned card and
metrics, and must serialize concurrent reviews of the same card.
"""

from __future__ import annotations

from datetime import datetime

from loguru import logger

from .content import ContentAdjuster
from .difficulty import AdaptiveDifficultyClassifier, DifficultyThresholds
from .exceptions import InvalidReviewError
from .leitner import LeitnerBoxScheduler, LeitnerConfig
from .metrics import record_outcome
from .models import AlgorithmMetrics, ReviewCard, ReviewResult


class SchedulingOrchestrator:
    """Coordinates scheduler, classifier and content adjuster per review."""

    def __init__(
        self,
        scheduler: LeitnerBoxScheduler | None = None,
        classifier: AdaptiveDifficultyClassifier | None = None,
        adjuster: ContentAdjuster | None = None,
    ):
        self.scheduler = scheduler or LeitnerBoxScheduler()
        self.classifier = classifier or AdaptiveDifficultyClassifier()
        self.adjuster = adjuster or ContentAdjuster()

    @classmethod
    def from_settings(cls, settings=None) -> SchedulingOrchestrator:
        """Build an orchestrator from application settings."""
        if settings is None:
            from config import get_settings

            settings = get_settings()

        return cls(
            scheduler=LeitnerBoxScheduler(LeitnerConfig(boxes=tuple(settings.leitner_boxes))),
            classifier=AdaptiveDifficultyClassifier(
                DifficultyThresholds(**settings.get_classifier_config())
            ),
        )

    def record_review(
        self,
        card: ReviewCard,
        metrics: AlgorithmMetrics,
        was_correct: bool,
        response_time_ms: int,
        now: datetime | None = None,
    ) -> ReviewResult:
        """
        Apply one review outcome.

        Args:
            card: Card that was reviewed
            metrics: Learner metrics before this review
            was_correct: Whether the answer was correct
            response_time_ms: Time taken to answer
            now: Review moment (defaults to the current time)

        Returns:
            ReviewResult with the updated card, updated metrics, tier and
            content configuration for the next question

        Raises:
            InvalidReviewError: if response_time_ms is negative
        """
        if response_time_ms < 0:
            raise InvalidReviewError(f"response_time_ms must be >= 0, got {response_time_ms}")

        updated_card = self.scheduler.move_card(card, was_correct, now)
        updated_metrics = record_outcome(
            metrics,
            was_correct,
            response_time_ms,
            streak=updated_card.success_streak,
        )
        tier = self.classifier.calculate_difficulty(updated_metrics)
        content_config = self.adjuster.adjust_content(tier)

        logger.debug(
            f"Recorded review for {card.id}: correct={was_correct}, "
            f"interval={updated_card.interval}d, tier={tier.value}, "
            f"next_review={updated_card.next_review_date:%Y-%m-%d}"
        )

        return ReviewResult(
            updated_card=updated_card,
            updated_metrics=updated_metrics,
            tier=tier,
            content_config=content_config,
        )
