"""
Adaptive Difficulty Classifier.

Maps a learner's rolling metrics to an easy / medium / hard tier. The tier is
independent of the Leitner interval: it drives what content is shown next,
not when a card comes back.

Rules, checked in order, all comparisons strict:

    accuracy > 80% and avg response < 3000ms  -> hard
    accuracy > 60%                            -> medium
    otherwise                                 -> easy
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .exceptions import InsufficientReviewsError
from .models import AlgorithmMetrics, DifficultyTier


@dataclass(frozen=True)
class DifficultyThresholds:
    """Cut-offs for the difficulty tiers."""

    hard_accuracy: float = 0.80
    hard_response_time_ms: float = 3000
    medium_accuracy: float = 0.60


class AdaptiveDifficultyClassifier:
    """Stateless classifier from performance metrics to a DifficultyTier."""

    def __init__(self, thresholds: DifficultyThresholds | None = None):
        self.thresholds = thresholds or DifficultyThresholds()

    def calculate_difficulty(self, metrics: AlgorithmMetrics) -> DifficultyTier:
        """
        Classify a metrics snapshot.

        Raises:
            InsufficientReviewsError: if the snapshot holds no reviews
        """
        if metrics.total_reviews <= 0:
            raise InsufficientReviewsError(metrics.total_reviews)

        t = self.thresholds
        accuracy = metrics.correct_answers / metrics.total_reviews

        if accuracy > t.hard_accuracy and metrics.average_response_time < t.hard_response_time_ms:
            tier = DifficultyTier.HARD
        elif accuracy > t.medium_accuracy:
            tier = DifficultyTier.MEDIUM
        else:
            tier = DifficultyTier.EASY

        logger.debug(
            f"Classified {tier.value}: accuracy={accuracy:.3f}, "
            f"avg_response={metrics.average_response_time:.0f}ms"
        )
        return tier
