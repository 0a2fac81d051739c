"""
Value objects for the review scheduler.

All records are frozen dataclasses. Updates go through ``dataclasses.replace``
so every scheduling step returns new state and leaves its input untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# =============================================================================
# Enums
# =============================================================================


class DifficultyTier(str, Enum):
    """Coarse learner proficiency tier."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class VocabularyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class QuestionComplexity(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class ReviewCard:
    """Scheduling state for one learner / learning-item pairing."""

    id: str
    image_id: str
    next_review_date: datetime
    difficulty: DifficultyTier = DifficultyTier.MEDIUM  # display only
    interval: int = 1  # days until next review
    ease_factor: float = 2.5  # passed through unchanged
    review_count: int = 0
    success_streak: int = 0


@dataclass(frozen=True)
class AlgorithmMetrics:
    """Rolling performance snapshot for a learner."""

    total_reviews: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    average_response_time: float = 0.0  # ms
    streak_count: int = 0

    @property
    def accuracy(self) -> float:
        """Share of correct answers; 0.0 for an empty snapshot."""
        if self.total_reviews <= 0:
            return 0.0
        return self.correct_answers / self.total_reviews


@dataclass(frozen=True)
class ContentConfig:
    """Parameters that shape the next question shown to the learner."""

    vocabulary_level: VocabularyLevel
    question_complexity: QuestionComplexity
    hint_available: bool


@dataclass(frozen=True)
class ReviewResult:
    """Everything a single review event produces."""

    updated_card: ReviewCard
    updated_metrics: AlgorithmMetrics
    tier: DifficultyTier
    content_config: ContentConfig
