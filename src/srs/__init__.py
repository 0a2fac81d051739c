"""
Spaced-Repetition Review Scheduler.

Components:
- LeitnerBoxScheduler: Box-ladder interval scheduling
- AdaptiveDifficultyClassifier: Metrics -> easy / medium / hard
- ContentAdjuster: Tier -> vocabulary level, question complexity, hints
- SchedulingOrchestrator: Runs all three for each review event
"""
from src.srs.content import ContentAdjuster
from src.srs.difficulty import AdaptiveDifficultyClassifier, DifficultyThresholds
from src.srs.exceptions import (
    InsufficientReviewsError,
    InvalidReviewError,
    LadderConfigError,
    SchedulingError,
)
from src.srs.leitner import DEFAULT_BOXES, LeitnerBoxScheduler, LeitnerConfig
from src.srs.metrics import record_outcome
from src.srs.models import (
    AlgorithmMetrics,
    ContentConfig,
    DifficultyTier,
    QuestionComplexity,
    ReviewCard,
    ReviewResult,
    VocabularyLevel,
)
from src.srs.orchestrator import SchedulingOrchestrator
from src.srs.queue import create_card, get_due_cards, is_due, mastery_label

__all__ = [
    # Main entry point
    "SchedulingOrchestrator",
    # Component classes
    "LeitnerBoxScheduler",
    "LeitnerConfig",
    "DEFAULT_BOXES",
    "AdaptiveDifficultyClassifier",
    "DifficultyThresholds",
    "ContentAdjuster",
    "record_outcome",
    # Data models
    "ReviewCard",
    "AlgorithmMetrics",
    "ContentConfig",
    "ReviewResult",
    # Enums
    "DifficultyTier",
    "VocabularyLevel",
    "QuestionComplexity",
    # Queue helpers
    "create_card",
    "is_due",
    "get_due_cards",
    "mastery_label",
    # Errors
    "SchedulingError",
    "InsufficientReviewsError",
    "InvalidReviewError",
    "LadderConfigError",
]
