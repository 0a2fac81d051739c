"""Content adjustment: which vocabulary, question style and hints suit a tier."""

from __future__ import annotations

from .models import ContentConfig, DifficultyTier, QuestionComplexity, VocabularyLevel

CONTENT_BY_TIER: dict[DifficultyTier, ContentConfig] = {
    DifficultyTier.EASY: ContentConfig(
        vocabulary_level=VocabularyLevel.BEGINNER,
        question_complexity=QuestionComplexity.SIMPLE,
        hint_available=True,
    ),
    DifficultyTier.MEDIUM: ContentConfig(
        vocabulary_level=VocabularyLevel.INTERMEDIATE,
        question_complexity=QuestionComplexity.MODERATE,
        hint_available=False,
    ),
    DifficultyTier.HARD: ContentConfig(
        vocabulary_level=VocabularyLevel.ADVANCED,
        question_complexity=QuestionComplexity.COMPLEX,
        hint_available=False,
    ),
}


class ContentAdjuster:
    """Total mapping from DifficultyTier to ContentConfig."""

    def adjust_content(self, tier: DifficultyTier | str) -> ContentConfig:
        """
        Get the content configuration for a tier.

        Accepts the enum or its string value ("easy", "medium", "hard").
        """
        return CONTENT_BY_TIER[DifficultyTier(tier)]
