"""
Unit tests for SchedulingOrchestrator and metrics aggregation.

Tests:
- Card, metrics and content come back together for each review
- Running mean of response time
- Metrics invariants across a sequence of reviews
- Input validation
- Construction from settings
"""

import pytest

from config import Settings
from src.srs import (
    AlgorithmMetrics,
    DifficultyTier,
    InvalidReviewError,
    SchedulingOrchestrator,
    VocabularyLevel,
    record_outcome,
)


@pytest.fixture
def orchestrator():
    return SchedulingOrchestrator()


class TestRecordOutcome:
    def test_first_review_sets_average(self, empty_metrics):
        result = record_outcome(empty_metrics, True, 2400, streak=1)

        assert result.total_reviews == 1
        assert result.correct_answers == 1
        assert result.incorrect_answers == 0
        assert result.average_response_time == 2400
        assert result.streak_count == 1

    def test_running_mean(self):
        metrics = AlgorithmMetrics(
            total_reviews=3,
            correct_answers=2,
            incorrect_answers=1,
            average_response_time=2000,
        )
        result = record_outcome(metrics, False, 6000, streak=0)

        # (2000 * 3 + 6000) / 4
        assert result.average_response_time == pytest.approx(3000)
        assert result.incorrect_answers == 2

    def test_negative_response_time_rejected(self, empty_metrics):
        with pytest.raises(InvalidReviewError):
            record_outcome(empty_metrics, True, -1, streak=1)


class TestRecordReview:
    def test_returns_all_artifacts(self, orchestrator, base_card, empty_metrics, review_time):
        result = orchestrator.record_review(base_card, empty_metrics, True, 1500, now=review_time)

        assert result.updated_card.interval == 3
        assert result.updated_metrics.total_reviews == 1
        assert result.tier == DifficultyTier.HARD  # 100% accuracy, 1.5s
        assert result.content_config.vocabulary_level == VocabularyLevel.ADVANCED

    def test_first_incorrect_review_is_easy(self, orchestrator, base_card, empty_metrics, review_time):
        result = orchestrator.record_review(base_card, empty_metrics, False, 1500, now=review_time)

        assert result.tier == DifficultyTier.EASY
        assert result.content_config.hint_available is True
        assert result.updated_card.interval == 1

    def test_streak_count_mirrors_card(self, orchestrator, base_card, empty_metrics, review_time):
        card, metrics = base_card, empty_metrics
        for was_correct in (True, True, True, False, True):
            result = orchestrator.record_review(card, metrics, was_correct, 2000, now=review_time)
            card, metrics = result.updated_card, result.updated_metrics
            assert metrics.streak_count == card.success_streak

        assert metrics.streak_count == 1

    def test_metrics_invariant_holds(self, orchestrator, base_card, empty_metrics, review_time):
        card, metrics = base_card, empty_metrics
        outcomes = [True, False, True, True, False, False, True]
        for was_correct in outcomes:
            result = orchestrator.record_review(card, metrics, was_correct, 3000, now=review_time)
            card, metrics = result.updated_card, result.updated_metrics

        assert metrics.total_reviews == len(outcomes)
        assert metrics.correct_answers + metrics.incorrect_answers == metrics.total_reviews
        assert metrics.correct_answers == 4
        assert card.review_count == len(outcomes)

    def test_tier_follows_performance(self, orchestrator, base_card, empty_metrics, review_time):
        card, metrics = base_card, empty_metrics
        # 7/10 correct at 4s -> medium
        for was_correct in [True] * 7 + [False] * 3:
            result = orchestrator.record_review(card, metrics, was_correct, 4000, now=review_time)
            card, metrics = result.updated_card, result.updated_metrics

        assert result.tier == DifficultyTier.MEDIUM

    def test_inputs_not_mutated(self, orchestrator, base_card, empty_metrics, review_time):
        orchestrator.record_review(base_card, empty_metrics, True, 1000, now=review_time)

        assert base_card.review_count == 0
        assert empty_metrics.total_reviews == 0

    def test_negative_response_time_rejected(self, orchestrator, base_card, empty_metrics):
        with pytest.raises(InvalidReviewError):
            orchestrator.record_review(base_card, empty_metrics, True, -50)


class TestFromSettings:
    def test_uses_configured_ladder_and_thresholds(self, base_card, empty_metrics, review_time):
        settings = Settings(
            _env_file=None,
            leitner_boxes=[2, 4, 8],
            hard_accuracy_threshold=0.9,
            medium_accuracy_threshold=0.5,
        )
        orchestrator = SchedulingOrchestrator.from_settings(settings)

        assert orchestrator.scheduler.boxes == (2, 4, 8)
        assert orchestrator.classifier.thresholds.hard_accuracy == 0.9

        result = orchestrator.record_review(base_card, empty_metrics, True, 1000, now=review_time)
        assert result.updated_card.interval == 4

    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("SRS_LEITNER_BOXES", "[1, 2, 3]")
        orchestrator = SchedulingOrchestrator.from_settings()

        assert orchestrator.scheduler.boxes == (1, 2, 3)
