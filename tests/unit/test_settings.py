"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.leitner_boxes == [1, 3, 7, 14, 30]
        assert settings.get_classifier_config() == {
            "hard_accuracy": 0.80,
            "hard_response_time_ms": 3000,
            "medium_accuracy": 0.60,
        }
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SRS_HARD_RESPONSE_TIME_MS", "2500")
        monkeypatch.setenv("SRS_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.hard_response_time_ms == 2500
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.parametrize("boxes", [[], [0, 1], [3, 1], [1, 1, 2]])
    def test_invalid_ladder_rejected(self, boxes):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, leitner_boxes=boxes)

    def test_threshold_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, hard_accuracy_threshold=1.5)

    def test_medium_above_hard_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, hard_accuracy_threshold=0.5, medium_accuracy_threshold=0.7)
