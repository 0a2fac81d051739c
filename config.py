"""
Configuration settings for the vocab-srs review scheduler.

Uses Pydantic Settings for environment variable management with .env file support.
Every variable is prefixed with ``SRS_`` (e.g. ``SRS_LEITNER_BOXES=[1,2,4,8]``).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SRS_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Leitner Scheduling
    # ========================================
    leitner_boxes: list[int] = Field(
        default=[1, 3, 7, 14, 30],
        description="Box ladder in days, strictly ascending",
    )
    default_ease_factor: float = Field(
        default=2.5,
        description="Ease factor assigned to new cards (carried through unchanged)",
    )

    # ========================================
    # Difficulty Classification
    # ========================================
    hard_accuracy_threshold: float = Field(
        default=0.80,
        description="Accuracy must be strictly above this for the hard tier",
    )
    hard_response_time_ms: float = Field(
        default=3000,
        description="Average response time must be strictly below this for the hard tier",
    )
    medium_accuracy_threshold: float = Field(
        default=0.60,
        description="Accuracy must be strictly above this for the medium tier",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )

    @field_validator("leitner_boxes")
    @classmethod
    def _check_ladder(cls, boxes: list[int]) -> list[int]:
        if not boxes:
            raise ValueError("leitner_boxes must not be empty")
        if boxes[0] < 1:
            raise ValueError("leitner_boxes must start at 1 day or more")
        if any(b <= a for a, b in zip(boxes, boxes[1:])):
            raise ValueError("leitner_boxes must be strictly ascending")
        return boxes

    @model_validator(mode="after")
    def _check_thresholds(self) -> Settings:
        for name in ("hard_accuracy_threshold", "medium_accuracy_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        if self.medium_accuracy_threshold > self.hard_accuracy_threshold:
            raise ValueError("medium_accuracy_threshold cannot exceed hard_accuracy_threshold")
        return self

    def get_classifier_config(self) -> dict[str, float]:
        """Get difficulty classification thresholds as a dictionary."""
        return {
            "hard_accuracy": self.hard_accuracy_threshold,
            "hard_response_time_ms": self.hard_response_time_ms,
            "medium_accuracy": self.medium_accuracy_threshold,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
