"""Errors raised by the review scheduler."""

from __future__ import annotations


class SchedulingError(Exception):
    """Base class for scheduler errors."""


class InsufficientReviewsError(SchedulingError, ValueError):
    """A metrics snapshot with no reviews cannot be classified."""

    def __init__(self, total_reviews: int):
        self.total_reviews = total_reviews
        super().__init__(
            f"Cannot classify difficulty from {total_reviews} reviews; at least one is required"
        )


class InvalidReviewError(SchedulingError, ValueError):
    """A review outcome carries values outside its domain."""


class LadderConfigError(SchedulingError, ValueError):
    """A Leitner box ladder is empty, unordered or non-positive."""
