"""
Review queue helpers.

Card creation, due checks and streak-based mastery labels used by the
session layer when it assembles a review queue.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from .models import DifficultyTier, ReviewCard

# (minimum streak, label), highest first
MASTERY_LABELS = (
    (10, "Master"),
    (5, "Advanced"),
    (2, "Intermediate"),
)


def create_card(
    card_id: str,
    image_id: str | None = None,
    now: datetime | None = None,
    ease_factor: float = 2.5,
) -> ReviewCard:
    """Create a new card in the first box, due immediately."""
    return ReviewCard(
        id=card_id,
        image_id=image_id or card_id,
        next_review_date=now or datetime.now(),
        difficulty=DifficultyTier.MEDIUM,
        interval=1,
        ease_factor=ease_factor,
        review_count=0,
        success_streak=0,
    )


def is_due(card: ReviewCard, now: datetime | None = None) -> bool:
    """Check if this card is due for review."""
    return card.next_review_date <= (now or datetime.now())


def get_due_cards(cards: Iterable[ReviewCard], now: datetime | None = None) -> list[ReviewCard]:
    """
    Get cards due for review, most overdue first.

    Cards with the same due date keep their input order.
    """
    now = now or datetime.now()
    due = [card for card in cards if is_due(card, now)]
    return sorted(due, key=lambda card: card.next_review_date)


def mastery_label(card: ReviewCard | None) -> str:
    """Describe how well a card is known from its success streak."""
    if card is None:
        return "Beginner"
    for min_streak, label in MASTERY_LABELS:
        if card.success_streak >= min_streak:
            return label
    return "Beginner"
