"""
Leitner Box Scheduler.

Cards climb a fixed ladder of review intervals ("boxes"). A correct answer
promotes the card one box, an incorrect answer sends it back to the first box.

Default ladder (days):

    box 0 -> 1
    box 1 -> 3
    box 2 -> 7
    box 3 -> 14
    box 4 -> 30   (top box; correct answers keep the card here)
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from loguru import logger

from .exceptions import LadderConfigError
from .models import ReviewCard

DEFAULT_BOXES: tuple[int, ...] = (1, 3, 7, 14, 30)


@dataclass(frozen=True)
class LeitnerConfig:
    """Configuration for the Leitner box ladder."""

    boxes: tuple[int, ...] = DEFAULT_BOXES

    def __post_init__(self):
        boxes = tuple(self.boxes)
        if not boxes:
            raise LadderConfigError("Box ladder must contain at least one box")
        if boxes[0] < 1:
            raise LadderConfigError(f"Box intervals must be positive, got {boxes[0]}")
        if any(b <= a for a, b in zip(boxes, boxes[1:])):
            raise LadderConfigError(f"Box ladder must be strictly ascending: {boxes}")
        object.__setattr__(self, "boxes", boxes)


class LeitnerBoxScheduler:
    """
    Deterministic, stateless box-ladder scheduler.

    The scheduler holds only its (immutable) ladder, so one instance can be
    shared freely between callers.
    """

    def __init__(self, config: LeitnerConfig | None = None):
        """
        Initialize the scheduler.

        Args:
            config: Custom ladder (uses the 1/3/7/14/30 ladder if None)
        """
        self.config = config or LeitnerConfig()

    @property
    def boxes(self) -> tuple[int, ...]:
        return self.config.boxes

    def box_index(self, interval: int) -> int:
        """
        Find the box a card with this interval currently sits in.

        The first box whose interval is >= ``interval``. Values between boxes
        round up, values at or below the first box map to box 0, and values
        beyond the top box map to the top box.
        """
        index = bisect_left(self.boxes, interval)
        return min(index, len(self.boxes) - 1)

    def move_card(
        self,
        card: ReviewCard,
        was_correct: bool,
        now: datetime | None = None,
    ) -> ReviewCard:
        """
        Promote or reset a card after a review.

        Args:
            card: Current card state
            was_correct: Whether the learner answered correctly
            now: Review moment (defaults to the current time)

        Returns:
            New ReviewCard with interval, streak, review count and
            next review date updated
        """
        now = now or datetime.now()
        current_index = self.box_index(card.interval)

        if was_correct:
            target_index = min(current_index + 1, len(self.boxes) - 1)
            success_streak = card.success_streak + 1
        else:
            target_index = 0
            success_streak = 0

        interval = self.boxes[target_index]

        logger.debug(
            f"Card {card.id}: box {current_index} -> {target_index} "
            f"({'correct' if was_correct else 'incorrect'}), interval={interval}d"
        )

        return replace(
            card,
            interval=interval,
            success_streak=success_streak,
            review_count=card.review_count + 1,
            next_review_date=now + timedelta(days=interval),
        )
