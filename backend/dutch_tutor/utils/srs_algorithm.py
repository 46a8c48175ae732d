"""
Spaced Repetition System (SRS) Algorithm
Variant of the SM-2 algorithm used for vocabulary review.

The algorithm calculates review intervals based on:
- Quality of response (0-5 scale)
- Ease factor (difficulty multiplier)
- Number of consecutive correct reviews

Quality Response Scale:
0 - Forgotten
1 - Very hard
2 - Hard
3 - Good
4 - Easy
5 - Perfect
"""
import uuid
from datetime import datetime, timedelta
from typing import Optional

from dutch_tutor.config import settings
from dutch_tutor.models.review import SRSItem, SRSReviewResult


class SRSAlgorithm:
    """
    SM-2 variant

    - Quality below 3 resets the repetitions, sets the interval back to one
      day and lowers the ease factor
    - Correct answers raise the repetition count and adjust the ease factor
      with the SM-2 formula
    - Intervals: 1 day, 6 days, then interval * ease factor
    """

    def __init__(self):
        self.initial_interval = settings.SRS_INITIAL_INTERVAL_DAYS
        self.second_interval = settings.SRS_SECOND_INTERVAL_DAYS
        self.initial_ease_factor = settings.SRS_INITIAL_EASE_FACTOR
        self.min_ease_factor = settings.SRS_MIN_EASE_FACTOR
        self.failure_penalty = settings.SRS_FAILURE_EASE_PENALTY

    def calculate(
        self,
        item: SRSItem,
        quality: int,
        now: Optional[datetime] = None
    ) -> SRSReviewResult:
        """
        Update an item after a review.

        Args:
            item: The reviewed item
            quality: Quality of response (0-5)
            now: Review time, defaults to the current time

        Returns:
            SRSReviewResult with the updated item
        """
        quality = max(0, min(5, quality))
        now = now or datetime.utcnow()

        if quality < 3:
            repetitions = 0
            interval = self.initial_interval
            ease_factor = max(self.min_ease_factor, item.ease_factor - self.failure_penalty)
        else:
            repetitions = item.repetition_count + 1

            # EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
            ease_factor = item.ease_factor + (0.1 - (5 - quality) * (0.08 + (5 - quality) * 0.02))
            ease_factor = max(self.min_ease_factor, ease_factor)

            if repetitions == 1:
                interval = self.initial_interval
            elif repetitions == 2:
                interval = self.second_interval
            else:
                interval = round(item.interval * ease_factor)

        updated = item.model_copy(update={
            "ease_factor": ease_factor,
            "interval": interval,
            "repetition_count": repetitions,
            "next_review_date": now + timedelta(days=interval),
            "last_review_date": now
        })

        return SRSReviewResult(
            item=updated,
            quality=quality,
            new_interval=interval,
            new_ease_factor=ease_factor,
            new_repetition_count=repetitions
        )

    def create_item(
        self,
        word: str,
        translation: Optional[str] = None,
        example: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> SRSItem:
        """New item, due for review immediately."""
        now = now or datetime.utcnow()
        return SRSItem(
            id=f"srs-{uuid.uuid4().hex[:12]}",
            word=word,
            translation=translation,
            example=example,
            ease_factor=self.initial_ease_factor,
            interval=self.initial_interval,
            repetition_count=0,
            next_review_date=now,
            created_at=now
        )

    def is_due_for_review(self, item: SRSItem, now: Optional[datetime] = None) -> bool:
        """Check if an item is due for review."""
        return (now or datetime.utcnow()) >= item.next_review_date

    def items_for_review(self, items: list[SRSItem], now: Optional[datetime] = None) -> list[SRSItem]:
        """Items that are due, the longest overdue first."""
        now = now or datetime.utcnow()
        due = [i for i in items if self.is_due_for_review(i, now)]
        return sorted(due, key=lambda i: i.next_review_date)


def quality_from_correctness(is_correct: bool) -> int:
    """Quality for a plain right/wrong answer."""
    return 4 if is_correct else 1


# Singleton instance
srs_algorithm = SRSAlgorithm()
