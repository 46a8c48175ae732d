"""
Review Service
Stores each learner's SRS items and runs reviews against them.
"""
import logging
from datetime import datetime
from typing import Optional

from dutch_tutor.models.review import SRSItem, SRSReviewResult
from dutch_tutor.repositories.key_value import KeyValueRepository
from dutch_tutor.utils.srs_algorithm import SRSAlgorithm, srs_algorithm

logger = logging.getLogger(__name__)


class ReviewItemNotFoundError(LookupError):
    """Raised when reviewing an item the learner does not have"""


class ReviewService:
    """Spaced repetition review for a learner's vocabulary"""

    def __init__(self, repository: KeyValueRepository, algorithm: Optional[SRSAlgorithm] = None):
        self.repository = repository
        self.algorithm = algorithm or srs_algorithm

    @staticmethod
    def _key(user_id: str) -> str:
        return f"srs_items_{user_id}"

    def list_items(self, user_id: str) -> list[SRSItem]:
        stored = self.repository.load(self._key(user_id)) or []
        items = []
        for raw in stored:
            try:
                items.append(SRSItem.model_validate(raw))
            except ValueError as e:
                logger.warning(f"Skipping invalid SRS item for {user_id}: {e}")
        return items

    def _save_items(self, user_id: str, items: list[SRSItem]) -> None:
        self.repository.save(self._key(user_id), [i.model_dump(mode="json") for i in items])

    def add_item(
        self,
        user_id: str,
        word: str,
        translation: Optional[str] = None,
        example: Optional[str] = None
    ) -> SRSItem:
        """Add a word; a word already present is returned as is."""
        items = self.list_items(user_id)
        for existing in items:
            if existing.word.strip().lower() == word.strip().lower():
                return existing

        item = self.algorithm.create_item(word, translation, example)
        items.append(item)
        self._save_items(user_id, items)
        logger.info(f"Added SRS item '{word}' for {user_id}")
        return item

    def due_items(self, user_id: str, now: Optional[datetime] = None) -> list[SRSItem]:
        return self.algorithm.items_for_review(self.list_items(user_id), now)

    def review(
        self,
        user_id: str,
        item_id: str,
        quality: int,
        now: Optional[datetime] = None
    ) -> SRSReviewResult:
        """
        Apply a review to one item and persist it.

        Raises:
            ReviewItemNotFoundError: if the learner has no item with that id
        """
        items = self.list_items(user_id)
        for idx, item in enumerate(items):
            if item.id == item_id:
                result = self.algorithm.calculate(item, quality, now)
                items[idx] = result.item
                self._save_items(user_id, items)
                return result
        raise ReviewItemNotFoundError(f"SRS item '{item_id}' not found")
