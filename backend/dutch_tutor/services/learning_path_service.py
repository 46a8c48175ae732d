"""
Learning Path Service
Tracks a learner's progress through the built-in learning paths.
"""
import logging
from datetime import datetime
from typing import Optional

from dutch_tutor.config import settings
from dutch_tutor.data.learning_paths import LEARNING_PATHS, get_learning_path_definition
from dutch_tutor.models.learning_path import LearningPath, LearningPathStep
from dutch_tutor.repositories.key_value import KeyValueRepository

logger = logging.getLogger(__name__)


class StepNotFoundError(LookupError):
    """Raised when a step id does not exist in a learning path"""


class LearningPathService:
    """Loads and updates learning path progress per learner"""

    def __init__(self, repository: KeyValueRepository):
        self.repository = repository

    @staticmethod
    def _key(user_id: str, path_id: str) -> str:
        return f"learning_path_{user_id}_{path_id}"

    def list_paths(self) -> list[LearningPath]:
        """All available learning path definitions."""
        return [p.model_copy(deep=True) for p in LEARNING_PATHS]

    def load_progress(self, user_id: str, path_id: str) -> Optional[LearningPath]:
        """
        Get the learner's copy of a path.

        Falls back to the untouched definition when nothing is stored yet,
        or when the stored document cannot be read.

        Returns:
            LearningPath, or None if the path does not exist
        """
        definition = get_learning_path_definition(path_id)
        if definition is None:
            return None

        stored = self.repository.load(self._key(user_id, path_id))
        if not stored:
            return definition
        try:
            return LearningPath.model_validate(stored)
        except ValueError as e:
            logger.error(f"Failed to load learning path {path_id} for {user_id}: {e}")
            return definition

    def save_progress(self, user_id: str, path: LearningPath) -> None:
        self.repository.save(self._key(user_id, path.id), path.model_dump(mode="json"))

    def complete_step(
        self,
        user_id: str,
        path_id: str,
        step_id: str,
        now: Optional[datetime] = None
    ) -> Optional[LearningPath]:
        """
        Mark a step as completed.

        The path itself is marked completed once every step is done.

        Returns:
            The updated path, None if the path does not exist

        Raises:
            StepNotFoundError: if the path has no step with that id
        """
        path = self.load_progress(user_id, path_id)
        if path is None:
            return None
        if not any(s.id == step_id for s in path.steps):
            raise StepNotFoundError(f"Step '{step_id}' not found in path '{path_id}'")

        now = now or datetime.utcnow()
        steps = [
            s.model_copy(update={"completed": True, "completed_at": now}) if s.id == step_id else s
            for s in path.steps
        ]
        all_completed = all(s.completed for s in steps)

        updated = path.model_copy(update={
            "steps": steps,
            "started_at": path.started_at or now,
            "completed_at": (path.completed_at or now) if all_completed else None
        })
        self.save_progress(user_id, updated)

        logger.info(f"User {user_id} completed {path_id}/{step_id}")
        return updated

    def next_step(self, user_id: str, path_id: str) -> Optional[LearningPathStep]:
        """First step not completed yet, None when the path is done or unknown."""
        path = self.load_progress(user_id, path_id)
        if path is None:
            return None
        return next((s for s in path.steps if not s.completed), None)

    def complete_steps_for_exercise(
        self,
        user_id: str,
        exercise_id: str,
        average_scores: dict[str, float],
        now: Optional[datetime] = None
    ) -> list[tuple[str, str]]:
        """
        Complete every open step containing the exercise whose exercises all
        have an average score of at least STEP_COMPLETION_MIN_AVERAGE.

        Args:
            user_id: The learner
            exercise_id: The exercise that was just submitted
            average_scores: Average score per exercise id for the learner
            now: Completion time, defaults to the current time

        Returns:
            (path id, step id) of each step completed by this call
        """
        completed = []
        for definition in LEARNING_PATHS:
            path = self.load_progress(user_id, definition.id)
            for step in path.steps:
                if step.completed or exercise_id not in step.exercise_ids:
                    continue
                if all(
                    ex_id in average_scores
                    and average_scores[ex_id] >= settings.STEP_COMPLETION_MIN_AVERAGE
                    for ex_id in step.exercise_ids
                ):
                    self.complete_step(user_id, path.id, step.id, now)
                    completed.append((path.id, step.id))
        return completed

    def reset(self, user_id: str, path_id: str) -> None:
        self.repository.delete(self._key(user_id, path_id))
