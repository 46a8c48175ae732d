"""
Performance Service
Tracks each learner's results per exercise and turns them into weak points
and practice recommendations.

An exercise is a weak point when its error rate (1 - average / 100) is
above 0.3 or its average score is below 70. Weak points that have not been
practised for more than a week get a priority boost.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from dutch_tutor.config import settings
from dutch_tutor.models.performance import AdaptiveRecommendation, PerformanceData, WeakPoint
from dutch_tutor.repositories.key_value import KeyValueRepository

logger = logging.getLogger(__name__)

STRUGGLING_REASON = "Je hebt moeite met dit onderwerp. Extra oefening wordt aanbevolen."
PRACTICE_REASON = "Oefen dit onderwerp om je vaardigheden te verbeteren."


class PerformanceService:
    """Per-exercise performance of learners, persisted through the repository"""

    def __init__(self, repository: KeyValueRepository):
        self.repository = repository

    @staticmethod
    def _key(user_id: str) -> str:
        return f"performance_{user_id}"

    def _load_all(self, user_id: str) -> dict[str, PerformanceData]:
        stored = self.repository.load(self._key(user_id)) or {}
        performance = {}
        for exercise_id, raw in stored.items():
            try:
                performance[exercise_id] = PerformanceData.model_validate(raw)
            except ValueError as e:
                logger.warning(f"Skipping invalid performance data for {user_id}/{exercise_id}: {e}")
        return performance

    def _save_all(self, user_id: str, performance: dict[str, PerformanceData]) -> None:
        self.repository.save(
            self._key(user_id),
            {exercise_id: data.model_dump(mode="json") for exercise_id, data in performance.items()}
        )

    def record_performance(
        self,
        user_id: str,
        exercise_id: str,
        score: int,
        total_questions: int,
        now: Optional[datetime] = None
    ) -> PerformanceData:
        """
        Add one graded attempt to the exercise's running results.

        Args:
            user_id: The learner
            exercise_id: The exercise that was submitted
            score: Score of the attempt (0-100)
            total_questions: Number of questions in the attempt
            now: Time of the attempt, defaults to the current time

        Returns:
            The updated PerformanceData
        """
        now = now or datetime.utcnow()
        performance = self._load_all(user_id)
        existing = performance.get(exercise_id) or PerformanceData(exercise_id=exercise_id)

        attempts = existing.attempts + 1
        updated = existing.model_copy(update={
            "attempts": attempts,
            "correct_answers": existing.correct_answers + score / 100 * total_questions,
            "average_score": (existing.average_score * existing.attempts + score) / attempts,
            "last_attempt": now
        })
        performance[exercise_id] = updated
        self._save_all(user_id, performance)

        logger.debug(f"Performance {user_id}/{exercise_id}: {attempts} attempts, avg {updated.average_score:.1f}")
        return updated

    def get_performance_data(self, user_id: str, exercise_id: str) -> Optional[PerformanceData]:
        return self._load_all(user_id).get(exercise_id)

    def list_performance(self, user_id: str) -> list[PerformanceData]:
        return list(self._load_all(user_id).values())

    def exercise_count(self, user_id: str) -> int:
        """Number of distinct exercises the learner has submitted."""
        return len(self._load_all(user_id))

    def average_scores(self, user_id: str) -> dict[str, float]:
        return {exercise_id: data.average_score for exercise_id, data in self._load_all(user_id).items()}

    def identify_weak_points(self, user_id: str, now: Optional[datetime] = None) -> list[WeakPoint]:
        """Weak points of the learner, highest priority first."""
        now = now or datetime.utcnow()
        stale_after = timedelta(days=settings.WEAK_POINT_STALE_DAYS)
        weak_points = []

        for exercise_id, data in self._load_all(user_id).items():
            error_rate = 1 - data.average_score / 100
            if not (error_rate > settings.WEAK_POINT_MAX_ERROR_RATE
                    or data.average_score < settings.WEAK_POINT_MIN_AVERAGE_SCORE):
                continue

            # Never practised counts as stale
            stale = data.last_attempt is None or now - data.last_attempt > stale_after
            weak_points.append(WeakPoint(
                topic=exercise_id,
                exercise_id=exercise_id,
                error_rate=error_rate,
                last_practiced=data.last_attempt,
                priority=error_rate * 100 + (settings.WEAK_POINT_STALE_PRIORITY_BOOST if stale else 0)
            ))

        return sorted(weak_points, key=lambda w: w.priority, reverse=True)

    def generate_recommendations(
        self,
        user_id: str,
        limit: Optional[int] = None,
        now: Optional[datetime] = None
    ) -> list[AdaptiveRecommendation]:
        """Exercises to practise next, taken from the top weak points."""
        limit = settings.RECOMMENDATION_LIMIT if limit is None else limit
        return [
            AdaptiveRecommendation(
                exercise_id=w.exercise_id,
                reason=STRUGGLING_REASON if w.error_rate > settings.STRUGGLING_ERROR_RATE else PRACTICE_REASON,
                priority=w.priority
            )
            for w in self.identify_weak_points(user_id, now)[:limit]
        ]
