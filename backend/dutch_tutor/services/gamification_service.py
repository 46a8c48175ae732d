"""
Gamification Service
Streaks, points, levels, badges and achievements for a learner.

The state transition helpers are pure: they take a GamificationState and
return a new one. GamificationService ties them together and persists the
result through the injected repository.
"""
import logging
import math
from datetime import datetime
from typing import Optional

from dutch_tutor.config import settings
from dutch_tutor.models.gamification import (
    ACHIEVEMENT_DEFINITIONS,
    BADGE_DEFINITIONS,
    Achievement,
    AchievementType,
    Badge,
    GamificationState,
    StreakData,
)
from dutch_tutor.repositories.key_value import KeyValueRepository

logger = logging.getLogger(__name__)

STORAGE_KEY_PREFIX = "gamification_state"


def update_streak(state: GamificationState, now: Optional[datetime] = None) -> GamificationState:
    """
    Update the streak after an activity.

    Practising again on the same calendar day leaves the streak untouched,
    practising on the next day extends it, any longer gap restarts it at 1.
    """
    now = now or datetime.utcnow()
    last_activity = state.streak.last_activity_date

    if last_activity is not None:
        days_diff = (now.date() - last_activity.date()).days
        if days_diff == 0:
            return state
        new_streak = state.streak.current_streak + 1 if days_diff == 1 else 1
    else:
        new_streak = 1

    streak = StreakData(
        current_streak=new_streak,
        longest_streak=max(state.streak.longest_streak, new_streak),
        last_activity_date=now
    )
    return state.model_copy(update={"streak": streak})


def _badge_condition_met(badge_id: str, state: GamificationState) -> bool:
    if badge_id == "week-streak":
        return state.streak.current_streak >= 7
    if badge_id == "month-streak":
        return state.streak.current_streak >= 30
    if badge_id == "first-exercise":
        return state.exercises_completed >= 1
    if badge_id == "perfect-score":
        return state.last_score == 100
    # Category badges are awarded by the exercise categories themselves
    return False


def check_badges(
    state: GamificationState,
    now: Optional[datetime] = None
) -> tuple[GamificationState, list[Badge]]:
    """
    Unlock every badge whose condition is met and that is not unlocked yet.

    Returns:
        Tuple of (updated state, newly unlocked badges)
    """
    now = now or datetime.utcnow()
    unlocked_ids = {b.id for b in state.badges}
    new_badges: list[Badge] = []

    for badge_def in BADGE_DEFINITIONS:
        if badge_def.id in unlocked_ids:
            continue
        if _badge_condition_met(badge_def.id, state):
            new_badges.append(badge_def.model_copy(update={"unlocked_at": now}))
            unlocked_ids.add(badge_def.id)

    if not new_badges:
        return state, []
    return state.model_copy(update={"badges": [*state.badges, *new_badges]}), new_badges


def check_achievements(
    state: GamificationState,
    exercise_count: int,
    score: float,
    now: Optional[datetime] = None
) -> tuple[GamificationState, list[Achievement]]:
    """
    Unlock achievements reached by exercise count, streak or score.

    Args:
        state: Current gamification state
        exercise_count: Number of distinct exercises completed
        score: Score of the exercise just completed
        now: Unlock time, defaults to the current time

    Returns:
        Tuple of (updated state, newly unlocked achievements)
    """
    now = now or datetime.utcnow()
    unlocked_ids = {a.id for a in state.achievements}
    new_achievements: list[Achievement] = []

    for achievement_def in ACHIEVEMENT_DEFINITIONS:
        if achievement_def.id in unlocked_ids:
            continue

        if achievement_def.type == AchievementType.EXERCISES:
            should_unlock = exercise_count >= achievement_def.requirement
        elif achievement_def.type == AchievementType.STREAK:
            should_unlock = state.streak.current_streak >= achievement_def.requirement
        elif achievement_def.type == AchievementType.SCORE:
            should_unlock = score >= achievement_def.requirement
        else:
            should_unlock = False

        if should_unlock:
            new_achievements.append(achievement_def.model_copy(update={"unlocked_at": now}))
            unlocked_ids.add(achievement_def.id)

    if not new_achievements:
        return state, []
    updated = state.model_copy(update={"achievements": [*state.achievements, *new_achievements]})
    return updated, new_achievements


def calculate_level(points: int) -> int:
    """Level = floor(sqrt(points / 100)) + 1"""
    return math.floor(math.sqrt(max(points, 0) / 100)) + 1


def add_points(state: GamificationState, points: int) -> GamificationState:
    total_points = state.total_points + points
    return state.model_copy(update={
        "total_points": total_points,
        "level": calculate_level(total_points)
    })


def points_for_score(score: int) -> int:
    """Points for one completed exercise, proportional to its score."""
    fraction = max(0, min(score, 100)) / 100
    return math.floor(fraction * settings.MAX_POINTS_PER_EXERCISE + 0.5)


class GamificationService:
    """Loads, updates and stores the gamification state of learners"""

    def __init__(self, repository: KeyValueRepository):
        self.repository = repository

    @staticmethod
    def _key(user_id: str) -> str:
        return f"{STORAGE_KEY_PREFIX}_{user_id}"

    def load_state(self, user_id: str) -> GamificationState:
        """Stored state of the learner, or a fresh state."""
        stored = self.repository.load(self._key(user_id))
        if not stored:
            return GamificationState()
        try:
            return GamificationState.model_validate(stored)
        except ValueError as e:
            logger.error(f"Invalid gamification state for {user_id}, starting fresh: {e}")
            return GamificationState()

    def save_state(self, user_id: str, state: GamificationState) -> None:
        self.repository.save(self._key(user_id), state.model_dump(mode="json"))

    def record_exercise(
        self,
        user_id: str,
        score: int,
        exercise_count: int,
        now: Optional[datetime] = None
    ) -> dict:
        """
        Record a completed exercise.

        Updates the streak, awards points, bumps the counters and unlocks
        badges and achievements, then persists the new state.

        Args:
            user_id: The learner
            score: Score of the completed exercise (0-100)
            exercise_count: Distinct exercises the learner has completed,
                this one included
            now: Time of completion, defaults to the current time

        Returns:
            Dict with the new state, points earned and what got unlocked
        """
        now = now or datetime.utcnow()
        state = self.load_state(user_id)
        previous_level = state.level

        state = update_streak(state, now)
        points = points_for_score(score)
        state = add_points(state, points)
        state = state.model_copy(update={
            "exercises_completed": state.exercises_completed + 1,
            "score_total": state.score_total + max(0, score),
            "last_score": score
        })

        state, new_badges = check_badges(state, now)
        state, new_achievements = check_achievements(
            state,
            exercise_count=exercise_count,
            score=score,
            now=now
        )

        self.save_state(user_id, state)

        if new_badges or new_achievements:
            logger.info(
                f"User {user_id} unlocked badges={[b.id for b in new_badges]} "
                f"achievements={[a.id for a in new_achievements]}"
            )

        return {
            "state": state,
            "points_earned": points,
            "level_up": state.level > previous_level,
            "new_badges": new_badges,
            "new_achievements": new_achievements
        }
