"""
Gamification Models
Defines badges, achievements, streaks and the per-learner gamification state.
"""
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AchievementType(str, Enum):
    STREAK = "streak"
    EXERCISES = "exercises"
    SCORE = "score"
    CATEGORY = "category"
    SPECIAL = "special"


class Badge(BaseModel):
    """A badge the learner can unlock"""
    id: str
    name: str
    description: str
    icon: str = Field(..., description="Emoji or icon identifier")
    unlocked_at: Optional[datetime] = None


class Achievement(BaseModel):
    """A milestone with a numeric requirement"""
    id: str
    name: str
    description: str
    type: AchievementType
    requirement: int = Field(..., ge=0, description="E.g. 7 days streak, 100 exercises")
    unlocked_at: Optional[datetime] = None


class StreakData(BaseModel):
    """Consecutive practice days"""
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    last_activity_date: Optional[datetime] = None


class GamificationState(BaseModel):
    """Everything gamification keeps per learner"""
    badges: list[Badge] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    streak: StreakData = Field(default_factory=StreakData)
    total_points: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1, description="Derived from total points")

    # Counters feeding the achievements
    exercises_completed: int = Field(default=0, ge=0)
    score_total: int = Field(default=0, ge=0)
    last_score: Optional[int] = None

    @property
    def average_score(self) -> float:
        if self.exercises_completed == 0:
            return 0.0
        return self.score_total / self.exercises_completed


BADGE_DEFINITIONS: list[Badge] = [
    Badge(id="first-exercise", name="Eerste Stap", description="Voltooi je eerste oefening", icon="🎯"),
    Badge(id="week-streak", name="Week Warrior", description="7 dagen op rij geoefend", icon="🔥"),
    Badge(id="month-streak", name="Maand Meester", description="30 dagen op rij geoefend", icon="⭐"),
    Badge(id="perfect-score", name="Perfect", description="Krijg 100% op een oefening", icon="💯"),
    Badge(id="de-het-master", name="De/Het Meester", description="Voltooi 10 de/het oefeningen", icon="📚"),
    Badge(id="grammar-guru", name="Grammatica Guru", description="Voltooi 50 grammatica oefeningen", icon="📖"),
    Badge(id="vocab-virtuoso", name="Woordenschat Virtuoos", description="Leer 100 nieuwe woorden", icon="🎓"),
    Badge(id="speed-demon", name="Snelheidsduivel", description="Voltooi 10 oefeningen in één dag", icon="⚡"),
]

ACHIEVEMENT_DEFINITIONS: list[Achievement] = [
    Achievement(id="ach-1", name="Beginneling", description="Voltooi 10 oefeningen", type=AchievementType.EXERCISES, requirement=10),
    Achievement(id="ach-2", name="Doorzetter", description="Voltooi 50 oefeningen", type=AchievementType.EXERCISES, requirement=50),
    Achievement(id="ach-3", name="Expert", description="Voltooi 100 oefeningen", type=AchievementType.EXERCISES, requirement=100),
    Achievement(id="ach-4", name="Master", description="Voltooi 500 oefeningen", type=AchievementType.EXERCISES, requirement=500),
    Achievement(id="ach-streak-7", name="Week Streak", description="7 dagen op rij", type=AchievementType.STREAK, requirement=7),
    Achievement(id="ach-streak-30", name="Maand Streak", description="30 dagen op rij", type=AchievementType.STREAK, requirement=30),
    Achievement(id="ach-streak-100", name="Legende", description="100 dagen op rij", type=AchievementType.STREAK, requirement=100),
    Achievement(id="ach-score-90", name="Uitstekend", description="Gemiddelde score van 90%+", type=AchievementType.SCORE, requirement=90),
]
