"""
Gamification Schemas
Request and response schemas for gamification endpoints.
"""
from pydantic import BaseModel, Field

from dutch_tutor.models.gamification import Achievement, Badge, GamificationState


class ActivityRequest(BaseModel):
    """A completed exercise."""
    score: int = Field(..., ge=0, le=100, description="Exercise score (0-100)")


class GamificationStateResponse(BaseModel):
    """Current gamification state of a learner."""
    user_id: str
    state: GamificationState
    average_score: float = 0.0


class ActivityResponse(BaseModel):
    """Outcome of recording a completed exercise."""
    state: GamificationState
    points_earned: int = 0
    level_up: bool = False
    new_badges: list[Badge] = []
    new_achievements: list[Achievement] = []
