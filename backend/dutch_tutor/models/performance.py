"""
Performance Models
Per-exercise results used to find weak points and recommend practice.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class PerformanceData(BaseModel):
    """Running results of one exercise for one learner"""
    exercise_id: str
    attempts: int = Field(default=0, ge=0)
    correct_answers: float = Field(
        default=0.0,
        ge=0,
        description="Correct answers over all attempts, derived from the scores"
    )
    average_score: float = Field(default=0.0, ge=0, le=100)
    last_attempt: Optional[datetime] = None


class WeakPoint(BaseModel):
    """An exercise the learner is struggling with"""
    topic: str
    exercise_id: str
    error_rate: float = Field(..., ge=0, le=1)
    last_practiced: Optional[datetime] = None
    priority: float = Field(..., description="Higher means more urgent to practise")


class AdaptiveRecommendation(BaseModel):
    """Suggested exercise with the reason for suggesting it"""
    exercise_id: str
    reason: str
    priority: float
