"""
Learning Path Models
A learning path is an ordered list of steps leading to a target CEFR level.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from dutch_tutor.models.cefr import CEFRLevel


class LearningPathStep(BaseModel):
    """One step of a learning path, made of a few exercises"""
    id: str
    title: str
    description: str
    exercise_ids: list[str] = Field(default_factory=list)
    completed: bool = False
    completed_at: Optional[datetime] = None


class LearningPath(BaseModel):
    """A learning path and the learner's progress through it"""
    id: str
    name: str
    description: str
    target_level: CEFRLevel
    steps: list[LearningPathStep] = Field(default_factory=list)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def progress_percentage(self) -> float:
        if not self.steps:
            return 0.0
        done = sum(1 for s in self.steps if s.completed)
        return round(done / len(self.steps) * 100, 1)
