"""
Learning Path Schemas
Response schemas for learning path endpoints.
"""
from typing import Optional
from pydantic import BaseModel

from dutch_tutor.models.learning_path import LearningPath, LearningPathStep


class LearningPathSummary(BaseModel):
    """A path as listed in the catalogue."""
    id: str
    name: str
    description: str
    target_level: str
    total_steps: int


class LearningPathProgressResponse(BaseModel):
    """A learner's progress through one path."""
    user_id: str
    path: LearningPath
    progress_percentage: float = 0.0
    next_step: Optional[LearningPathStep] = None
    message: Optional[str] = None


class NextStepResponse(BaseModel):
    """The step a learner should do next on a path."""
    user_id: str
    path_id: str
    next_step: Optional[LearningPathStep] = None
    message: Optional[str] = None
