"""
Exercise Schemas
Request and response schemas for exercise grading endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dutch_tutor.models.exercise import ExerciseData, FeedbackReport, UserAnswers
from dutch_tutor.models.performance import PerformanceData
from dutch_tutor.schemas.gamification import ActivityResponse


# ==================== REQUEST SCHEMAS ====================

class FeedbackRequest(BaseModel):
    """An exercise together with the learner's answers."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    exercise: ExerciseData
    answers: UserAnswers = Field(
        default_factory=dict,
        description="Answer per question id; unanswered questions may be left out"
    )


class RecordFeedbackRequest(FeedbackRequest):
    """Submission that also counts towards the learner's progress."""
    user_id: str = Field(..., min_length=1, description="User ID")
    exercise_id: str = Field(..., min_length=1, description="Exercise the answers belong to")


# ==================== RESPONSE SCHEMAS ====================

class CompletedStep(BaseModel):
    """A learning path step completed by a submission."""
    path_id: str
    step_id: str


class RecordFeedbackResponse(BaseModel):
    """Feedback report plus the progress recorded for it."""
    report: FeedbackReport
    performance: PerformanceData
    gamification: ActivityResponse
    completed_steps: list[CompletedStep] = []
