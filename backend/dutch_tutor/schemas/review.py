"""
Review Schemas
Request and response schemas for spaced repetition review endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field

from dutch_tutor.models.review import SRSItem


# ==================== REQUEST SCHEMAS ====================

class AddReviewItemRequest(BaseModel):
    """A word to add to the learner's review deck."""
    word: str = Field(..., min_length=1)
    translation: Optional[str] = None
    example: Optional[str] = None


class ReviewAnswerRequest(BaseModel):
    """Result of reviewing one item."""
    quality: Optional[int] = Field(
        default=None,
        ge=0,
        le=5,
        description="Quality of response (0=forgotten, 5=perfect)"
    )
    correct: Optional[bool] = Field(
        default=None,
        description="Plain right/wrong, used when no quality is given"
    )


# ==================== RESPONSE SCHEMAS ====================

class ReviewListResponse(BaseModel):
    user_id: str
    items: list[SRSItem] = []
    total: int = 0
