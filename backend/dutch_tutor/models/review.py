"""
Review Models
Vocabulary items scheduled with spaced repetition.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class SRSItem(BaseModel):
    """A word under spaced repetition"""
    id: str
    word: str
    translation: Optional[str] = None
    example: Optional[str] = None
    ease_factor: float = Field(default=2.5, ge=1.3, description="Ease factor (minimum 1.3)")
    interval: int = Field(default=1, ge=1, description="Days until next review")
    repetition_count: int = Field(default=0, ge=0, description="Consecutive correct reviews")
    next_review_date: datetime = Field(default_factory=datetime.utcnow)
    last_review_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)


class SRSReviewResult(BaseModel):
    """Outcome of reviewing one item"""
    item: SRSItem
    quality: int = Field(..., ge=0, le=5)
    new_interval: int
    new_ease_factor: float
    new_repetition_count: int
