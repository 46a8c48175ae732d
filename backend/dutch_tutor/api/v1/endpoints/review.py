"""
Review API Endpoints
REST API for spaced repetition vocabulary review.
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from dutch_tutor.core.dependencies import get_review_service
from dutch_tutor.models.review import SRSItem, SRSReviewResult
from dutch_tutor.schemas.review import (
    AddReviewItemRequest,
    ReviewAnswerRequest,
    ReviewListResponse,
)
from dutch_tutor.services.review_service import ReviewItemNotFoundError, ReviewService
from dutch_tutor.utils.srs_algorithm import quality_from_correctness


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{user_id}", response_model=ReviewListResponse)
async def list_review_items(
    user_id: str,
    service: ReviewService = Depends(get_review_service)
):
    """All words in the learner's review deck."""
    items = service.list_items(user_id)
    return ReviewListResponse(user_id=user_id, items=items, total=len(items))


@router.get("/{user_id}/due", response_model=ReviewListResponse)
async def list_due_items(
    user_id: str,
    service: ReviewService = Depends(get_review_service)
):
    """Words due for review, the longest overdue first."""
    items = service.due_items(user_id)
    return ReviewListResponse(user_id=user_id, items=items, total=len(items))


@router.post("/{user_id}/items", response_model=SRSItem, status_code=201)
async def add_review_item(
    user_id: str,
    request: AddReviewItemRequest,
    service: ReviewService = Depends(get_review_service)
):
    """Add a word to the review deck."""
    return service.add_item(user_id, request.word, request.translation, request.example)


@router.post("/{user_id}/items/{item_id}/review", response_model=SRSReviewResult)
async def review_item(
    user_id: str,
    item_id: str,
    request: ReviewAnswerRequest,
    service: ReviewService = Depends(get_review_service)
):
    """
    Submit a review.

    Send either a quality (0-5) or a plain correct flag.
    """
    if request.quality is not None:
        quality = request.quality
    elif request.correct is not None:
        quality = quality_from_correctness(request.correct)
    else:
        raise HTTPException(status_code=400, detail="Provide either quality or correct")

    try:
        return service.review(user_id, item_id, quality)
    except ReviewItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
