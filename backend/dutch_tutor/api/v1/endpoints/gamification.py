"""
Gamification API Endpoints
REST API for streaks, points, badges and achievements.
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from dutch_tutor.core.dependencies import get_gamification_service, get_performance_service
from dutch_tutor.models.gamification import ACHIEVEMENT_DEFINITIONS, BADGE_DEFINITIONS
from dutch_tutor.schemas.gamification import (
    ActivityRequest,
    ActivityResponse,
    GamificationStateResponse,
)
from dutch_tutor.services.gamification_service import GamificationService
from dutch_tutor.services.performance_service import PerformanceService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/definitions")
async def get_definitions():
    """All badges and achievements that can be unlocked."""
    return {
        "badges": [b.model_dump(mode="json") for b in BADGE_DEFINITIONS],
        "achievements": [a.model_dump(mode="json") for a in ACHIEVEMENT_DEFINITIONS]
    }


@router.get("/{user_id}", response_model=GamificationStateResponse)
async def get_gamification_state(
    user_id: str,
    service: GamificationService = Depends(get_gamification_service)
):
    """Current streak, points, level, badges and achievements of a learner."""
    state = service.load_state(user_id)
    return GamificationStateResponse(
        user_id=user_id,
        state=state,
        average_score=round(state.average_score, 1)
    )


@router.post("/{user_id}/activity", response_model=ActivityResponse)
async def record_activity(
    user_id: str,
    request: ActivityRequest,
    service: GamificationService = Depends(get_gamification_service),
    performance: PerformanceService = Depends(get_performance_service)
):
    """
    Record a completed exercise.

    Updates the streak, awards points and unlocks badges and achievements.
    Exercise-count achievements use the distinct exercises recorded through
    /exercises/feedback/record.
    """
    try:
        outcome = service.record_exercise(
            user_id,
            request.score,
            exercise_count=performance.exercise_count(user_id)
        )
    except Exception as e:
        logger.error(f"Error recording activity for {user_id}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Error recording activity: {str(e)}"
        )
    return ActivityResponse(**outcome)
