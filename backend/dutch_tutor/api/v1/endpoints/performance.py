"""
Performance API Endpoints
Per-exercise results, weak points and practice recommendations.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from dutch_tutor.config import settings
from dutch_tutor.core.dependencies import get_performance_service
from dutch_tutor.models.performance import AdaptiveRecommendation, PerformanceData, WeakPoint
from dutch_tutor.services.performance_service import PerformanceService


router = APIRouter()


@router.get("/{user_id}", response_model=list[PerformanceData])
async def list_performance(
    user_id: str,
    service: PerformanceService = Depends(get_performance_service)
):
    """Results of every exercise the learner has submitted."""
    return service.list_performance(user_id)


@router.get("/{user_id}/weak-points", response_model=list[WeakPoint])
async def get_weak_points(
    user_id: str,
    service: PerformanceService = Depends(get_performance_service)
):
    """Exercises the learner struggles with, most urgent first."""
    return service.identify_weak_points(user_id)


@router.get("/{user_id}/recommendations", response_model=list[AdaptiveRecommendation])
async def get_recommendations(
    user_id: str,
    limit: int = Query(default=settings.RECOMMENDATION_LIMIT, ge=1, le=50),
    service: PerformanceService = Depends(get_performance_service)
):
    """Exercises to practise next."""
    return service.generate_recommendations(user_id, limit)


@router.get("/{user_id}/exercises/{exercise_id}", response_model=PerformanceData)
async def get_exercise_performance(
    user_id: str,
    exercise_id: str,
    service: PerformanceService = Depends(get_performance_service)
):
    """Results of one exercise."""
    data = service.get_performance_data(user_id, exercise_id)
    if data is None:
        raise HTTPException(status_code=404, detail=f"No performance data for '{exercise_id}'")
    return data
