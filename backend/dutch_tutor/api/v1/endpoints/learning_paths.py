"""
Learning Path API Endpoints
REST API for learning paths and the learner's progress through them.
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from dutch_tutor.core.dependencies import get_learning_path_service
from dutch_tutor.models.learning_path import LearningPath
from dutch_tutor.schemas.learning_path import (
    LearningPathProgressResponse,
    LearningPathSummary,
    NextStepResponse,
)
from dutch_tutor.services.learning_path_service import (
    LearningPathService,
    StepNotFoundError,
)


logger = logging.getLogger(__name__)

router = APIRouter()


PATH_COMPLETED_MESSAGE = "Leerpad voltooid!"


def _progress_response(
    service: LearningPathService,
    user_id: str,
    path: LearningPath
) -> LearningPathProgressResponse:
    next_step = service.next_step(user_id, path.id)
    return LearningPathProgressResponse(
        user_id=user_id,
        path=path,
        progress_percentage=path.progress_percentage,
        next_step=next_step,
        message=PATH_COMPLETED_MESSAGE if next_step is None else None
    )


@router.get("/", response_model=list[LearningPathSummary])
async def list_learning_paths(
    service: LearningPathService = Depends(get_learning_path_service)
):
    """All available learning paths."""
    return [
        LearningPathSummary(
            id=p.id,
            name=p.name,
            description=p.description,
            target_level=p.target_level.value,
            total_steps=len(p.steps)
        )
        for p in service.list_paths()
    ]


@router.get("/{user_id}/{path_id}", response_model=LearningPathProgressResponse)
async def get_learning_path_progress(
    user_id: str,
    path_id: str,
    service: LearningPathService = Depends(get_learning_path_service)
):
    """The learner's progress through a path, with the next step to do."""
    path = service.load_progress(user_id, path_id)
    if path is None:
        raise HTTPException(status_code=404, detail=f"Learning path '{path_id}' not found")
    return _progress_response(service, user_id, path)


@router.get("/{user_id}/{path_id}/next-step", response_model=NextStepResponse)
async def get_next_learning_path_step(
    user_id: str,
    path_id: str,
    service: LearningPathService = Depends(get_learning_path_service)
):
    """The first step not completed yet."""
    if service.load_progress(user_id, path_id) is None:
        raise HTTPException(status_code=404, detail=f"Learning path '{path_id}' not found")
    next_step = service.next_step(user_id, path_id)
    return NextStepResponse(
        user_id=user_id,
        path_id=path_id,
        next_step=next_step,
        message=PATH_COMPLETED_MESSAGE if next_step is None else None
    )


@router.post(
    "/{user_id}/{path_id}/steps/{step_id}/complete",
    response_model=LearningPathProgressResponse
)
async def complete_learning_path_step(
    user_id: str,
    path_id: str,
    step_id: str,
    service: LearningPathService = Depends(get_learning_path_service)
):
    """Mark a step as completed."""
    try:
        path = service.complete_step(user_id, path_id, step_id)
    except StepNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if path is None:
        raise HTTPException(status_code=404, detail=f"Learning path '{path_id}' not found")
    return _progress_response(service, user_id, path)


@router.delete("/{user_id}/{path_id}", status_code=204)
async def reset_learning_path(
    user_id: str,
    path_id: str,
    service: LearningPathService = Depends(get_learning_path_service)
):
    """Forget the learner's progress on a path."""
    if service.load_progress(user_id, path_id) is None:
        raise HTTPException(status_code=404, detail=f"Learning path '{path_id}' not found")
    service.reset(user_id, path_id)
