"""
FastAPI Dependencies
Dependency injection for the learner state repository and the services using it.
"""
import logging
from functools import lru_cache
from fastapi import Depends

from dutch_tutor.config import settings
from dutch_tutor.repositories.key_value import (
    InMemoryRepository,
    JsonFileRepository,
    KeyValueRepository,
)
from dutch_tutor.services.gamification_service import GamificationService
from dutch_tutor.services.learning_path_service import LearningPathService
from dutch_tutor.services.performance_service import PerformanceService
from dutch_tutor.services.review_service import ReviewService


logger = logging.getLogger(__name__)


@lru_cache()
def get_repository() -> KeyValueRepository:
    """
    Shared repository for learner state.

    JSON files in DATA_DIR when configured, process memory otherwise.
    """
    if settings.DATA_DIR:
        return JsonFileRepository(settings.DATA_DIR)
    logger.warning("DATA_DIR not set, learner state is kept in memory only")
    return InMemoryRepository()


def get_gamification_service(
    repository: KeyValueRepository = Depends(get_repository)
) -> GamificationService:
    return GamificationService(repository)


def get_learning_path_service(
    repository: KeyValueRepository = Depends(get_repository)
) -> LearningPathService:
    return LearningPathService(repository)


def get_performance_service(
    repository: KeyValueRepository = Depends(get_repository)
) -> PerformanceService:
    return PerformanceService(repository)


def get_review_service(
    repository: KeyValueRepository = Depends(get_repository)
) -> ReviewService:
    return ReviewService(repository)
