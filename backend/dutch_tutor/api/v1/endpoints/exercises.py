"""
Exercise API Endpoints
REST API for grading exercises and composing feedback.
"""
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException
import logging

from dutch_tutor.core.dependencies import (
    get_gamification_service,
    get_learning_path_service,
    get_performance_service,
)
from dutch_tutor.models.exercise import FeedbackReport
from dutch_tutor.schemas.exercise import (
    CompletedStep,
    FeedbackRequest,
    RecordFeedbackRequest,
    RecordFeedbackResponse,
)
from dutch_tutor.schemas.gamification import ActivityResponse
from dutch_tutor.services.feedback_service import generate_feedback
from dutch_tutor.services.gamification_service import GamificationService
from dutch_tutor.services.learning_path_service import LearningPathService
from dutch_tutor.services.performance_service import PerformanceService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/feedback", response_model=FeedbackReport)
async def grade_exercise(request: FeedbackRequest):
    """
    Grade a submitted exercise.

    Every question is graded with the rule of its type. Unanswered
    questions count as incorrect.

    Returns:
    - Score (0-100) and number of correct answers
    - Feedback per question, with explanation
    - General feedback and tips for the score band
    """
    if not request.exercise.is_complete:
        logger.warning(f"Grading exercise with {len(request.exercise.questions)} questions")

    report = generate_feedback(request.exercise, request.answers)
    logger.info(f"Exercise graded: {report.correct_answers}/{report.total_questions} ({report.score}%)")
    return report


@router.post("/feedback/record", response_model=RecordFeedbackResponse)
async def grade_and_record_exercise(
    request: RecordFeedbackRequest,
    performance: PerformanceService = Depends(get_performance_service),
    gamification: GamificationService = Depends(get_gamification_service),
    learning_paths: LearningPathService = Depends(get_learning_path_service)
):
    """
    Grade a submitted exercise and record it for the learner.

    - The score is added to the exercise's performance data
    - Streak, points, badges and achievements are updated
    - Learning path steps whose exercises all average 70 or more are completed
    """
    report = generate_feedback(request.exercise, request.answers)
    now = datetime.utcnow()

    try:
        performance_data = performance.record_performance(
            request.user_id,
            request.exercise_id,
            report.score,
            report.total_questions,
            now
        )
        outcome = gamification.record_exercise(
            request.user_id,
            report.score,
            exercise_count=performance.exercise_count(request.user_id),
            now=now
        )
        completed = learning_paths.complete_steps_for_exercise(
            request.user_id,
            request.exercise_id,
            performance.average_scores(request.user_id),
            now
        )
    except Exception as e:
        logger.error(f"Error recording exercise for {request.user_id}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Error recording exercise: {str(e)}"
        )

    return RecordFeedbackResponse(
        report=report,
        performance=performance_data,
        gamification=ActivityResponse(**outcome),
        completed_steps=[CompletedStep(path_id=p, step_id=s) for p, s in completed]
    )
