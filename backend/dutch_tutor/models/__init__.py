"""
Pydantic Models Module
Contains data models for all entities in the application.
"""
from dutch_tutor.models.exercise import (
    ExerciseData, ExerciseQuestion, FeedbackReport, QuestionFeedback, QuestionType, UserAnswers
)
from dutch_tutor.models.gamification import Achievement, Badge, GamificationState, StreakData
from dutch_tutor.models.learning_path import LearningPath, LearningPathStep
from dutch_tutor.models.cefr import CEFRDescriptor, CEFRLevel
from dutch_tutor.models.review import SRSItem, SRSReviewResult
from dutch_tutor.models.performance import AdaptiveRecommendation, PerformanceData, WeakPoint

__all__ = [
    "ExerciseData", "ExerciseQuestion", "FeedbackReport", "QuestionFeedback", "QuestionType", "UserAnswers",
    "Achievement", "Badge", "GamificationState", "StreakData",
    "LearningPath", "LearningPathStep",
    "CEFRDescriptor", "CEFRLevel",
    "SRSItem", "SRSReviewResult",
    "AdaptiveRecommendation", "PerformanceData", "WeakPoint"
]
