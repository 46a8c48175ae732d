"""
Exercise Models
Defines exercise questions, learner answers and grading results.
"""
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Every exercise served to the learner holds this many questions
EXERCISE_QUESTION_COUNT = 10

AnswerValue = Union[str, list[str]]

# Mapping of question id to the submitted answer
UserAnswers = dict[str, AnswerValue]


class QuestionType(str, Enum):
    """Grading strategy attached to each exercise question"""
    FILL = "fill"
    MULTIPLE_CHOICE = "multiple-choice"
    CHECKBOX = "checkbox"
    SWIPE_SORT = "swipe-sort"
    MEMORY_MATCH = "memory-match"
    JIGSAW = "jigsaw"
    DICTATION = "dictation"
    IMAGE_DESCRIPTION = "image-description"
    TRANSFORMATION = "transformation"
    WORD_MATH = "word-math"


class ExerciseModel(BaseModel):
    """Base for exercise models: camelCase on the wire, immutable in memory"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True
    )


class SwipeItem(ExerciseModel):
    """A word to be swiped to one of the swipe targets (e.g. de/het)"""
    word: str
    correct_target: Optional[str] = None


class MemoryPair(ExerciseModel):
    """Two cards that belong together in a memory game"""
    card1: str
    card2: str


class WordMathPart(ExerciseModel):
    """Compound word built from two parts"""
    part1: str
    part2: str
    result: str


class ExerciseQuestion(ExerciseModel):
    """One graded item of an exercise"""
    id: str
    type: QuestionType
    question_text: str = ""
    options: Optional[list[str]] = Field(
        default=None,
        description="Selectable options for multiple-choice and checkbox"
    )
    correct_answer: AnswerValue = Field(
        ...,
        description="Single string, or list of strings for list-based types"
    )
    explanation: Optional[str] = None

    # swipe-sort
    swipe_targets: Optional[list[str]] = None
    swipe_items: Optional[list[SwipeItem]] = None

    # memory-match
    memory_pairs: Optional[list[MemoryPair]] = None

    # jigsaw
    jigsaw_pieces: Optional[list[str]] = None
    jigsaw_correct_order: Optional[list[int]] = None

    # dictation
    dictation_audio_url: Optional[str] = None
    dictation_text: Optional[str] = None

    # image-description
    image_url: Optional[str] = None
    image_description: Optional[str] = None

    # transformation
    source_tense: Optional[str] = None
    target_tense: Optional[str] = None
    source_text: Optional[str] = None

    # word-math
    word_math_parts: Optional[list[WordMathPart]] = None


class ExerciseData(ExerciseModel):
    """An exercise instance: introduction, explanation and its questions"""
    introduction: str = ""
    explanation: str = Field(default="", description="General explanation shown in the popup")
    instructions: Optional[str] = None
    questions: list[ExerciseQuestion] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True when the exercise holds the standard number of questions."""
        return len(self.questions) == EXERCISE_QUESTION_COUNT


class QuestionFeedback(ExerciseModel):
    """Grading result for one question"""
    question_id: str
    is_correct: bool
    user_answer: Any
    correct_answer: AnswerValue
    explanation: Optional[str] = None


class FeedbackReport(ExerciseModel):
    """Aggregate grading result of one submission"""
    score: int = Field(..., ge=0, le=100)
    total_questions: int = Field(..., ge=0)
    correct_answers: int = Field(..., ge=0)
    question_feedback: list[QuestionFeedback] = Field(default_factory=list)
    general_feedback: str
    tips: list[str] = Field(default_factory=list)
