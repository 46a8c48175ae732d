"""
Feedback Service
Grades a learner's answers against an exercise and composes the feedback report.

Each question is graded on its own, using the comparison rule of its
question type:

- checkbox: order-independent list comparison
- swipe-sort: every item must land on its target
- memory-match: pairs must be matched in the canonical order
- jigsaw: piece indices must reproduce the correct order
- dictation: case and punctuation are ignored, spelling is not
- word-math: compound parts split on "|" are compared one by one
- everything else: case-insensitive, trimmed string comparison

Grading never raises on malformed or missing answers; such answers are
simply graded as incorrect.
"""
import logging
import math
import re
from typing import Any, Callable

from dutch_tutor.models.exercise import (
    ExerciseData,
    ExerciseQuestion,
    FeedbackReport,
    QuestionFeedback,
    QuestionType,
)

logger = logging.getLogger(__name__)

DICTATION_PUNCTUATION = re.compile(r"[.,!?;:]")
WORD_MATH_DELIMITER = "|"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# ==================== NORMALIZATION HELPERS ====================

def _as_list(value: Any) -> list:
    """Return value when it is a list, an empty list otherwise."""
    return list(value) if isinstance(value, (list, tuple)) else []


def _stringify(value: Any) -> str:
    """Render a correct answer as text, joining lists with commas."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    if value is None:
        return ""
    return str(value)


def _normalize_user(answer: Any) -> str:
    return answer.strip().lower() if isinstance(answer, str) else ""


def _normalize_correct(answer: Any) -> str:
    return _stringify(answer).strip().lower()


def _parse_int(value: Any):
    """Parse a jigsaw piece index, None when it is not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else value
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ==================== COMPARISON RULES ====================

def _compare_checkbox(question: ExerciseQuestion, user_answer: Any) -> bool:
    try:
        user_list = sorted(_as_list(user_answer))
    except TypeError:
        return False
    correct_list = sorted(_as_list(question.correct_answer))
    return user_list == correct_list


def _compare_swipe_sort(question: ExerciseQuestion, user_answer: Any) -> bool:
    user_list = _as_list(user_answer)
    correct_list = _as_list(question.correct_answer)
    if not question.swipe_items or len(user_list) != len(correct_list):
        return False

    for idx, item in enumerate(question.swipe_items):
        user_target = user_list[idx] if idx < len(user_list) else None
        expected = item.correct_target or (correct_list[idx] if idx < len(correct_list) else None)
        if user_target != expected:
            return False
    return True


def _compare_memory_match(question: ExerciseQuestion, user_answer: Any) -> bool:
    return _as_list(user_answer) == _as_list(question.correct_answer)


def _compare_jigsaw(question: ExerciseQuestion, user_answer: Any) -> bool:
    parsed = (_parse_int(v) for v in _as_list(user_answer))
    user_order = [v for v in parsed if v is not None]
    return user_order == list(question.jigsaw_correct_order or [])


def _compare_dictation(question: ExerciseQuestion, user_answer: Any) -> bool:
    user_clean = DICTATION_PUNCTUATION.sub("", _normalize_user(user_answer))
    correct_clean = DICTATION_PUNCTUATION.sub("", _normalize_correct(question.correct_answer))
    return user_clean == correct_clean


def _compare_word_math(question: ExerciseQuestion, user_answer: Any) -> bool:
    user_parts = [p.strip() for p in _normalize_user(user_answer).split(WORD_MATH_DELIMITER)]
    correct_parts = [p.strip() for p in _normalize_correct(question.correct_answer).split(WORD_MATH_DELIMITER)]
    return user_parts == correct_parts


def _compare_text(question: ExerciseQuestion, user_answer: Any) -> bool:
    return _normalize_user(user_answer) == _normalize_correct(question.correct_answer)


COMPARATORS: dict[QuestionType, Callable[[ExerciseQuestion, Any], bool]] = {
    QuestionType.CHECKBOX: _compare_checkbox,
    QuestionType.SWIPE_SORT: _compare_swipe_sort,
    QuestionType.MEMORY_MATCH: _compare_memory_match,
    QuestionType.JIGSAW: _compare_jigsaw,
    QuestionType.DICTATION: _compare_dictation,
    QuestionType.WORD_MATH: _compare_word_math,
    QuestionType.FILL: _compare_text,
    QuestionType.MULTIPLE_CHOICE: _compare_text,
    QuestionType.TRANSFORMATION: _compare_text,
    QuestionType.IMAGE_DESCRIPTION: _compare_text,
}


# ==================== GRADER ====================

def default_explanation(correct_answer: Any) -> str:
    """Explanation used when a question does not provide its own."""
    if isinstance(correct_answer, (list, tuple)):
        rendered = ", ".join(_stringify(v) for v in correct_answer)
    else:
        rendered = _stringify(correct_answer)
    return f"Het correcte antwoord is: {rendered}"


def grade_question(question: ExerciseQuestion, user_answer: Any = None) -> QuestionFeedback:
    """
    Grade a single question.

    Args:
        question: The exercise question
        user_answer: The learner's answer, None when not answered

    Returns:
        QuestionFeedback echoing the submitted and correct answers
    """
    compare = COMPARATORS.get(question.type, _compare_text)
    is_correct = compare(question, user_answer)

    if user_answer is None or user_answer == "":
        user_answer = [] if question.type == QuestionType.CHECKBOX else ""

    return QuestionFeedback(
        question_id=question.id,
        is_correct=is_correct,
        user_answer=user_answer,
        correct_answer=question.correct_answer,
        explanation=question.explanation or default_explanation(question.correct_answer)
    )


def grade_answers(exercise: ExerciseData, user_answers: dict) -> list[QuestionFeedback]:
    """Grade every question of an exercise, in question order."""
    answers = user_answers or {}
    return [grade_question(q, answers.get(q.id)) for q in exercise.questions]


def calculate_score(correct_answers: int, total_questions: int) -> int:
    """Percentage of correct answers, rounded half up; 0 for an empty exercise."""
    if total_questions <= 0:
        return 0
    return _round_half_up(correct_answers / total_questions * 100)


# ==================== COMPOSER ====================

# (lower bound, general feedback, tips), highest band first
SCORE_BANDS: list[tuple[int, str, list[str]]] = [
    (
        90,
        "Uitstekend werk! Je beheerst dit onderwerp goed.",
        [
            "Probeer de oefening nog een keer om je kennis te versterken.",
        ],
    ),
    (
        80,
        "Goed gedaan! Je hebt een goed begrip van dit onderwerp.",
        [
            "Bekijk de vragen die je fout had en probeer de uitleg te begrijpen.",
            "Oefen nog een keer om je score te verbeteren.",
        ],
    ),
    (
        60,
        "Niet slecht, maar er is nog ruimte voor verbetering.",
        [
            "Lees de uitleg aandachtig door.",
            "Bekijk de correcte antwoorden en probeer te begrijpen waarom ze correct zijn.",
            "Oefen nog een keer om je kennis te versterken.",
        ],
    ),
    (
        0,
        "Dit onderwerp heeft nog wat extra aandacht nodig.",
        [
            "Lees de uitleg sectie goed door voordat je opnieuw begint.",
            "Neem de tijd om de correcte antwoorden en uitleg te bestuderen.",
            "Probeer de oefening opnieuw wanneer je je zekerder voelt.",
        ],
    ),
]


def compose_feedback(score: int) -> tuple[str, list[str]]:
    """
    Map a score to its general feedback sentence and improvement tips.

    Args:
        score: Score between 0 and 100

    Returns:
        Tuple of (general feedback, tips)
    """
    for lower_bound, general_feedback, tips in SCORE_BANDS:
        if score >= lower_bound:
            return general_feedback, list(tips)
    # Negative scores fall into the lowest band
    _, general_feedback, tips = SCORE_BANDS[-1]
    return general_feedback, list(tips)


def generate_feedback(exercise: ExerciseData, user_answers: dict) -> FeedbackReport:
    """
    Grade a submission and build the complete feedback report.

    Args:
        exercise: The exercise that was answered
        user_answers: Mapping of question id to submitted answer

    Returns:
        FeedbackReport with score, per-question feedback and tips
    """
    question_feedback = grade_answers(exercise, user_answers)
    total_questions = len(question_feedback)
    correct_answers = sum(1 for f in question_feedback if f.is_correct)
    score = calculate_score(correct_answers, total_questions)
    general_feedback, tips = compose_feedback(score)

    logger.debug(f"Graded exercise: {correct_answers}/{total_questions} correct, score {score}")

    return FeedbackReport(
        score=score,
        total_questions=total_questions,
        correct_answers=correct_answers,
        question_feedback=question_feedback,
        general_feedback=general_feedback,
        tips=tips
    )
