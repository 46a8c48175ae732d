"""
Tests for the Feedback Service
Answer grading per question type, scoring and score bands.
"""
import pytest

from dutch_tutor.models.exercise import ExerciseData, ExerciseQuestion, QuestionType
from dutch_tutor.services.feedback_service import (
    calculate_score,
    compose_feedback,
    default_explanation,
    generate_feedback,
    grade_question,
)


def make_question(qtype, correct_answer, **extra):
    return ExerciseQuestion(id="q", type=qtype, question_text="?", correct_answer=correct_answer, **extra)


class TestTextGrading:
    """fill, multiple-choice, transformation and image-description"""

    @pytest.mark.parametrize("qtype", [
        QuestionType.FILL,
        QuestionType.MULTIPLE_CHOICE,
        QuestionType.TRANSFORMATION,
        QuestionType.IMAGE_DESCRIPTION,
    ])
    def test_case_and_whitespace_insensitive(self, qtype):
        question = make_question(qtype, "Het Huis")
        assert grade_question(question, "  het huis ").is_correct is True

    def test_different_text_is_incorrect(self):
        question = make_question(QuestionType.FILL, "huis")
        assert grade_question(question, "huizen").is_correct is False

    def test_punctuation_matters_for_fill(self):
        question = make_question(QuestionType.FILL, "ja")
        assert grade_question(question, "ja!").is_correct is False

    def test_list_answer_to_text_question_is_incorrect(self):
        question = make_question(QuestionType.FILL, "huis")
        assert grade_question(question, ["huis"]).is_correct is False

    def test_list_correct_answer_is_stringified(self):
        question = make_question(QuestionType.FILL, ["de", "het"])
        assert grade_question(question, "de,het").is_correct is True


class TestCheckboxGrading:

    def test_order_independent(self):
        question = make_question(QuestionType.CHECKBOX, ["tafel", "stoel", "lamp"])
        assert grade_question(question, ["lamp", "tafel", "stoel"]).is_correct is True

    def test_missing_option_is_incorrect(self):
        question = make_question(QuestionType.CHECKBOX, ["tafel", "stoel"])
        assert grade_question(question, ["tafel"]).is_correct is False

    def test_extra_option_is_incorrect(self):
        question = make_question(QuestionType.CHECKBOX, ["tafel"])
        assert grade_question(question, ["tafel", "stoel"]).is_correct is False

    def test_string_answer_treated_as_empty(self):
        question = make_question(QuestionType.CHECKBOX, ["tafel"])
        assert grade_question(question, "tafel").is_correct is False

    def test_does_not_reorder_the_question(self):
        question = make_question(QuestionType.CHECKBOX, ["z", "a"])
        grade_question(question, ["a", "z"])
        assert question.correct_answer == ["z", "a"]

    def test_unanswered_echoes_empty_list(self):
        question = make_question(QuestionType.CHECKBOX, ["tafel"])
        feedback = grade_question(question, None)
        assert feedback.is_correct is False
        assert feedback.user_answer == []


class TestSwipeSortGrading:

    def make(self, items, correct):
        return make_question(QuestionType.SWIPE_SORT, correct, swipe_targets=["de", "het"], swipe_items=items)

    def test_all_targets_right(self):
        question = self.make(
            [{"word": "fiets", "correct_target": "de"}, {"word": "kind", "correct_target": "het"}],
            ["de", "het"]
        )
        assert grade_question(question, ["de", "het"]).is_correct is True

    def test_one_target_wrong(self):
        question = self.make(
            [{"word": "fiets", "correct_target": "de"}, {"word": "kind", "correct_target": "het"}],
            ["de", "het"]
        )
        assert grade_question(question, ["de", "de"]).is_correct is False

    def test_item_without_target_uses_correct_answer(self):
        question = self.make([{"word": "fiets"}, {"word": "kind"}], ["de", "het"])
        assert grade_question(question, ["de", "het"]).is_correct is True
        assert grade_question(question, ["het", "het"]).is_correct is False

    def test_length_mismatch(self):
        question = self.make([{"word": "fiets", "correct_target": "de"}], ["de"])
        assert grade_question(question, ["de", "het"]).is_correct is False

    def test_without_swipe_items_is_incorrect(self):
        question = make_question(QuestionType.SWIPE_SORT, ["de"])
        assert grade_question(question, ["de"]).is_correct is False


class TestMemoryMatchGrading:

    def test_same_order(self):
        question = make_question(QuestionType.MEMORY_MATCH, ["a-1", "b-2"])
        assert grade_question(question, ["a-1", "b-2"]).is_correct is True

    def test_order_matters(self):
        question = make_question(QuestionType.MEMORY_MATCH, ["a-1", "b-2"])
        assert grade_question(question, ["b-2", "a-1"]).is_correct is False

    def test_empty_list_answer_is_echoed(self):
        question = make_question(QuestionType.MEMORY_MATCH, ["a-1"])
        feedback = grade_question(question, [])
        assert feedback.is_correct is False
        assert feedback.user_answer == []


class TestJigsawGrading:

    def make(self, order):
        return make_question(QuestionType.JIGSAW, ["ik", "ga"], jigsaw_correct_order=order)

    def test_string_indices_are_parsed(self):
        assert grade_question(self.make([1, 0, 2]), ["1", "0", "2"]).is_correct is True

    def test_wrong_order(self):
        assert grade_question(self.make([1, 0, 2]), ["0", "1", "2"]).is_correct is False

    def test_unparsable_entries_are_dropped(self):
        assert grade_question(self.make([1, 0]), ["1", "x", "0"]).is_correct is True

    def test_leading_digits_are_parsed(self):
        assert grade_question(self.make([2, 10]), ["2", "10abc"]).is_correct is True

    def test_missing_order_on_question(self):
        question = make_question(QuestionType.JIGSAW, ["ik"])
        assert grade_question(question, []).is_correct is True
        assert grade_question(question, ["0"]).is_correct is False


class TestDictationGrading:

    def test_case_and_punctuation_ignored(self):
        question = make_question(QuestionType.DICTATION, "hallo wereld")
        assert grade_question(question, "Hallo, wereld!").is_correct is True

    def test_spelling_is_not_tolerated(self):
        question = make_question(QuestionType.DICTATION, "hallo wereld")
        assert grade_question(question, "Halo wereld").is_correct is False

    def test_punctuation_in_correct_answer_ignored(self):
        question = make_question(QuestionType.DICTATION, "Goedemorgen; hoe gaat het?")
        assert grade_question(question, "goedemorgen hoe gaat het").is_correct is True


class TestWordMathGrading:

    def test_whitespace_around_delimiter_ignored(self):
        question = make_question(QuestionType.WORD_MATH, "fiets|pad")
        assert grade_question(question, "fiets | pad").is_correct is True

    def test_case_ignored(self):
        question = make_question(QuestionType.WORD_MATH, "fiets|pad")
        assert grade_question(question, "Fiets|Pad").is_correct is True

    def test_part_count_must_match(self):
        question = make_question(QuestionType.WORD_MATH, "fiets|pad")
        assert grade_question(question, "fietspad").is_correct is False

    def test_wrong_part(self):
        question = make_question(QuestionType.WORD_MATH, "fiets|pad")
        assert grade_question(question, "fiets|weg").is_correct is False


class TestQuestionFeedback:

    def test_explanation_from_question(self):
        question = make_question(QuestionType.FILL, "huis", explanation="Het huis.")
        assert grade_question(question, "huis").explanation == "Het huis."

    def test_generated_explanation(self):
        question = make_question(QuestionType.FILL, "huis")
        assert grade_question(question, "x").explanation == "Het correcte antwoord is: huis"

    def test_generated_explanation_for_list(self):
        assert default_explanation(["tafel", "stoel"]) == "Het correcte antwoord is: tafel, stoel"

    def test_unanswered_text_question_echoes_empty_string(self):
        question = make_question(QuestionType.DICTATION, "hallo")
        feedback = grade_question(question)
        assert feedback.is_correct is False
        assert feedback.user_answer == ""

    def test_submitted_answer_is_echoed_unchanged(self):
        question = make_question(QuestionType.FILL, "huis")
        assert grade_question(question, "  Huis ").user_answer == "  Huis "

    @pytest.mark.parametrize("answer", [42, {"a": 1}, ["x", 3], 3.5])
    def test_malformed_answers_never_raise(self, answer):
        for qtype in QuestionType:
            question = make_question(qtype, ["a"], swipe_items=[{"word": "a"}], jigsaw_correct_order=[0])
            assert grade_question(question, answer).is_correct is False

    def test_every_question_type_has_a_rule(self):
        from dutch_tutor.services.feedback_service import COMPARATORS
        assert set(COMPARATORS) == set(QuestionType)


class TestScore:

    def test_empty_exercise_scores_zero(self):
        report = generate_feedback(ExerciseData(questions=[]), {})
        assert report.score == 0
        assert report.total_questions == 0
        assert report.correct_answers == 0

    def test_rounds_half_up(self):
        assert calculate_score(1, 8) == 13
        assert calculate_score(2, 3) == 67
        assert calculate_score(1, 3) == 33

    def test_all_correct_is_100(self, sample_exercise, all_correct_answers):
        report = generate_feedback(sample_exercise, all_correct_answers)
        assert report.correct_answers == 10
        assert report.score == 100
        assert all(f.is_correct for f in report.question_feedback)

    def test_no_answers(self, sample_exercise):
        report = generate_feedback(sample_exercise, {})
        assert report.correct_answers == 0
        assert report.score == 0
        assert len(report.question_feedback) == 10

    def test_correct_count_matches_feedback(self, sample_exercise, all_correct_answers):
        answers = dict(all_correct_answers)
        answers["q7"] = "Halo wereld"
        answers["q3"] = ["tafel"]
        answers.pop("q1")
        report = generate_feedback(sample_exercise, answers)
        assert report.correct_answers == sum(f.is_correct for f in report.question_feedback)
        assert report.correct_answers == 7
        assert report.score == 70

    def test_feedback_in_question_order(self, sample_exercise):
        report = generate_feedback(sample_exercise, {})
        assert [f.question_id for f in report.question_feedback] == [f"q{i}" for i in range(1, 11)]


class TestComposeFeedback:

    @pytest.mark.parametrize("score,tip_count,start", [
        (100, 1, "Uitstekend"),
        (90, 1, "Uitstekend"),
        (89, 2, "Goed gedaan"),
        (80, 2, "Goed gedaan"),
        (79, 3, "Niet slecht"),
        (60, 3, "Niet slecht"),
        (59, 3, "Dit onderwerp"),
        (0, 3, "Dit onderwerp"),
    ])
    def test_score_bands(self, score, tip_count, start):
        general, tips = compose_feedback(score)
        assert general.startswith(start)
        assert len(tips) == tip_count

    def test_tips_are_copies(self):
        _, tips = compose_feedback(95)
        tips.append("extra")
        assert len(compose_feedback(95)[1]) == 1

    def test_report_uses_band(self, sample_exercise, all_correct_answers):
        report = generate_feedback(sample_exercise, all_correct_answers)
        assert report.general_feedback == "Uitstekend werk! Je beheerst dit onderwerp goed."
        assert report.tips == ["Probeer de oefening nog een keer om je kennis te versterken."]
