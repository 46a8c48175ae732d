"""
Tests for the Learning Path Service
"""
import pytest

from dutch_tutor.data.learning_paths import LEARNING_PATHS
from dutch_tutor.services.learning_path_service import LearningPathService, StepNotFoundError


@pytest.fixture
def service(repository):
    return LearningPathService(repository)


class TestLearningPathService:

    def test_list_paths(self, service):
        paths = service.list_paths()
        assert [p.id for p in paths] == ["inburgering-writing", "daily-conversation"]
        assert len(paths[0].steps) == 4
        assert len(paths[1].steps) == 3

    def test_unknown_path(self, service):
        assert service.load_progress("user_1", "unknown") is None
        assert service.next_step("user_1", "unknown") is None
        assert service.complete_step("user_1", "unknown", "step-1") is None

    def test_fresh_progress_is_definition(self, service):
        path = service.load_progress("user_1", "daily-conversation")
        assert path.target_level.value == "A2"
        assert not any(s.completed for s in path.steps)
        assert service.next_step("user_1", "daily-conversation").id == "step-1"

    def test_complete_step(self, service, fixed_now):
        path = service.complete_step("user_1", "daily-conversation", "step-1", fixed_now)

        assert path.steps[0].completed is True
        assert path.steps[0].completed_at == fixed_now
        assert path.started_at == fixed_now
        assert path.completed_at is None
        assert service.next_step("user_1", "daily-conversation").id == "step-2"

    def test_complete_all_steps_completes_path(self, service, fixed_now):
        for step_id in ("step-1", "step-2", "step-3"):
            path = service.complete_step("user_1", "daily-conversation", step_id, fixed_now)

        assert path.completed_at == fixed_now
        assert path.progress_percentage == 100.0
        assert service.next_step("user_1", "daily-conversation") is None

    def test_unknown_step(self, service):
        with pytest.raises(StepNotFoundError):
            service.complete_step("user_1", "daily-conversation", "step-99")

    def test_progress_does_not_touch_definitions(self, service):
        service.complete_step("user_1", "daily-conversation", "step-1")
        assert not any(s.completed for s in LEARNING_PATHS[1].steps)
        assert service.load_progress("user_2", "daily-conversation").steps[0].completed is False

    def test_reset(self, service):
        service.complete_step("user_1", "daily-conversation", "step-1")
        service.reset("user_1", "daily-conversation")
        assert service.next_step("user_1", "daily-conversation").id == "step-1"

    def test_corrupt_progress_falls_back_to_definition(self, service, repository):
        repository.save("learning_path_user_1_daily-conversation", {"id": "daily-conversation"})
        path = service.load_progress("user_1", "daily-conversation")
        assert len(path.steps) == 3


class TestStepAutoCompletion:

    def test_single_exercise_step(self, service, fixed_now):
        completed = service.complete_steps_for_exercise(
            "user_1", "modal-particles", {"modal-particles": 75.0}, fixed_now
        )
        assert completed == [("daily-conversation", "step-3")]
        path = service.load_progress("user_1", "daily-conversation")
        assert path.steps[2].completed is True
        assert path.steps[2].completed_at == fixed_now

    def test_average_below_threshold(self, service):
        completed = service.complete_steps_for_exercise("user_1", "modal-particles", {"modal-particles": 69.5})
        assert completed == []

    def test_every_exercise_of_the_step_is_required(self, service):
        averages = {"social-scripts": 90.0}
        assert service.complete_steps_for_exercise("user_1", "social-scripts", averages) == []

        averages["speech-acts"] = 70.0
        completed = service.complete_steps_for_exercise("user_1", "speech-acts", averages)
        assert completed == [("daily-conversation", "step-2")]

    def test_completed_step_is_not_completed_again(self, service, fixed_now):
        averages = {"modal-particles": 100.0}
        service.complete_steps_for_exercise("user_1", "modal-particles", averages, fixed_now)
        assert service.complete_steps_for_exercise("user_1", "modal-particles", averages) == []

    def test_unrelated_exercise(self, service):
        assert service.complete_steps_for_exercise("user_1", "unknown-exercise", {"unknown-exercise": 100.0}) == []
