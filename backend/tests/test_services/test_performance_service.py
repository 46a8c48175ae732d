"""
Tests for the Performance Service
Per-exercise results, weak points and recommendations.
"""
import pytest
from datetime import timedelta

from dutch_tutor.services.performance_service import (
    PRACTICE_REASON,
    STRUGGLING_REASON,
    PerformanceService,
)


@pytest.fixture
def service(repository):
    return PerformanceService(repository)


class TestRecordPerformance:

    def test_first_attempt(self, service, fixed_now):
        data = service.record_performance("user_1", "plural-forms", 80, 10, fixed_now)
        assert data.exercise_id == "plural-forms"
        assert data.attempts == 1
        assert data.correct_answers == pytest.approx(8.0)
        assert data.average_score == pytest.approx(80.0)
        assert data.last_attempt == fixed_now

    def test_running_average(self, service, fixed_now):
        service.record_performance("user_1", "plural-forms", 80, 10, fixed_now)
        data = service.record_performance("user_1", "plural-forms", 60, 10, fixed_now + timedelta(hours=1))
        assert data.attempts == 2
        assert data.correct_answers == pytest.approx(14.0)
        assert data.average_score == pytest.approx(70.0)
        assert data.last_attempt == fixed_now + timedelta(hours=1)

    def test_persisted_per_exercise(self, service, fixed_now):
        service.record_performance("user_1", "plural-forms", 80, 10, fixed_now)
        service.record_performance("user_1", "prepositions", 40, 10, fixed_now)
        assert service.get_performance_data("user_1", "prepositions").average_score == pytest.approx(40.0)
        assert service.get_performance_data("user_1", "modal-particles") is None
        assert service.average_scores("user_1") == {
            "plural-forms": pytest.approx(80.0),
            "prepositions": pytest.approx(40.0),
        }

    def test_exercise_count_is_distinct(self, service, fixed_now):
        for _ in range(3):
            service.record_performance("user_1", "plural-forms", 80, 10, fixed_now)
        service.record_performance("user_1", "prepositions", 80, 10, fixed_now)
        assert service.exercise_count("user_1") == 2
        assert service.exercise_count("user_2") == 0

    def test_invalid_entries_are_skipped(self, service, repository):
        repository.save("performance_user_1", {
            "plural-forms": {"exercise_id": "plural-forms", "attempts": 1, "average_score": 80},
            "broken": {"attempts": -1}
        })
        assert [d.exercise_id for d in service.list_performance("user_1")] == ["plural-forms"]


class TestWeakPoints:

    def test_only_low_scores(self, service, fixed_now):
        service.record_performance("user_1", "plural-forms", 90, 10, fixed_now)
        service.record_performance("user_1", "prepositions", 50, 10, fixed_now)

        weak_points = service.identify_weak_points("user_1", fixed_now)

        assert [w.exercise_id for w in weak_points] == ["prepositions"]
        assert weak_points[0].topic == "prepositions"
        assert weak_points[0].error_rate == pytest.approx(0.5)
        assert weak_points[0].priority == pytest.approx(50.0)

    def test_stale_weak_point_gets_boost(self, service, fixed_now):
        service.record_performance("user_1", "prepositions", 50, 10, fixed_now)
        weak_points = service.identify_weak_points("user_1", fixed_now + timedelta(days=8))
        assert weak_points[0].priority == pytest.approx(70.0)

    def test_practised_within_a_week_no_boost(self, service, fixed_now):
        service.record_performance("user_1", "prepositions", 50, 10, fixed_now)
        weak_points = service.identify_weak_points("user_1", fixed_now + timedelta(days=6))
        assert weak_points[0].priority == pytest.approx(50.0)

    def test_sorted_by_priority(self, service, fixed_now):
        service.record_performance("user_1", "plural-forms", 60, 10, fixed_now)
        service.record_performance("user_1", "prepositions", 20, 10, fixed_now)
        service.record_performance("user_1", "collocations", 40, 10, fixed_now)
        weak_points = service.identify_weak_points("user_1", fixed_now)
        assert [w.exercise_id for w in weak_points] == ["prepositions", "collocations", "plural-forms"]

    def test_no_data(self, service):
        assert service.identify_weak_points("user_1") == []


class TestRecommendations:

    def test_reasons(self, service, fixed_now):
        service.record_performance("user_1", "prepositions", 40, 10, fixed_now)
        service.record_performance("user_1", "plural-forms", 60, 10, fixed_now)

        recommendations = service.generate_recommendations("user_1", now=fixed_now)

        assert [r.exercise_id for r in recommendations] == ["prepositions", "plural-forms"]
        assert recommendations[0].reason == STRUGGLING_REASON
        assert recommendations[1].reason == PRACTICE_REASON
        assert recommendations[0].priority == pytest.approx(60.0)

    def test_limit(self, service, fixed_now):
        for idx in range(7):
            service.record_performance("user_1", f"exercise-{idx}", 10 * idx, 10, fixed_now)
        assert len(service.generate_recommendations("user_1", now=fixed_now)) == 5
        assert len(service.generate_recommendations("user_1", limit=2, now=fixed_now)) == 2
