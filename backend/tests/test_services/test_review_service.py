"""
Tests for the Review Service
"""
import pytest
from datetime import timedelta

from dutch_tutor.services.review_service import ReviewItemNotFoundError, ReviewService


@pytest.fixture
def service(repository):
    return ReviewService(repository)


class TestReviewService:

    def test_add_and_list(self, service):
        item = service.add_item("user_1", "fiets", "bicycle", "Ik ga met de fiets.")
        items = service.list_items("user_1")
        assert [i.id for i in items] == [item.id]
        assert items[0].translation == "bicycle"

    def test_add_existing_word_returns_it(self, service):
        first = service.add_item("user_1", "fiets")
        second = service.add_item("user_1", " Fiets ")
        assert first.id == second.id
        assert len(service.list_items("user_1")) == 1

    def test_new_items_are_due(self, service):
        service.add_item("user_1", "fiets")
        assert len(service.due_items("user_1")) == 1

    def test_review_persists_schedule(self, service, fixed_now):
        item = service.add_item("user_1", "fiets")
        result = service.review("user_1", item.id, 5, fixed_now)

        assert result.new_repetition_count == 1
        stored = service.list_items("user_1")[0]
        assert stored.next_review_date == fixed_now + timedelta(days=1)
        assert service.due_items("user_1", fixed_now) == []

    def test_review_unknown_item(self, service):
        with pytest.raises(ReviewItemNotFoundError):
            service.review("user_1", "srs-missing", 4)

    def test_invalid_items_are_skipped(self, service, repository):
        repository.save("srs_items_user_1", [{"id": "broken"}])
        assert service.list_items("user_1") == []
