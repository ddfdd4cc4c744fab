"""Unit tests for models/task_model.py"""
import dataclasses

import pytest

from task_tracker.models.task_model import CreateTaskInput, TaskFilter, TaskRecord, TaskStatus


@pytest.fixture
def record():
    return TaskRecord(id="t1", title="Buy milk", description="2% from the corner shop",
                      status=TaskStatus.OPEN, owner_id="user-alice")


class TestTaskRecord:
    def test_immutable(self, record):
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.owner_id = "user-bob"

    def test_with_status_returns_copy(self, record):
        updated = record.with_status(TaskStatus.DONE)
        assert updated.status is TaskStatus.DONE
        assert record.status is TaskStatus.OPEN
        assert dataclasses.replace(updated, status=TaskStatus.OPEN) == record

    def test_public_dict_hides_owner(self, record):
        data = record.to_dict()
        assert data == {
            "task_id": "t1",
            "title": "Buy milk",
            "description": "2% from the corner shop",
            "status": "OPEN",
        }

    def test_from_document(self):
        task = TaskRecord.from_document("t9", {"title": "x", "status": "IN_PROGRESS", "owner_id": "u"})
        assert task.status is TaskStatus.IN_PROGRESS
        assert task.description == ""
        assert task.id == "t9"

    def test_document_carries_owner(self, record):
        assert record.to_document()["owner_id"] == "user-alice"


class TestTaskFilter:
    def test_empty_filter_matches(self, record):
        assert TaskFilter().matches(record)

    def test_status_exact(self, record):
        assert TaskFilter(status=TaskStatus.OPEN).matches(record)
        assert not TaskFilter(status=TaskStatus.DONE).matches(record)

    @pytest.mark.parametrize("search", ["milk", "MILK", "corner SHOP", "2%"])
    def test_search_title_or_description(self, record, search):
        assert TaskFilter(search=search).matches(record)

    def test_search_miss(self, record):
        assert not TaskFilter(search="bread").matches(record)

    def test_status_and_search_both_required(self, record):
        assert not TaskFilter(status=TaskStatus.DONE, search="milk").matches(record)


class TestCreateTaskInput:
    def test_from_payload_drops_extra_fields(self):
        task_input = CreateTaskInput.from_payload({"title": "t", "status": "DONE", "owner_id": "x"})
        assert task_input == CreateTaskInput(title="t", description="")

    def test_from_payload_missing_fields(self):
        assert CreateTaskInput.from_payload({}) == CreateTaskInput(title="", description="")
