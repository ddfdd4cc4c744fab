"""Unit tests for stores/memory_store.py"""
import threading

import pytest

from task_tracker.models.task_model import TaskFilter, TaskRecord, TaskStatus
from task_tracker.stores.memory_store import InMemoryTaskStore


def _task(task_id, owner_id="owner-1", title="title", description="", status=TaskStatus.OPEN):
    return TaskRecord(id=task_id, title=title, description=description, status=status, owner_id=owner_id)


class TestInMemoryTaskStore:
    def test_insert_and_find_one(self, store):
        task = store.insert(_task("t1"))
        assert store.find_one("t1", "owner-1") == task

    def test_find_one_scoped_by_owner(self, store):
        store.insert(_task("t1"))
        assert store.find_one("t1", "owner-2") is None
        assert store.find_one("missing", "owner-1") is None

    def test_duplicate_id_rejected(self, store):
        store.insert(_task("t1"))
        with pytest.raises(ValueError):
            store.insert(_task("t1", owner_id="owner-2"))

    def test_query_filters_owner_status_search(self, store):
        store.insert(_task("t1", title="Buy milk"))
        store.insert(_task("t2", title="Walk dog", status=TaskStatus.DONE))
        store.insert(_task("t3", title="Buy milk", owner_id="owner-2"))

        assert [t.id for t in store.query("owner-1", TaskFilter())] == ["t1", "t2"]
        assert [t.id for t in store.query("owner-1", TaskFilter(status=TaskStatus.DONE))] == ["t2"]
        assert [t.id for t in store.query("owner-1", TaskFilter(search="MILK"))] == ["t1"]
        assert store.query("owner-3", TaskFilter()) == []

    def test_delete_where(self, store):
        store.insert(_task("t1"))

        assert store.delete_where("t1", "owner-2").affected_count == 0
        assert [t.id for t in store.query("owner-1", TaskFilter())] == ["t1"]
        assert store.delete_where("t1", "owner-1").affected_count == 1
        assert store.query("owner-1", TaskFilter()) == []
        assert store.delete_where("t1", "owner-1").affected_count == 0

    def test_save_updates_status_only(self, store):
        store.insert(_task("t1", title="original"))
        tampered = TaskRecord(id="t1", title="changed", description="changed",
                              status=TaskStatus.DONE, owner_id="owner-1")

        saved = store.save(tampered)

        assert saved.status is TaskStatus.DONE
        assert saved.title == "original"
        assert store.find_one("t1", "owner-1") == saved

    def test_save_requires_matching_owner(self, store):
        store.insert(_task("t1"))
        assert store.save(_task("t1", owner_id="owner-2", status=TaskStatus.DONE)) is None
        assert store.find_one("t1", "owner-1").status is TaskStatus.OPEN

    def test_save_after_delete_matches_nothing(self, store):
        store.insert(_task("t1"))
        store.delete_where("t1", "owner-1")
        assert store.save(_task("t1", status=TaskStatus.DONE)) is None
        assert store.query("owner-1", TaskFilter()) == []

    def test_concurrent_inserts(self):
        store = InMemoryTaskStore()

        def worker(n):
            for i in range(50):
                store.insert(_task(f"{n}-{i}", owner_id=f"owner-{n}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sum(len(store.query(f"owner-{n}", TaskFilter())) for n in range(8)) == 400
        assert len(store.query("owner-3", TaskFilter())) == 50
