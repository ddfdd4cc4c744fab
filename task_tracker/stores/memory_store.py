import logging
import threading
from typing import Dict, List, Optional

from task_tracker.models.task_model import TaskFilter, TaskRecord
from task_tracker.services.task_store import DeleteResult

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """Process-local TaskStore used in DEV_MODE and by the unit tests.

    A single lock makes each operation atomic under Flask's threaded server.
    Insertion order is kept so listings are stable.
    """

    def __init__(self):
        self._tasks: Dict[str, TaskRecord] = {}
        self._lock = threading.Lock()

    def query(self, owner_id: str, task_filter: TaskFilter) -> List[TaskRecord]:
        with self._lock:
            return [
                task for task in self._tasks.values()
                if task.owner_id == owner_id and task_filter.matches(task)
            ]

    def find_one(self, task_id: str, owner_id: str) -> Optional[TaskRecord]:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None or task.owner_id != owner_id:
            return None
        return task

    def insert(self, record: TaskRecord) -> TaskRecord:
        with self._lock:
            if record.id in self._tasks:
                raise ValueError(f"Task {record.id} already exists")
            self._tasks[record.id] = record
        logger.debug("Task inserted id=%s owner=%s", record.id, record.owner_id)
        return record

    def delete_where(self, task_id: str, owner_id: str) -> DeleteResult:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None or task.owner_id != owner_id:
                return DeleteResult(affected_count=0)
            del self._tasks[task_id]
        logger.debug("Task deleted id=%s owner=%s", task_id, owner_id)
        return DeleteResult(affected_count=1)

    def save(self, record: TaskRecord) -> Optional[TaskRecord]:
        with self._lock:
            current = self._tasks.get(record.id)
            if current is None or current.owner_id != record.owner_id:
                return None
            # Only status is mutable after creation
            updated = current.with_status(record.status)
            self._tasks[record.id] = updated
        logger.debug("Task saved id=%s status=%s", record.id, record.status.value)
        return updated
