"""
Persistence contract consumed by TaskService.

Every read and write takes the owner id explicitly; no call can reach a
record without naming who owns it. Implementations may raise
StoreUnavailable from any method.
"""
from dataclasses import dataclass
from typing import List, Optional, Protocol

from task_tracker.models.task_model import TaskFilter, TaskRecord


@dataclass(frozen=True)
class DeleteResult:
    affected_count: int


class TaskStore(Protocol):
    def query(self, owner_id: str, task_filter: TaskFilter) -> List[TaskRecord]:
        """Owner's tasks matching status (exact) and search (title or description)."""
        ...

    def find_one(self, task_id: str, owner_id: str) -> Optional[TaskRecord]: ...

    def insert(self, record: TaskRecord) -> TaskRecord: ...

    def delete_where(self, task_id: str, owner_id: str) -> DeleteResult: ...

    def save(self, record: TaskRecord) -> Optional[TaskRecord]:
        """Write the mutable fields of ``record``.

        The write only applies when a record with the same (id, owner_id)
        still exists; otherwise nothing changes and None is returned.
        """
        ...
