"""
Task Service
Owner-scoped queries and mutations over a TaskStore
"""
from typing import Any, List, Optional, Union

from task_tracker.models.task_model import CreateTaskInput, TaskFilter, TaskRecord, TaskStatus
from task_tracker.models.user_model import Principal
from task_tracker.services.task_store import TaskStore
from task_tracker.utils.errors import InvalidArgument, NotFound
from task_tracker.utils.validators import Helpers, Validators


class TaskService:
    """Business rules for a principal's private tasks.

    Holds no per-request state, so one instance can serve concurrent
    callers. Store errors are never caught here.
    """

    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self, task_filter: Optional[TaskFilter], principal: Principal) -> List[TaskRecord]:
        task_filter = self._normalize_filter(task_filter or TaskFilter())
        return list(self.store.query(principal.id, task_filter))

    def get_task_by_id(self, task_id: str, principal: Principal) -> TaskRecord:
        task = self.store.find_one(task_id, principal.id)

        # Same answer for "missing" and "someone else's"
        if task is None:
            raise NotFound(f'Task with ID "{task_id}" not found')
        return task

    def create_task(self, task_input: CreateTaskInput, principal: Principal) -> TaskRecord:
        if not Validators.validate_task_title(task_input.title):
            raise InvalidArgument('Task title must not be empty', value=task_input.title)
        if not Validators.validate_task_description(task_input.description):
            raise InvalidArgument('Task description must be a string', value=task_input.description)

        record = TaskRecord(
            id=Helpers.generate_id(),
            title=Helpers.sanitize_string(task_input.title),
            description=task_input.description or "",
            status=TaskStatus.OPEN,
            owner_id=principal.id,
        )
        return self.store.insert(record)

    def delete_task_by_id(self, task_id: str, principal: Principal) -> None:
        result = self.store.delete_where(task_id, principal.id)

        if result.affected_count == 0:
            raise NotFound(f'Task with ID "{task_id}" not found')

    def update_task_status(self, task_id: str, raw_status: Any, principal: Principal) -> TaskRecord:
        status = Validators.normalize_status(raw_status)
        task = self.get_task_by_id(task_id, principal)

        saved = self.store.save(task.with_status(status))

        # Deleted between the read and the write
        if saved is None:
            raise NotFound(f'Task with ID "{task_id}" not found')
        return saved

    @staticmethod
    def _normalize_filter(task_filter: TaskFilter) -> TaskFilter:
        status: Union[TaskStatus, str, None] = task_filter.status
        search = task_filter.search or None
        if status is not None and not isinstance(status, TaskStatus):
            status = Validators.normalize_status(status)
        return TaskFilter(status=status, search=search)
