from .task_service import TaskService
from .task_store import DeleteResult, TaskStore

__all__ = ["DeleteResult", "TaskService", "TaskStore"]
