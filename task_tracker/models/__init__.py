from .task_model import CreateTaskInput, TaskFilter, TaskRecord, TaskStatus
from .user_model import Principal

__all__ = [
    "CreateTaskInput",
    "Principal",
    "TaskFilter",
    "TaskRecord",
    "TaskStatus",
]
