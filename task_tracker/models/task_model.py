from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class TaskStatus(str, Enum):
    """Task lifecycle status. Every status can move to every other one."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


@dataclass(frozen=True)
class TaskRecord:
    """A task owned by exactly one principal.

    Only ``status`` changes after creation, and only through ``with_status``,
    which hands back a new record instead of mutating this one.
    """

    id: str
    title: str
    description: str
    status: TaskStatus
    owner_id: str

    def with_status(self, status: TaskStatus) -> "TaskRecord":
        return replace(self, status=status)

    def to_dict(self) -> Dict[str, Any]:
        """Public representation; owner_id stays internal"""
        return {
            "task_id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
        }

    def to_document(self) -> Dict[str, Any]:
        """Storage representation (the document id carries ``id``)"""
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "owner_id": self.owner_id,
        }

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]) -> "TaskRecord":
        return cls(
            id=doc_id,
            title=data.get("title", ""),
            description=data.get("description") or "",
            status=TaskStatus(data.get("status", TaskStatus.OPEN.value)),
            owner_id=data["owner_id"],
        )


@dataclass(frozen=True)
class TaskFilter:
    status: Optional[TaskStatus] = None
    search: Optional[str] = None

    def matches(self, record: TaskRecord) -> bool:
        """status == X AND (title ~ search OR description ~ search)"""
        if self.status is not None and record.status != self.status:
            return False
        if self.search:
            needle = self.search.lower()
            return needle in record.title.lower() or needle in record.description.lower()
        return True


@dataclass(frozen=True)
class CreateTaskInput:
    title: str
    description: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CreateTaskInput":
        # Status and owner are never taken from the client
        return cls(
            title=payload.get("title") or "",
            description=payload.get("description", ""),
        )
