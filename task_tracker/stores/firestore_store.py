"""
Firestore-backed TaskStore.

Documents live in a single collection keyed by task id. Ownership is
stored in ``owner_id`` and checked on every read and write. Firestore has
no substring operator, so ``search`` is applied to the owner's (already
status-filtered) documents after they are streamed.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions
from google.cloud.firestore_v1.base_query import FieldFilter

from task_tracker.models.task_model import TaskFilter, TaskRecord
from task_tracker.services.task_store import DeleteResult
from task_tracker.utils.errors import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (google_exceptions.GoogleAPICallError, google_exceptions.RetryError) as e:
        logger.error("Firestore %s failed: %s", operation, e)
        raise StoreUnavailable(f"Task store unavailable during {operation}") from e


class FirestoreTaskStore:
    """TaskStore over a ``firestore.client()`` instance"""

    def __init__(self, db, collection_name: str = "tasks"):
        self.db = db
        self.collection = db.collection(collection_name)

    def query(self, owner_id: str, task_filter: TaskFilter) -> List[TaskRecord]:
        q = self.collection.where(filter=FieldFilter("owner_id", "==", owner_id))
        if task_filter.status is not None:
            q = q.where(filter=FieldFilter("status", "==", task_filter.status.value))

        with _store_errors("query"):
            docs = list(q.stream())

        tasks = [TaskRecord.from_document(d.id, d.to_dict() or {}) for d in docs]
        return [task for task in tasks if task_filter.matches(task)]

    def find_one(self, task_id: str, owner_id: str) -> Optional[TaskRecord]:
        with _store_errors("find_one"):
            doc = self.collection.document(task_id).get()

        if not doc.exists:
            return None
        data = doc.to_dict() or {}
        if data.get("owner_id") != owner_id:
            return None
        return TaskRecord.from_document(doc.id, data)

    def insert(self, record: TaskRecord) -> TaskRecord:
        task_doc = record.to_document()
        task_doc["created_at"] = firestore.SERVER_TIMESTAMP
        task_doc["updated_at"] = firestore.SERVER_TIMESTAMP

        with _store_errors("insert"):
            # create() fails instead of overwriting an existing id
            self.collection.document(record.id).create(task_doc)

        logger.info("Task created id=%s owner=%s", record.id, record.owner_id)
        return record

    def delete_where(self, task_id: str, owner_id: str) -> DeleteResult:
        doc_ref = self.collection.document(task_id)

        with _store_errors("delete"):
            doc = doc_ref.get()
            if not doc.exists or (doc.to_dict() or {}).get("owner_id") != owner_id:
                return DeleteResult(affected_count=0)
            doc_ref.delete()

        logger.info("Task deleted id=%s owner=%s", task_id, owner_id)
        return DeleteResult(affected_count=1)

    def save(self, record: TaskRecord) -> Optional[TaskRecord]:
        doc_ref = self.collection.document(record.id)

        with _store_errors("save"):
            doc = doc_ref.get()
            if not doc.exists:
                return None
            data = doc.to_dict() or {}
            if data.get("owner_id") != record.owner_id:
                return None
            try:
                # update() refuses to recreate a document deleted since the read
                doc_ref.update({
                    "status": record.status.value,
                    "updated_at": firestore.SERVER_TIMESTAMP,
                })
            except google_exceptions.NotFound:
                logger.info("Task %s vanished before status update", record.id)
                return None

        data["status"] = record.status.value
        return TaskRecord.from_document(doc.id, data)
