"""Shared pytest configuration for integration tests (Firestore emulator)."""
import os
import uuid

import pytest
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def pytest_collection_modifyitems(config, items):
    """Integration tests only run against a live Firestore emulator"""
    if os.environ.get("FIRESTORE_EMULATOR_HOST"):
        return
    skip = pytest.mark.skip(reason="FIRESTORE_EMULATOR_HOST not set; run start_emulators.py first")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def firestore_db():
    """Firestore client bound to the emulator"""
    from task_tracker.config.firebase_config import get_db, init_firebase
    from task_tracker.config.settings import Settings

    os.environ.setdefault("GCLOUD_PROJECT", "demo-task-tracker")
    init_firebase(Settings())
    return get_db()


@pytest.fixture
def collection_name(firestore_db):
    """Unique collection per test, deleted afterwards"""
    name = f"tasks_it_{uuid.uuid4().hex[:12]}"
    yield name
    for doc in firestore_db.collection(name).stream():
        doc.reference.delete()


@pytest.fixture
def firestore_store(firestore_db, collection_name):
    from task_tracker.stores.firestore_store import FirestoreTaskStore
    return FirestoreTaskStore(firestore_db, collection_name)
