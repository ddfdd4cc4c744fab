"""Shared pytest configuration for unit tests."""
from unittest.mock import Mock

import pytest

from task_tracker.app import create_app
from task_tracker.config.settings import Settings
from task_tracker.models.task_model import CreateTaskInput
from task_tracker.models.user_model import Principal
from task_tracker.services.auth_service import HeaderAuthProvider
from task_tracker.services.task_service import TaskService
from task_tracker.stores.memory_store import InMemoryTaskStore

from fakes import missing_snapshot


@pytest.fixture
def alice():
    return Principal(id="user-alice", display_name="Alice")


@pytest.fixture
def bob():
    return Principal(id="user-bob", display_name="Bob")


@pytest.fixture
def store():
    """Fresh in-memory store for each test"""
    return InMemoryTaskStore()


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def alice_task(service, alice):
    """An OPEN task owned by alice"""
    return service.create_task(CreateTaskInput(title="buy milk", description="2%"), alice)


@pytest.fixture
def settings(monkeypatch):
    """Settings built from a controlled environment"""
    for var in ("FIRESTORE_EMULATOR_HOST", "FIREBASE_AUTH_EMULATOR_HOST", "FIREBASE_WEB_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.setenv("SECRET_KEY", "x" * 32)
    return Settings()


@pytest.fixture
def auth_service():
    """Mock AuthService; tests set sign_up / sign_in behaviour"""
    return Mock()


@pytest.fixture
def app(settings, store, auth_service):
    """Flask app wired to the in-memory store and X-User-Id authentication"""
    test_app = create_app(
        settings,
        task_store=store,
        auth_provider=HeaderAuthProvider(),
        auth_service=auth_service,
    )
    test_app.config['TESTING'] = True
    return test_app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def mock_db():
    """Firestore client double.

    collection() hands back one shared collection; where() chains onto it so
    every query ends at collection.stream(). Documents default to missing.
    """
    collection = Mock()
    collection.where.return_value = collection
    collection.stream.return_value = []
    collection.document.return_value.get.return_value = missing_snapshot()

    db = Mock()
    db.collection.return_value = collection
    return db
