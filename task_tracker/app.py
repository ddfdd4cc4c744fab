import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from task_tracker.api import auth_bp, tasks_bp
from task_tracker.config.settings import Settings
from task_tracker.middleware.auth_middleware import EXTENSION_KEY
from task_tracker.middleware.error_middleware import configure_logging, register_error_handlers
from task_tracker.services.auth_service import AuthProvider, AuthService, FirebaseAuthProvider, HeaderAuthProvider
from task_tracker.services.task_service import TaskService
from task_tracker.services.task_store import TaskStore
from task_tracker.stores.memory_store import InMemoryTaskStore

logger = logging.getLogger(__name__)


def _default_collaborators(settings: Settings):
    """Store and auth provider picked from the environment"""
    if settings.DEV_MODE:
        logger.warning("DEV_MODE enabled: in-memory task store, X-User-Id authentication")
        return InMemoryTaskStore(), HeaderAuthProvider()

    # Firebase imports are deferred so DEV_MODE never touches credentials
    from task_tracker.config.firebase_config import get_db, init_firebase
    from task_tracker.stores.firestore_store import FirestoreTaskStore

    init_firebase(settings)
    return FirestoreTaskStore(get_db(), settings.TASKS_COLLECTION), FirebaseAuthProvider()


def create_app(
    settings: Optional[Settings] = None,
    task_store: Optional[TaskStore] = None,
    auth_provider: Optional[AuthProvider] = None,
    auth_service: Optional[AuthService] = None,
):
    """Create and configure the Flask application.

    Args:
        settings: Defaults to Settings() read from the environment.
        task_store: Overrides the store chosen from settings.
        auth_provider: Overrides the provider chosen from settings.
        auth_service: Overrides the Firebase sign up / sign in service.
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    if task_store is None or auth_provider is None:
        default_store, default_provider = _default_collaborators(settings)
        task_store = task_store or default_store
        auth_provider = auth_provider or default_provider

    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.SECRET_KEY

    CORS(app,
         resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
         allow_headers=["Content-Type", "Authorization", "X-User-Id"],
         methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"])

    app.extensions[EXTENSION_KEY] = {
        'settings': settings,
        'task_service': TaskService(task_store),
        'auth_provider': auth_provider,
        'auth_service': auth_service or AuthService(
            settings.FIREBASE_WEB_API_KEY,
            auth_emulator_host=settings.FIREBASE_AUTH_EMULATOR_HOST,
        ),
    }

    @app.get("/")
    def health():
        return jsonify({
            "status": "ok",
            "service": "task-tracker-api",
            "store": type(task_store).__name__,
        }), 200

    register_error_handlers(app)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(auth_bp)

    return app


def main():
    """Main entry point for running the application."""
    settings = Settings()
    settings.validate()
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.PORT, debug=settings.DEBUG)


if __name__ == "__main__":  # pragma: no cover
    main()
