import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from task_tracker.config.settings import Settings
from task_tracker.firebase_utils import get_firebase_credentials

logger = logging.getLogger(__name__)


def init_firebase(settings: Settings) -> None:
    """Initialize the default firebase_admin app once per process.

    With emulator hosts configured only a project id is needed; otherwise a
    service account certificate is loaded from the environment.
    """
    if firebase_admin._apps:
        return

    if settings.uses_emulators:
        project_id = settings.FIREBASE_PROJECT_ID or os.getenv('GCLOUD_PROJECT') or 'demo-task-tracker'
        os.environ.setdefault('GCLOUD_PROJECT', project_id)
        firebase_admin.initialize_app(options={'projectId': project_id})
        logger.info(
            "Firebase initialized for emulators firestore=%s auth=%s",
            settings.FIRESTORE_EMULATOR_HOST,
            settings.FIREBASE_AUTH_EMULATOR_HOST,
        )
        return

    cred = credentials.Certificate(get_firebase_credentials())
    options = {'projectId': settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    firebase_admin.initialize_app(cred, options)
    logger.info("Firebase initialized for project %s", settings.FIREBASE_PROJECT_ID)


def get_db():
    """Firestore client bound to the default app"""
    return firestore.client()
