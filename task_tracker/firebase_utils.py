"""Resolve Firebase service-account credentials for the task tracker."""
import json
import os
from typing import Any, Dict, Optional

TOKEN_URI = "https://oauth2.googleapis.com/token"


def _read_json_file(path: Optional[str]) -> Optional[Dict[str, Any]]:
    if path and os.path.exists(path):
        with open(path, 'r') as f:
            return json.load(f)
    return None


def get_firebase_credentials() -> Dict[str, Any]:
    """
    Load the service account used by firebase_admin.

    Sources, first match wins:
    1. TASK_TRACKER_CREDENTIALS_JSON - inline JSON or a path to a JSON file
    2. FIREBASE_CREDENTIALS_PATH - path to a service account file
    3. GOOGLE_APPLICATION_CREDENTIALS - path to a service account file
    4. FIREBASE_PROJECT_ID + FIREBASE_PRIVATE_KEY + FIREBASE_CLIENT_EMAIL

    Raises:
        ValueError: If none of the sources is usable
    """
    inline = os.getenv('TASK_TRACKER_CREDENTIALS_JSON')
    if inline:
        try:
            return json.loads(inline)
        except json.JSONDecodeError:
            creds = _read_json_file(inline)
            if creds is not None:
                return creds

    for var in ('FIREBASE_CREDENTIALS_PATH', 'GOOGLE_APPLICATION_CREDENTIALS'):
        creds = _read_json_file(os.getenv(var))
        if creds is not None:
            return creds

    project_id = os.getenv('FIREBASE_PROJECT_ID')
    private_key = os.getenv('FIREBASE_PRIVATE_KEY')
    client_email = os.getenv('FIREBASE_CLIENT_EMAIL')
    if project_id and private_key and client_email:
        return {
            "type": "service_account",
            "project_id": project_id,
            "private_key_id": os.getenv('FIREBASE_PRIVATE_KEY_ID'),
            # .env files carry the key with escaped newlines
            "private_key": private_key.replace('\\n', '\n'),
            "client_email": client_email,
            "client_id": os.getenv('FIREBASE_CLIENT_ID'),
            "token_uri": TOKEN_URI,
        }

    raise ValueError(
        "Firebase credentials not found. Set TASK_TRACKER_CREDENTIALS_JSON, "
        "FIREBASE_CREDENTIALS_PATH, GOOGLE_APPLICATION_CREDENTIALS, or "
        "FIREBASE_PROJECT_ID/FIREBASE_PRIVATE_KEY/FIREBASE_CLIENT_EMAIL"
    )
