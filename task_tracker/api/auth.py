"""
Authentication endpoints backed by Firebase Authentication.
"""
from flask import current_app, jsonify, request

from . import auth_bp
from task_tracker.middleware.auth_middleware import EXTENSION_KEY


def _payload() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@auth_bp.post("/signup")
def sign_up():
    """
    Expected payload: {username, email, password}
    Returns: {user_id, username, email}
    """
    payload = _payload()
    user = current_app.extensions[EXTENSION_KEY]['auth_service'].sign_up(
        payload.get("username") or "",
        payload.get("email") or "",
        payload.get("password") or "",
    )
    return jsonify(user), 201


@auth_bp.post("/signin")
def sign_in():
    """
    Expected payload: {email, password}
    Returns: {accessToken}
    """
    payload = _payload()
    token = current_app.extensions[EXTENSION_KEY]['auth_service'].sign_in(
        payload.get("email") or "",
        payload.get("password") or "",
    )
    return jsonify(token), 200
