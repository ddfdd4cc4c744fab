from functools import wraps
from flask import current_app, request

from task_tracker.models.user_model import Principal

EXTENSION_KEY = 'task_tracker'


class AuthMiddleware:
    """Resolves the principal for task routes through the app's AuthProvider"""

    @staticmethod
    def require_principal(f):
        """Decorator: AuthenticationError (401) unless the provider accepts the request"""
        @wraps(f)
        def decorated_function(*args, **kwargs):
            provider = current_app.extensions[EXTENSION_KEY]['auth_provider']
            request.current_principal = provider.resolve(request.headers)
            return f(*args, **kwargs)

        return decorated_function

    @staticmethod
    def get_current_principal() -> Principal:
        return request.current_principal
