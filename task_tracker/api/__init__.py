from flask import Blueprint

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")
auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

# Import modules so routes attach
from . import tasks  # noqa
from . import auth  # noqa

__all__ = [
    "tasks_bp",
    "auth_bp",
]
