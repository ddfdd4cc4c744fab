from flask import current_app, jsonify, request

from . import tasks_bp
from task_tracker.middleware.auth_middleware import EXTENSION_KEY, AuthMiddleware
from task_tracker.models.task_model import CreateTaskInput, TaskFilter
from task_tracker.services.task_service import TaskService
from task_tracker.utils.validators import Helpers


def _task_service() -> TaskService:
    return current_app.extensions[EXTENSION_KEY]['task_service']


def _payload() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@tasks_bp.get("")
@AuthMiddleware.require_principal
def list_tasks():
    """List the caller's tasks. Optional ?status= and ?search= narrow the result."""
    status = (request.args.get("status") or "").strip() or None
    search = (request.args.get("search") or "").strip() or None

    tasks = _task_service().list_tasks(
        TaskFilter(status=status, search=search),
        AuthMiddleware.get_current_principal(),
    )
    return jsonify(Helpers.build_success_response(
        data={"tasks": [t.to_dict() for t in tasks]}
    )), 200


@tasks_bp.get("/<task_id>")
@AuthMiddleware.require_principal
def get_task(task_id):
    task = _task_service().get_task_by_id(task_id, AuthMiddleware.get_current_principal())
    return jsonify(Helpers.build_success_response(data={"task": task.to_dict()})), 200


@tasks_bp.post("")
@AuthMiddleware.require_principal
def create_task():
    task = _task_service().create_task(
        CreateTaskInput.from_payload(_payload()),
        AuthMiddleware.get_current_principal(),
    )
    return jsonify(Helpers.build_success_response(
        data={"task": task.to_dict()},
        message="Task created"
    )), 201


@tasks_bp.delete("/<task_id>")
@AuthMiddleware.require_principal
def delete_task(task_id):
    _task_service().delete_task_by_id(task_id, AuthMiddleware.get_current_principal())
    return jsonify(Helpers.build_success_response(message="Task deleted")), 200


@tasks_bp.patch("/<task_id>/status")
@AuthMiddleware.require_principal
def update_task_status(task_id):
    task = _task_service().update_task_status(
        task_id,
        _payload().get("status"),
        AuthMiddleware.get_current_principal(),
    )
    return jsonify(Helpers.build_success_response(data={"task": task.to_dict()})), 200
