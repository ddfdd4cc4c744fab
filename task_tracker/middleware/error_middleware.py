"""
Error Handling Middleware
Maps task tracker errors onto HTTP responses and logs them
"""
import logging
from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from task_tracker.utils.errors import (
    AuthenticationError,
    ConflictError,
    InvalidArgument,
    NotFound,
    ServiceUnavailable,
    StoreUnavailable,
    TaskTrackerError,
)
from task_tracker.utils.validators import Helpers

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


class ErrorHandler:
    """Centralized error handling service"""

    STATUS_CODES = {
        InvalidArgument: 400,
        AuthenticationError: 401,
        NotFound: 404,
        ConflictError: 409,
        StoreUnavailable: 503,
        ServiceUnavailable: 503,
    }

    @staticmethod
    def status_for(error: TaskTrackerError) -> int:
        for error_type, status in ErrorHandler.STATUS_CODES.items():
            if isinstance(error, error_type):
                return status
        return 500

    @staticmethod
    def handle_task_tracker_error(error: TaskTrackerError) -> tuple:
        status = ErrorHandler.status_for(error)
        if status >= 500:
            logger.error("%s on %s %s: %s", error.code, request.method, request.path, error.message)
        else:
            logger.warning("%s on %s %s: %s", error.code, request.method, request.path, error.message)

        details = None
        if isinstance(error, InvalidArgument) and error.value is not None:
            details = {'value': error.value}

        return jsonify(Helpers.build_error_response(
            message=error.message,
            code=error.code,
            details=details
        )), status

    @staticmethod
    def handle_http_error(error: HTTPException) -> tuple:
        logger.info("HTTP %s on %s %s", error.code, request.method, request.path)
        return jsonify(Helpers.build_error_response(
            message=error.description or error.name,
            code=error.name.upper().replace(' ', '_')
        )), error.code

    @staticmethod
    def handle_generic_error(error: Exception) -> tuple:
        logger.exception("Unexpected error on %s %s", request.method, request.path)
        return jsonify(Helpers.build_error_response(
            message="An unexpected error occurred",
            code="INTERNAL_ERROR"
        )), 500


def register_error_handlers(app):
    """Register error handlers with Flask app"""
    app.register_error_handler(TaskTrackerError, ErrorHandler.handle_task_tracker_error)
    app.register_error_handler(HTTPException, ErrorHandler.handle_http_error)
    app.register_error_handler(Exception, ErrorHandler.handle_generic_error)
