"""
Error kinds raised by the task tracker.
The HTTP status each one maps to lives in middleware/error_middleware.py
"""
from typing import Any, Optional


class TaskTrackerError(Exception):
    """Base class for every error the application raises on purpose"""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(TaskTrackerError):
    """Malformed input: bad status token, empty title"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.value = value


class NotFound(TaskTrackerError):
    """No record matches the id+owner scope"""

    code = "NOT_FOUND"


class StoreUnavailable(TaskTrackerError):
    """The backing store failed; never handled inside the service"""

    code = "STORE_UNAVAILABLE"


class AuthenticationError(TaskTrackerError):
    code = "AUTHENTICATION_ERROR"


class ConflictError(TaskTrackerError):
    code = "CONFLICT"


class ServiceUnavailable(TaskTrackerError):
    """Firebase Authentication is unreachable or not set up for this process"""

    code = "SERVICE_UNAVAILABLE"
