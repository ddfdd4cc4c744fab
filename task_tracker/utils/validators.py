from datetime import datetime, timezone
from typing import Any, Dict, Optional
import re
import uuid

from task_tracker.models.task_model import TaskStatus
from task_tracker.utils.errors import InvalidArgument


class Validators:
    """Input validation utilities"""

    ALLOWED_STATUSES = frozenset(status.value for status in TaskStatus)

    @staticmethod
    def normalize_status(raw: Any) -> TaskStatus:
        """Uppercase a status token and map it onto TaskStatus.

        Raises InvalidArgument carrying the rejected value when the token is
        not one of OPEN, IN_PROGRESS, DONE.
        """
        if not isinstance(raw, str):
            raise InvalidArgument(f'"{raw}" is an invalid status', value=raw)

        value = raw.upper()
        if value not in Validators.ALLOWED_STATUSES:
            raise InvalidArgument(f'"{value}" is an invalid status', value=value)

        return TaskStatus(value)

    @staticmethod
    def validate_task_title(title: Any) -> bool:
        """Validate task title (non-empty once stripped)"""
        return isinstance(title, str) and bool(title.strip())

    @staticmethod
    def validate_task_description(description: Any) -> bool:
        """Descriptions are optional but must be text"""
        return description is None or isinstance(description, str)

    @staticmethod
    def validate_email(email: str) -> bool:
        """Validate email format"""
        pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        return bool(re.match(pattern, email or ""))

    @staticmethod
    def validate_password(password: str) -> bool:
        """Firebase Auth rejects passwords shorter than 6 characters"""
        return isinstance(password, str) and len(password) >= 6


class Helpers:
    """Ids, string cleanup and the JSON envelopes every route returns"""

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def utc_now_iso() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def sanitize_string(text: Optional[str]) -> str:
        return text.strip() if text else ""

    @staticmethod
    def _envelope(success: bool, **fields: Any) -> Dict[str, Any]:
        body = {'success': success, 'timestamp': Helpers.utc_now_iso()}
        body.update({key: value for key, value in fields.items() if value is not None})
        return body

    @staticmethod
    def build_error_response(message: str, code: str = "BAD_REQUEST", details: Any = None) -> Dict[str, Any]:
        """{success: false, error, code, timestamp[, details]}"""
        return Helpers._envelope(False, error=message, code=code, details=details)

    @staticmethod
    def build_success_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
        """{success: true, timestamp[, data][, message]}"""
        return Helpers._envelope(True, data=data, message=message or None)
