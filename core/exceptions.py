"""
Custom exceptions for the tracker
"""
from typing import Optional


class TrackerException(Exception):
    """Base exception for the tracker; carries the HTTP status it maps to"""

    status_code = 400

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class NotRegisteredError(TrackerException):
    """Unknown participant id on a task endpoint"""
    status_code = 404


class TaskNotActiveError(TrackerException):
    """Task endpoint called while another task is active"""
    status_code = 403


class UnauthorizedError(TrackerException):
    """Basic-Auth or admin credential check failed"""
    status_code = 401


class ValidationFailedError(TrackerException):
    """Malformed or missing payload field, or wrong secret"""
    status_code = 400


class PreconditionFailedError(TrackerException):
    """Required earlier step was not performed"""
    status_code = 400


class NotFoundError(TrackerException):
    """Admin action on an unknown participant"""
    status_code = 404


class InvalidInputError(TrackerException):
    """Admin input out of range"""
    status_code = 400
