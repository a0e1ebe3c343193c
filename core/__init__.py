"""
Core module: error taxonomy and payload validators
"""
from .exceptions import (
    InvalidInputError,
    NotFoundError,
    NotRegisteredError,
    PreconditionFailedError,
    TaskNotActiveError,
    TrackerException,
    UnauthorizedError,
    ValidationFailedError,
)

__all__ = [
    'InvalidInputError',
    'NotFoundError',
    'NotRegisteredError',
    'PreconditionFailedError',
    'TaskNotActiveError',
    'TrackerException',
    'UnauthorizedError',
    'ValidationFailedError',
]
