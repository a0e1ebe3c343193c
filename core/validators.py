"""
Payload validators using Pydantic
"""
import re
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from core.exceptions import TrackerException, ValidationFailedError

TOTAL_TASKS = 6

_DATA_URI_PREFIX = "data:image/"
_RAW_BASE64_RE = re.compile(r"^[A-Za-z0-9+/=]{50,}$")
_WHITESPACE_RE = re.compile(r"\s")

MISSING_IMAGE_MESSAGE = 'Include an "image" field with a base64 string.'
INVALID_IMAGE_MESSAGE = "Invalid image. Send a data URI (data:image/png;base64,...) or raw base64 string."

M = TypeVar("M", bound=BaseModel)


class ParticipantNameValidator(BaseModel):
    """Registration name validator"""
    name: str = Field(..., description="Display name")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('Name is required')
        return v


class TaskNumberValidator(BaseModel):
    """Active task id validator"""
    task: StrictInt = Field(..., ge=1, le=TOTAL_TASKS, description="Task id")


class MessageValidator(BaseModel):
    """Task 3 message validator"""
    message: str

    @field_validator('message')
    @classmethod
    def validate_message(cls, v):
        if not v.strip():
            raise ValueError('Message cannot be empty')
        return v


class SecretKeyValidator(BaseModel):
    """Task 5 key payload"""
    key: str


class ImageValidator(BaseModel):
    """Task 6 image validator.

    Accepts a data URI for an image type or a raw base64-looking string of at
    least 50 characters. The bytes are never decoded.
    """
    image: str = Field(default="", validate_default=True)

    @field_validator('image', mode='before')
    @classmethod
    def validate_image(cls, v):
        if not v or not isinstance(v, str):
            raise ValueError(MISSING_IMAGE_MESSAGE)
        if not looks_like_image(v):
            raise ValueError(INVALID_IMAGE_MESSAGE)
        return v


def looks_like_image(value: str) -> bool:
    """Shape check for an embedded image."""
    if value.startswith(_DATA_URI_PREFIX):
        return True
    return bool(_RAW_BASE64_RE.match(_WHITESPACE_RE.sub("", value)))


def validate_payload(
    model: Type[M],
    payload: Dict[str, Any],
    message: Optional[str] = None,
    error_cls: Type[TrackerException] = ValidationFailedError,
) -> M:
    """Validate a request body, converting pydantic errors to tracker errors.

    Without ``message`` the text of the first failing field validator is used.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise error_cls(message or _first_error_text(exc), error_code="invalid_payload") from exc


def _first_error_text(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid payload"
    cause = errors[0].get("ctx", {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    return errors[0]["msg"]


__all__ = [
    "INVALID_IMAGE_MESSAGE",
    "ImageValidator",
    "MISSING_IMAGE_MESSAGE",
    "MessageValidator",
    "ParticipantNameValidator",
    "SecretKeyValidator",
    "TaskNumberValidator",
    "TOTAL_TASKS",
    "looks_like_image",
    "validate_payload",
]
