"""Request validation helpers.

Pydantic models declare the field rules; this module turns a failed
validation into a BadRequestError carrying one message per field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import BadRequestError

M = TypeVar("M", bound=BaseModel)


def error_messages(exc: ValidationError) -> list[str]:
    """Flatten a ValidationError into "<field>: <message>" strings."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return messages


def validate_request(model_cls: type[M], payload: Mapping[str, Any]) -> M:
    """Build model_cls from payload or raise BadRequestError with field messages."""
    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError(error_messages(exc)) from exc
