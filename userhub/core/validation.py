"""
Explicit request validation for the User resource.

validate_user_request() is a pure function: payload in, list of
{fieldName, message} out. One entry per failing field, first failing rule
only, fields reported in declaration order.
"""

from __future__ import annotations

from typing import Any

from userhub.core.errors import RequestValidationFailed
from userhub.models.user import UserRequest

FieldMessage = dict[str, str]

MSG_REQUIRED = "field is required"
MSG_BLANK = "must not be null or empty"
MSG_TRIM = "field cannot have blank space at the beginning or at the end"
MSG_BODY = "request body must be a JSON object"

# field → (min_len, max_len); None means unbounded
_LENGTH_BOUNDS: dict[str, tuple[int, int] | None] = {
    "name": (3, 50),
    "email": None,
    "password": (3, 20),
}


def _check_field(value: Any, bounds: tuple[int, int] | None) -> str | None:
    if not isinstance(value, str):
        return MSG_REQUIRED
    if not value.strip():
        return MSG_BLANK
    if value != value.strip():
        return MSG_TRIM
    if bounds is not None:
        lo, hi = bounds
        if not lo <= len(value) <= hi:
            return f"must be between {lo} and {hi} characters"
    return None


def validate_user_request(payload: Any) -> list[FieldMessage]:
    if not isinstance(payload, dict):
        return [{"fieldName": "body", "message": MSG_BODY}]

    errors: list[FieldMessage] = []
    for field, bounds in _LENGTH_BOUNDS.items():
        message = _check_field(payload.get(field), bounds)
        if message is not None:
            errors.append({"fieldName": field, "message": message})
    return errors


def parse_user_request(payload: Any) -> UserRequest:
    """Validate payload and build a UserRequest, or raise RequestValidationFailed."""
    errors = validate_user_request(payload)
    if errors:
        raise RequestValidationFailed(errors)
    return UserRequest(
        name=payload["name"],
        email=payload["email"],
        password=payload["password"],
    )
