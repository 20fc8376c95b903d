"""
Error hierarchy for userhub.

Every error knows its HTTP status and the short ``error`` label that goes
into the response body; the global handlers in ``userhub.api.error_handlers``
turn them into JSON.
"""

from __future__ import annotations

from typing import Any


class UserHubError(Exception):
    """Base exception for all domain errors raised by userhub."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        error: str = "Internal Server Error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.error = error

    def to_response(self, path: str, timestamp: str) -> dict[str, Any]:
        return {
            "timestamp": timestamp,
            "path": path,
            "status": self.http_status,
            "error": self.error,
            "message": self.message,
        }


class ObjectNotFoundError(UserHubError):
    """Lookup by id yielded no record."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            code="OBJECT_NOT_FOUND",
            http_status=404,
            error="Not Found",
        )

    @classmethod
    def for_id(cls, object_id: str, type_name: str) -> ObjectNotFoundError:
        return cls(f"Object not found. Id: {object_id}, Type: {type_name}")


class RequestValidationFailed(UserHubError):
    """One or more request fields violated their constraints."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__(
            "Validation Error on validation attributes",
            code="VALIDATION_ERROR",
            http_status=400,
            error="Validation ERROR",
        )
        self.errors = errors

    def to_response(self, path: str, timestamp: str) -> dict[str, Any]:
        body = super().to_response(path, timestamp)
        body["errors"] = self.errors
        return body
