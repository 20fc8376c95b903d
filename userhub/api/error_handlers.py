"""Error Handlers: global exception handlers for the userhub API.

Invariants:
    - UserHubError → its own status with {timestamp, path, status, error, message}
    - RequestValidationError → same 400 envelope as RequestValidationFailed
    - Starlette HTTPException (404 route, 405, unparsable body) → standard envelope
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userhub.core.errors import RequestValidationFailed, UserHubError

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_userhub_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_userhub_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserHubError)
    async def userhub_error_handler(request: Request, exc: UserHubError):
        """Handle all domain errors (not found, validation)."""
        logger.warning(
            f"UserHubError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(request.url.path, _now()),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Framework-level failures (malformed JSON, missing body) share the domain envelope."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        normalized = RequestValidationFailed(_build_field_messages(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=normalized.to_response(request.url.path, _now()),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes, wrong methods and body-parse failures."""
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            extra={"error_code": f"HTTP_{exc.status_code}", "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "timestamp": _now(),
                "path": request.url.path,
                "status": exc.status_code,
                "error": HTTPStatus(exc.status_code).phrase,
                "message": str(exc.detail),
            },
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "timestamp": _now(),
                "path": request.url.path,
                "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "error": "Internal Server Error",
                "message": "An unexpected error occurred",
            },
        )


def _field_name(error: dict) -> str:
    loc = list(error.get("loc", ()))
    # json_invalid reports ("body", <char offset>); the offset is not a field
    if error.get("type") == "json_invalid" or any(isinstance(p, int) for p in loc[1:]):
        return "body"
    # drop the leading "body" / "path" segment when a field follows it
    parts = [str(p) for p in (loc[1:] if len(loc) > 1 else loc)]
    return ".".join(parts) or "body"


def _build_field_messages(exc: RequestValidationError) -> list[dict[str, str]]:
    """Map pydantic error locations onto {fieldName, message} pairs."""
    return [
        {"fieldName": _field_name(e), "message": e.get("msg", "")}
        for e in exc.errors()
    ]
