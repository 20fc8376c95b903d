"""
Users router, mounted at /users

Request bodies are accepted as raw JSON and run through
core.validation.parse_user_request before anything reaches the service.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Response, status

from userhub.api.deps import UserMapperDep, UserServiceDep
from userhub.core.validation import parse_user_request
from userhub.models.error import StandardError, ValidationError
from userhub.models.user import UserRequest, UserResponse

router = APIRouter()

UserPayload = Annotated[Any, Body()]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": StandardError}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationError}}

# Body is taken as raw JSON, so the UserRequest schema is documented by hand
_USER_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserRequest.model_json_schema()}},
    },
}


# ── POST /users  ──────────────────────────────────────────────────────────────

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Create user",
    openapi_extra=_USER_REQUEST_BODY,
)
async def create_user(payload: UserPayload, svc: UserServiceDep) -> Response:
    """Persist a new user. Responds 201 with an empty body."""
    await svc.save(parse_user_request(payload))
    return Response(status_code=status.HTTP_201_CREATED)


# ── GET /users/{user_id}  ─────────────────────────────────────────────────────

@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=_NOT_FOUND,
    summary="Get user",
)
async def find_user(
    user_id: str,
    svc: UserServiceDep,
    mapper: UserMapperDep,
) -> UserResponse:
    return mapper.to_response(await svc.find_by_id(user_id))


# ── GET /users  ───────────────────────────────────────────────────────────────

@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(svc: UserServiceDep, mapper: UserMapperDep) -> list[UserResponse]:
    """Every stored user, unordered, no pagination."""
    return [mapper.to_response(user) async for user in svc.find_all()]


# ── PATCH /users/{user_id}  ───────────────────────────────────────────────────

@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Update user",
    openapi_extra=_USER_REQUEST_BODY,
)
async def update_user(
    user_id: str,
    payload: UserPayload,
    svc: UserServiceDep,
    mapper: UserMapperDep,
) -> UserResponse:
    """Replace name, email and password of an existing user."""
    user = await svc.update(user_id, parse_user_request(payload))
    return mapper.to_response(user)


# ── DELETE /users/{user_id}  ──────────────────────────────────────────────────

@router.delete(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete user",
)
async def delete_user(user_id: str, svc: UserServiceDep) -> Response:
    """Remove the user if present. A missing id is not an error."""
    await svc.delete(user_id)
    return Response(status_code=status.HTTP_200_OK)
