"""
FastAPI dependency functions shared across route modules.

The service and mapper are built once in create_app() and stored on
app.state; these dependencies only hand them out.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from userhub.services.user_mapper import UserMapper
from userhub.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_user_mapper(request: Request) -> UserMapper:
    return request.app.state.user_mapper


# ── Convenient type aliases for route signatures ───────────────────────────────

UserServiceDep = Annotated[UserService, Depends(get_user_service)]
UserMapperDep = Annotated[UserMapper, Depends(get_user_mapper)]
