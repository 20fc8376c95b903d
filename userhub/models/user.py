"""
User entity and the pydantic schemas exposed over HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


@dataclass
class User:
    """Canonical stored representation. id is None until first save."""
    name: str
    email: str
    password: str
    id: str | None = None


class UserRequest(BaseModel):
    """Create / update payload. Constraints are checked by core.validation."""
    name: str
    email: str
    password: str


class UserResponse(BaseModel):
    # password is echoed back unmasked (kept for compatibility, see DESIGN.md)
    id: str
    name: str
    email: str
    password: str
