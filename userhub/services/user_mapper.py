"""
UserMapper: request ↔ entity ↔ response. Stateless, no side effects.
"""

from __future__ import annotations

from userhub.models.user import User, UserRequest, UserResponse


class UserMapper:

    def to_entity(self, request: UserRequest, existing: User | None = None) -> User:
        """
        Build an entity from a request. With ``existing``, keep its id and
        overwrite every other field (full replace, no merge).
        """
        return User(
            id=existing.id if existing is not None else None,
            name=request.name,
            email=request.email,
            password=request.password,
        )

    def to_response(self, entity: User) -> UserResponse:
        return UserResponse(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            password=entity.password,
        )
