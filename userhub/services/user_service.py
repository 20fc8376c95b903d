"""
UserService: CRUD orchestration over UserDAO + UserMapper.

Owns not-found semantics:
  find_by_id / update  → ObjectNotFoundError for a missing id
  delete               → returns None for a missing id, never raises

update is a plain read-modify-write; concurrent updates to the same id are
last-write-wins.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from userhub.core.errors import ObjectNotFoundError
from userhub.dao.user_dao import UserDAO
from userhub.models.user import User, UserRequest
from userhub.services.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, dao: UserDAO, mapper: UserMapper) -> None:
        self._dao = dao
        self._mapper = mapper

    async def save(self, request: UserRequest) -> User:
        user = await self._dao.save(self._mapper.to_entity(request))
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def find_by_id(self, user_id: str) -> User:
        user = await self._dao.find_by_id(user_id)
        if user is None:
            logger.warning("User not found", extra={"user_id": user_id})
            raise ObjectNotFoundError.for_id(user_id, User.__name__)
        return user

    def find_all(self) -> AsyncIterator[User]:
        return self._dao.find_all()

    async def update(self, user_id: str, request: UserRequest) -> User:
        existing = await self.find_by_id(user_id)
        user = await self._dao.save(self._mapper.to_entity(request, existing))
        logger.info("User updated", extra={"user_id": user_id})
        return user

    async def delete(self, user_id: str) -> User | None:
        user = await self._dao.find_and_remove(user_id)
        logger.info(
            "User deleted" if user else "Delete on missing user ignored",
            extra={"user_id": user_id},
        )
        return user
