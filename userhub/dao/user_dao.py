"""
UserDAO

DynamoDB layout:
  PK = USER#<userId>
  SK = PROFILE

Every method is a coroutine; the blocking boto3 call runs in Starlette's
threadpool so the event loop never waits on the network.
"""

import uuid
from collections.abc import AsyncIterator
from typing import Any

from boto3.dynamodb.conditions import Attr
from starlette.concurrency import run_in_threadpool

from userhub.dao.base import BaseDAO
from userhub.models.user import User

ENTITY_TYPE = "USER"


class UserDAO(BaseDAO):

    @staticmethod
    def _pk(user_id: str) -> str:
        return f"USER#{user_id}"

    SK = "PROFILE"

    def _key(self, user_id: str) -> dict[str, str]:
        return {"PK": self._pk(user_id), "SK": self.SK}

    def _to_item(self, user: User) -> dict[str, Any]:
        return {
            **self._key(user.id),
            "entityType": ENTITY_TYPE,
            "userId": user.id,
            "name": user.name,
            "email": user.email,
            "password": user.password,
        }

    def _to_entity(self, item: dict[str, Any]) -> User:
        return User(
            id=item["userId"],
            name=item["name"],
            email=item["email"],
            password=item["password"],
        )

    # ── Write ─────────────────────────────────────────────────────────────────

    async def save(self, user: User) -> User:
        """
        Insert when user.id is unset (a fresh id is generated), otherwise
        overwrite the whole item. Overwrites are last-write-wins.
        """
        if user.id is None:
            saved = User(
                id=str(uuid.uuid4()),
                name=user.name,
                email=user.email,
                password=user.password,
            )
            await run_in_threadpool(
                self._table.put_item,
                Item=self._to_item(saved),
                ConditionExpression=self._item_not_exists_condition(),
            )
            return saved

        await run_in_threadpool(self._table.put_item, Item=self._to_item(user))
        return User(id=user.id, name=user.name, email=user.email, password=user.password)

    async def find_and_remove(self, user_id: str) -> User | None:
        """Atomic delete returning the removed item, or None if absent."""
        resp = await run_in_threadpool(
            self._table.delete_item,
            Key=self._key(user_id),
            ReturnValues="ALL_OLD",
        )
        item = resp.get("Attributes")
        return self._to_entity(item) if item else None

    # ── Read ──────────────────────────────────────────────────────────────────

    async def find_by_id(self, user_id: str) -> User | None:
        resp = await run_in_threadpool(self._table.get_item, Key=self._key(user_id))
        item = resp.get("Item")
        return self._to_entity(item) if item else None

    async def find_all(self) -> AsyncIterator[User]:
        """
        Scan every USER item, one DDB page at a time.
        Nothing is read until iteration starts; order is whatever the scan yields.
        """
        last_key: dict | None = None
        while True:
            kwargs: dict[str, Any] = {
                "FilterExpression": Attr("entityType").eq(ENTITY_TYPE),
            }
            if last_key:
                kwargs["ExclusiveStartKey"] = last_key
            resp = await run_in_threadpool(self._table.scan, **kwargs)
            for item in resp.get("Items", []):
                yield self._to_entity(item)
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                break
