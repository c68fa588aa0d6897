"""User Repository — CRUD over the DynamoDB user table.

Invariants:
    - Every public method returns the external User representation (or None for delete)
    - find_by_sample, find_by_id, update and delete raise UserNotFoundError for unknown ids
    - Store failures surface as StoreUnavailableError, never as UserNotFoundError
    - A key DynamoDB rejects as invalid (ValidationException on get_item/query) is NotFound
    - createdAt is carried through reads and updates as the stored string
    - update/delete read first, then write, with no condition expression:
      two concurrent requests on the same id can interleave (last write wins)

Design Decisions:
    - Table handle passed to the constructor; the repository holds no other state
    - find_by_id uses a key-conditioned query (Limit=1), find_by_sample uses get_item;
      observable behavior is the same, both access paths are kept
    - find_all follows LastEvaluatedKey until exhausted (full scan, no client-facing pagination)
"""

import logging

from boto3.dynamodb.conditions import Key

from app.core.errors import UserNotFoundError
from app.core.repository_protocols import UserTable
from app.infrastructure.dynamodb import PARTITION_KEY, store_errors
from app.models.user import UserRecord
from app.schemas.user import User, UserUpdateRequest

logger = logging.getLogger(__name__)


def to_user(record: UserRecord) -> User:
    return User(
        id=record.id,
        name=record.name,
        created_at=record.created_at or "",
    )


class UserRepository:
    """Data access layer for users."""

    def __init__(self, table: UserTable):
        self._table = table

    def insert(self, record: UserRecord) -> User:
        """Write the record unconditionally (overwrites an item with the same id)."""
        with store_errors("put_item"):
            self._table.put_item(Item=record.to_item())
        logger.info(f"User {record.id} created", extra={"user_id": record.id})
        return to_user(record)

    def find_all(self) -> list[User]:
        """Scan the whole table. Order is whatever DynamoDB returns."""
        users: list[User] = []
        scan_kwargs: dict = {}
        with store_errors("scan"):
            while True:
                response = self._table.scan(**scan_kwargs)
                users.extend(
                    to_user(UserRecord.from_item(item))
                    for item in response.get("Items", [])
                )
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        return users

    def find_by_sample(self, sample: UserRecord) -> User:
        """Point lookup by the sample's id; every other field is ignored."""
        if not sample.id:
            raise UserNotFoundError(sample.id, "find_by_sample")
        with store_errors(
            "get_item", lambda: UserNotFoundError(sample.id, "find_by_sample"),
        ):
            response = self._table.get_item(Key=sample.key())
        item = response.get("Item")
        if item is None:
            logger.warning(
                f"User {sample.id} not found by sample", extra={"user_id": sample.id},
            )
            raise UserNotFoundError(sample.id, "find_by_sample")
        return to_user(UserRecord.from_item(item))

    def find_by_id(self, user_id: str) -> User:
        return to_user(self._find_record(user_id, "find_by_id"))

    def update(self, user_id: str, request: UserUpdateRequest) -> User:
        """Replace name only; id and createdAt are carried over from the stored item."""
        record = self._find_record(user_id, "update")
        record.name = request.name
        with store_errors("put_item"):
            self._table.put_item(Item=record.to_item())
        logger.info(f"User {user_id} updated", extra={"user_id": user_id})
        return to_user(record)

    def delete(self, user_id: str) -> None:
        """Delete an existing user. Unknown ids raise instead of being a no-op."""
        record = self._find_record(user_id, "delete")
        with store_errors("delete_item"):
            self._table.delete_item(Key=record.key())
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})

    def _find_record(self, user_id: str, operation: str) -> UserRecord:
        # DynamoDB rejects empty key values outright
        if not user_id:
            raise UserNotFoundError(user_id, operation)
        with store_errors("query", lambda: UserNotFoundError(user_id, operation)):
            response = self._table.query(
                KeyConditionExpression=Key(PARTITION_KEY).eq(user_id),
                Limit=1,
            )
        items = response.get("Items", [])
        if not items:
            logger.warning(f"User {user_id} not found", extra={"user_id": user_id})
            raise UserNotFoundError(user_id, operation)
        return UserRecord.from_item(items[0])
