"""User Record — the item stored in the DynamoDB user table.

Invariants:
    - id is the sole partition key; never changes after creation
    - created_at is set once by new_user_record() and never mutated
    - created_at holds the stored createdAt text as-is; reads and rewrites keep it byte-for-byte
    - Stored attribute names are id, name, createdAt (shared with existing table data)

Design Decisions:
    - Plain dataclass over an ORM/mapper: the table has three scalar attributes
    - New timestamps are written like java.time.Instant.toString(): UTC, trailing Z,
      fraction trimmed to 0, 3 or 6 digits
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with a Z suffix, e.g. 2024-05-01T09:30:00.120Z."""
    value = value.astimezone(timezone.utc)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond % 1000:
        text += f".{value.microsecond:06d}"
    elif value.microsecond:
        text += f".{value.microsecond // 1000:03d}"
    return text + "Z"


@dataclass
class UserRecord:
    """A stored user. Build new ones with new_user_record()."""
    id: str
    name: str
    created_at: str | None = None

    @classmethod
    def with_id(cls, user_id: str) -> "UserRecord":
        """Lookup sample carrying only the partition key."""
        return cls(id=user_id, name="")

    def key(self) -> dict:
        return {"id": self.id}

    def to_item(self) -> dict:
        item = {"id": self.id, "name": self.name}
        if self.created_at is not None:
            item["createdAt"] = self.created_at
        return item

    @classmethod
    def from_item(cls, item: dict) -> "UserRecord":
        created_at = item.get("createdAt")
        return cls(
            id=str(item["id"]),
            name=str(item.get("name", "")),
            created_at=str(created_at) if created_at is not None else None,
        )


def new_user_record(name: str) -> UserRecord:
    """Fully populated record: random UUID id, creation time now (UTC)."""
    return UserRecord(
        id=str(uuid.uuid4()),
        name=name,
        created_at=format_timestamp(datetime.now(timezone.utc)),
    )
