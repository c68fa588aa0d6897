"""User Record — factory, item mapping and timestamp format.

Invariants:
    - new_user_record generates a UUID id and a UTC createdAt with a Z suffix
    - with_id builds a lookup sample with no created_at
    - Items use the attribute names id, name, createdAt
    - A stored createdAt string comes back out of from_item/to_item unchanged
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from app.models.user import UserRecord, format_timestamp, new_user_record


def test_new_user_record_generates_id_and_timestamp():
    before = datetime.now(timezone.utc).replace(microsecond=0)
    record = new_user_record("Jay")
    after = datetime.now(timezone.utc)

    assert str(uuid.UUID(record.id)) == record.id
    assert record.name == "Jay"
    assert record.created_at.endswith("Z")
    created = datetime.fromisoformat(record.created_at.replace("Z", "+00:00"))
    assert before <= created <= after


def test_new_user_record_ids_are_unique():
    assert len({new_user_record("x").id for _ in range(100)}) == 100


def test_with_id_is_a_key_only_sample():
    sample = UserRecord.with_id("abc")

    assert sample.key() == {"id": "abc"}
    assert sample.name == ""
    assert sample.created_at is None
    assert sample.to_item() == {"id": "abc", "name": ""}


def test_to_item_attribute_names():
    record = UserRecord(id="abc", name="Jay", created_at="2024-01-02T03:04:05.123Z")

    assert record.to_item() == {
        "id": "abc", "name": "Jay", "createdAt": "2024-01-02T03:04:05.123Z",
    }


@pytest.mark.parametrize("stored", [
    "2024-01-02T03:04:05Z",
    "2024-01-02T03:04:05.120Z",
    "2024-01-02T03:04:05.123456789Z",
])
def test_stored_created_at_is_written_back_unchanged(stored):
    item = {"id": "abc", "name": "Jay", "createdAt": stored}

    record = UserRecord.from_item(item)

    assert record.created_at == stored
    assert record.to_item() == item


def test_format_timestamp_normalizes_to_utc():
    tokyo = timezone(timedelta(hours=9))
    value = datetime(2024, 1, 2, 12, 0, 0, tzinfo=tokyo)

    assert format_timestamp(value) == "2024-01-02T03:00:00Z"


@pytest.mark.parametrize("microsecond, expected", [
    (120000, "2024-01-02T03:04:05.120Z"),
    (123456, "2024-01-02T03:04:05.123456Z"),
])
def test_format_timestamp_trims_fraction_to_millis_or_micros(microsecond, expected):
    value = datetime(2024, 1, 2, 3, 4, 5, microsecond, tzinfo=timezone.utc)

    assert format_timestamp(value) == expected
