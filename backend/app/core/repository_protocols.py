"""Boundary Protocols — contracts between the data access layer and the store.

Invariants:
    - UserRepository depends on UserTable, never on boto3 directly
    - UserTable mirrors the subset of boto3's DynamoDB Table resource the repository calls

Design Decisions:
    - Protocol over ABC: a boto3 Table satisfies it structurally, no wrapper class
    - Keyword-only signatures, matching boto3's resource methods
"""

from typing import Any, Protocol


class UserTable(Protocol):
    """Structural contract for the single partition-keyed user table."""
    def put_item(self, *, Item: dict, **kwargs: Any) -> dict: ...
    def get_item(self, *, Key: dict, **kwargs: Any) -> dict: ...
    def query(self, **kwargs: Any) -> dict: ...
    def scan(self, **kwargs: Any) -> dict: ...
    def delete_item(self, *, Key: dict, **kwargs: Any) -> dict: ...
