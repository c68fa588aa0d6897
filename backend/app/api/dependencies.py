"""Route dependencies — wires the store handle into the repository per request."""

from fastapi import Depends

from app.infrastructure.dynamodb import DynamoStore, get_store
from app.services.user_repository import UserRepository


def get_user_repository(store: DynamoStore = Depends(get_store)) -> UserRepository:
    return UserRepository(store.table)
