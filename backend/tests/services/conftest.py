"""Service test fixtures — moto-backed DynamoDB table + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory DynamoDB (moto mock_aws) with UserTable created
    - The module-level store singleton is swapped for the test store and restored afterwards
    - The lifespan is not run by ASGITransport, so init_store() never touches real settings

Design Decisions:
    - moto mock_aws stands in for DynamoDB; no container needed
    - Patching the singleton (not dependency_overrides) also covers the readiness probe
"""

import pytest
from httpx import ASGITransport, AsyncClient
from moto import mock_aws

import app.infrastructure.dynamodb as dynamodb_module
from app.infrastructure.dynamodb import DynamoStore
from app.main import app
from app.services.user_repository import UserRepository

TABLE_NAME = "UserTable"
REGION = "ap-northeast-1"


@pytest.fixture
def aws():
    with mock_aws():
        yield


@pytest.fixture
def store(aws):
    store = DynamoStore(TABLE_NAME, REGION)
    store.ensure_table()
    return store


@pytest.fixture
def missing_table_store(aws):
    """Store pointed at a table that was never created."""
    return DynamoStore("MissingTable", REGION)


@pytest.fixture
def repository(store):
    return UserRepository(store.table)


@pytest.fixture
def use_store():
    """Install a store as the process singleton for the duration of a test."""
    original = dynamodb_module.store

    def _install(s):
        dynamodb_module.store = s

    yield _install
    dynamodb_module.store = original


@pytest.fixture
async def client(store, use_store):
    """FastAPI test client bound to the moto-backed store."""
    use_store(store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def table_items(store):
    """Raw items currently in the table (bypasses the repository)."""
    def _scan():
        return store.table.scan()["Items"]
    return _scan
