"""DynamoDB Store — boto3 resource, table handle, error mapping and health checks.

Invariants:
    - One DynamoStore per process, created in the lifespan from Settings
    - Every botocore failure surfaces as StoreUnavailableError (core/errors.py), except
      a rejected key value on a key lookup, which surfaces as the caller's not-found error
    - ResourceNotFoundException from DynamoDB means a missing TABLE, never a missing item
      (absent items come back as an empty response and are handled by the repository)

Design Decisions:
    - boto3 resource API over the low-level client: items round-trip as plain dicts
      without AttributeValue marshalling
    - Timeouts and retries configured through botocore Config, no application-level retry
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError, ClientError, EndpointConnectionError, NoCredentialsError,
)

from app.config import Settings
from app.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

PARTITION_KEY = "id"


@contextmanager
def store_errors(
    operation: str,
    on_invalid_key: Callable[[], Exception] | None = None,
) -> Iterator[None]:
    """Map botocore exceptions raised inside the block to StoreUnavailableError.

    on_invalid_key: for key lookups, builds the error raised when DynamoDB
    rejects the key value itself (ValidationException), e.g. an id over the
    2048-byte partition key limit. No item can exist under such a key.
    """
    try:
        yield
    except EndpointConnectionError as e:
        logger.error(f"DynamoDB endpoint unreachable: {e}", extra={"operation": operation})
        raise StoreUnavailableError("Endpoint unreachable", operation) from e
    except NoCredentialsError as e:
        logger.error("No AWS credentials available", extra={"operation": operation})
        raise StoreUnavailableError("No credentials configured", operation) from e
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "Unknown")
        if code == "ValidationException" and on_invalid_key is not None:
            logger.warning(f"DynamoDB rejected key: {e}", extra={"operation": operation})
            raise on_invalid_key() from e
        logger.error(f"DynamoDB client error {code}: {e}", extra={"operation": operation})
        raise StoreUnavailableError(f"DynamoDB returned {code}", operation) from e
    except BotoCoreError as e:
        logger.error(f"botocore error: {e}", extra={"operation": operation})
        raise StoreUnavailableError("Store client error", operation) from e


class DynamoStore:
    """Owns the boto3 DynamoDB resource and the user table handle."""

    def __init__(
        self,
        table_name: str,
        region_name: str,
        endpoint_url: str | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        connect_timeout: int = 5,
        read_timeout: int = 10,
        max_attempts: int = 3,
    ):
        config = Config(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={"max_attempts": max_attempts, "mode": "standard"},
        )
        self.resource = boto3.resource(
            "dynamodb",
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            config=config,
        )
        self.table_name = table_name
        self.table = self.resource.Table(table_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoStore":
        return cls(
            settings.dynamodb_table_name,
            settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            connect_timeout=settings.dynamodb_connect_timeout,
            read_timeout=settings.dynamodb_read_timeout,
            max_attempts=settings.dynamodb_max_attempts,
        )

    def ensure_table(self, read_capacity: int = 1, write_capacity: int = 1) -> bool:
        """Create the table if missing and wait until it exists. Returns True if created."""
        client = self.resource.meta.client
        try:
            client.describe_table(TableName=self.table_name)
            return False
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            if code != "ResourceNotFoundException":
                raise StoreUnavailableError(f"DynamoDB returned {code}", "describe_table") from e
        except BotoCoreError as e:
            raise StoreUnavailableError("Store client error", "describe_table") from e

        with store_errors("create_table"):
            client.create_table(
                TableName=self.table_name,
                AttributeDefinitions=[
                    {"AttributeName": PARTITION_KEY, "AttributeType": "S"},
                ],
                KeySchema=[
                    {"AttributeName": PARTITION_KEY, "KeyType": "HASH"},
                ],
                ProvisionedThroughput={
                    "ReadCapacityUnits": read_capacity,
                    "WriteCapacityUnits": write_capacity,
                },
            )
            client.get_waiter("table_exists").wait(TableName=self.table_name)
        logger.info(
            f"Created DynamoDB table {self.table_name}",
            extra={"table": self.table_name},
        )
        return True

    def health_check(self) -> bool:
        """Check the table is reachable (for readiness probes)."""
        try:
            with store_errors("describe_table"):
                self.resource.meta.client.describe_table(TableName=self.table_name)
            return True
        except StoreUnavailableError as e:
            logger.error(f"Store health check failed: {e}", extra={"table": self.table_name})
            return False


# Singleton (initialized on startup)
store: DynamoStore | None = None


def init_store(settings: Settings) -> DynamoStore:
    global store
    store = DynamoStore.from_settings(settings)
    if settings.dynamodb_create_table:
        store.ensure_table(
            settings.dynamodb_read_capacity, settings.dynamodb_write_capacity,
        )
    return store


def get_store() -> DynamoStore:
    """FastAPI dependency for the store handle."""
    if not store:
        raise RuntimeError("Store not initialized")
    return store
