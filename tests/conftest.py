"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests:
scripted DynamoDB doubles that throttle a given number of times before
answering, and helpers to build botocore errors.
"""

import pytest
from typing import Any, Optional

from botocore.exceptions import ClientError

from ddb_retry.config import Settings


def make_client_error(code: str, operation_name: str = "GetItem") -> ClientError:
    """Build a botocore ClientError the way botocore raises it for DynamoDB."""
    return ClientError(
        {
            "Error": {"Code": code, "Message": f"{code} raised by test double"},
            "ResponseMetadata": {"HTTPStatusCode": 400},
        },
        operation_name,
    )


class ScriptedDynamoDBClient:
    """DynamoDB double: throttles N times, then fails with error or answers.
    
    Every call is recorded in ``calls`` as (method, kwargs).
    """

    def __init__(
        self,
        throughput_exceeded_count: int = 0,
        error: Optional[Exception] = None,
        response: Optional[dict[str, Any]] = None,
    ):
        self.throughput_exceeded_count = throughput_exceeded_count
        self.error = error
        self.response = response if response is not None else {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _answer(self, method: str, operation_name: str, kwargs: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((method, kwargs))
        if self.throughput_exceeded_count > 0:
            self.throughput_exceeded_count -= 1
            raise make_client_error("ProvisionedThroughputExceededException", operation_name)
        if self.error is not None:
            raise self.error
        return self.response

    def get_item(self, **kwargs: Any) -> dict[str, Any]:
        return self._answer("get_item", "GetItem", kwargs)

    def delete_item(self, **kwargs: Any) -> dict[str, Any]:
        return self._answer("delete_item", "DeleteItem", kwargs)

    def put_item(self, **kwargs: Any) -> dict[str, Any]:
        return self._answer("put_item", "PutItem", kwargs)

    def query(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("query", kwargs))
        return {"Items": [], "Count": 0}


class AsyncScriptedDynamoDBClient(ScriptedDynamoDBClient):
    """Awaitable flavour of ScriptedDynamoDBClient."""

    async def get_item(self, **kwargs: Any) -> dict[str, Any]:
        return self._answer("get_item", "GetItem", kwargs)

    async def delete_item(self, **kwargs: Any) -> dict[str, Any]:
        return self._answer("delete_item", "DeleteItem", kwargs)

    async def put_item(self, **kwargs: Any) -> dict[str, Any]:
        return self._answer("put_item", "PutItem", kwargs)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.DDB_RETRIES = -1
    """
    return Settings(
        # === Application ===
        APP_NAME="ddb-retry (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        
        # === AWS ===
        AWS_REGION="eu-west-1",
        DYNAMODB_ENDPOINT_URL="http://localhost:8000",
        BOTOCORE_MAX_ATTEMPTS=1,
        
        # === Retry ===
        DDB_RETRIES=3,
        DDB_BACKOFF_SECONDS=0.0,
        
    )


@pytest.fixture
def client_error():
    """Factory fixture to create botocore ClientErrors.
    
    Usage:
        def test_something(client_error):
            err = client_error("ConditionalCheckFailedException", "PutItem")
    """
    return make_client_error


@pytest.fixture
def scripted_client():
    """Factory fixture to create ScriptedDynamoDBClient doubles.
    
    Usage:
        def test_something(scripted_client):
            client = scripted_client(throughput_exceeded_count=2)
    """
    def _create(
        throughput_exceeded_count: int = 0,
        error: Optional[Exception] = None,
        response: Optional[dict[str, Any]] = None,
    ) -> ScriptedDynamoDBClient:
        return ScriptedDynamoDBClient(throughput_exceeded_count, error, response)
    
    return _create


@pytest.fixture
def async_scripted_client():
    """Factory fixture to create AsyncScriptedDynamoDBClient doubles."""
    def _create(
        throughput_exceeded_count: int = 0,
        error: Optional[Exception] = None,
        response: Optional[dict[str, Any]] = None,
    ) -> AsyncScriptedDynamoDBClient:
        return AsyncScriptedDynamoDBClient(throughput_exceeded_count, error, response)
    
    return _create
