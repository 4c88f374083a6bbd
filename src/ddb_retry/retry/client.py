"""
Retrying DynamoDB client.

RetryingDynamoDBClient wraps a DynamoDB client and retries GetItem,
DeleteItem and PutItem while the table answers with
ProvisionedThroughputExceededException. Everything else (query, scan,
meta, exceptions, ...) is forwarded to the wrapped client untouched, so the
wrapper can be dropped in wherever a boto3 client is expected.

Usage:
    client = RetryingDynamoDBClient(boto3.client("dynamodb"), retries=3, backoff=0.2)
    item = client.get_item(TableName="users", Key={"pk": {"S": "42"}})
"""

from datetime import timedelta
from functools import partial
from typing import Any

from ddb_retry.dynamodb.base_client import DynamoDBClient
from ddb_retry.retry.engine import execute_with_retry
from ddb_retry.retry.policy import RetryPolicy


class RetryingDynamoDBClient:
    """
    DynamoDB client decorator with fixed-backoff retry on throttling.
    
    The retry counter lives in each call, so one instance can be shared
    between threads as long as the wrapped client can.
    
    Attributes:
        client: Wrapped DynamoDB client (borrowed, never closed here)
        policy: Retry budget and backoff
    """

    def __init__(
        self,
        client: DynamoDBClient,
        retries: int,
        backoff: float | timedelta = 0.0,
    ):
        """
        Initialize retrying client.
        
        Args:
            client: DynamoDB client to wrap
            retries: Retries per call after a throttled attempt
                (-1 = unlimited; <= -2 is reported lazily)
            backoff: Seconds (or timedelta) to wait before each retry
        """
        self._client = client
        self._policy = RetryPolicy(retries=retries, backoff=backoff)

    @classmethod
    def from_policy(cls, client: DynamoDBClient, policy: RetryPolicy) -> "RetryingDynamoDBClient":
        return cls(client, policy.retries, policy.backoff)

    @property
    def client(self) -> DynamoDBClient:
        return self._client

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    @property
    def retries(self) -> int:
        return self._policy.retries

    @property
    def backoff(self) -> float:
        return self._policy.backoff

    def get_item(self, **kwargs: Any) -> dict[str, Any]:
        """GetItem with retry on ProvisionedThroughputExceededException."""
        return execute_with_retry(
            self._policy, partial(self._client.get_item, **kwargs), "get_item"
        )

    def delete_item(self, **kwargs: Any) -> dict[str, Any]:
        """DeleteItem with retry on ProvisionedThroughputExceededException."""
        return execute_with_retry(
            self._policy, partial(self._client.delete_item, **kwargs), "delete_item"
        )

    def put_item(self, **kwargs: Any) -> dict[str, Any]:
        """PutItem with retry on ProvisionedThroughputExceededException."""
        return execute_with_retry(
            self._policy, partial(self._client.put_item, **kwargs), "put_item"
        )

    def __getattr__(self, name: str) -> Any:
        # Only called for attributes not found on the wrapper itself
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._client, name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(client={self._client!r}, "
            f"retries={self.retries}, backoff={self.backoff})"
        )
