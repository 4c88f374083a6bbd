"""
Retrying DynamoDB client for asyncio.

Same contract as RetryingDynamoDBClient, for clients whose methods are
coroutines (aiobotocore / aioboto3). Backoff is an asyncio.sleep, so other
tasks keep running while a throttled call waits.
"""

from datetime import timedelta
from functools import partial
from typing import Any

from ddb_retry.dynamodb.base_client import AsyncDynamoDBClient
from ddb_retry.retry.engine import async_execute_with_retry
from ddb_retry.retry.policy import RetryPolicy


class AsyncRetryingDynamoDBClient:
    """
    Async DynamoDB client decorator with fixed-backoff retry on throttling.
    
    Attributes:
        client: Wrapped async DynamoDB client (borrowed, never closed here)
        policy: Retry budget and backoff
    """

    def __init__(
        self,
        client: AsyncDynamoDBClient,
        retries: int,
        backoff: float | timedelta = 0.0,
    ):
        self._client = client
        self._policy = RetryPolicy(retries=retries, backoff=backoff)

    @classmethod
    def from_policy(
        cls, client: AsyncDynamoDBClient, policy: RetryPolicy
    ) -> "AsyncRetryingDynamoDBClient":
        return cls(client, policy.retries, policy.backoff)

    @property
    def client(self) -> AsyncDynamoDBClient:
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

    async def get_item(self, **kwargs: Any) -> dict[str, Any]:
        return await async_execute_with_retry(
            self._policy, partial(self._client.get_item, **kwargs), "get_item"
        )

    async def delete_item(self, **kwargs: Any) -> dict[str, Any]:
        return await async_execute_with_retry(
            self._policy, partial(self._client.delete_item, **kwargs), "delete_item"
        )

    async def put_item(self, **kwargs: Any) -> dict[str, Any]:
        return await async_execute_with_retry(
            self._policy, partial(self._client.put_item, **kwargs), "put_item"
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._client, name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(client={self._client!r}, "
            f"retries={self.retries}, backoff={self.backoff})"
        )
