"""
DynamoDB client capability.

The retrying clients only ever touch three methods of the client they wrap,
so they depend on these structural protocols rather than on boto3 itself.
A ``boto3.client("dynamodb")`` satisfies DynamoDBClient; an aiobotocore /
aioboto3 client satisfies AsyncDynamoDBClient; test doubles satisfy either
by defining the same three methods.

Requests and responses use the low-level DynamoDB shapes
(``TableName=..., Key={"pk": {"S": "..."}}``) and are passed through
untouched.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DynamoDBClient(Protocol):
    """Blocking client exposing GetItem, DeleteItem and PutItem."""

    def get_item(self, **kwargs: Any) -> dict[str, Any]:
        ...

    def delete_item(self, **kwargs: Any) -> dict[str, Any]:
        ...

    def put_item(self, **kwargs: Any) -> dict[str, Any]:
        ...


@runtime_checkable
class AsyncDynamoDBClient(Protocol):
    """Awaitable client exposing GetItem, DeleteItem and PutItem."""

    async def get_item(self, **kwargs: Any) -> dict[str, Any]:
        ...

    async def delete_item(self, **kwargs: Any) -> dict[str, Any]:
        ...

    async def put_item(self, **kwargs: Any) -> dict[str, Any]:
        ...
