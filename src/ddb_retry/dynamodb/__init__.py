"""
DynamoDB client layer.

- base_client.py: Capability protocols the retrying clients depend on
- client_factory.py: Shared boto3 client built from settings
"""

from ddb_retry.dynamodb.base_client import (
    AsyncDynamoDBClient,
    DynamoDBClient,
)
from ddb_retry.dynamodb.client_factory import (
    DynamoDBClientFactory,
    get_dynamodb_client,
    get_retrying_client,
)

__all__ = [
    "AsyncDynamoDBClient",
    "DynamoDBClient",
    "DynamoDBClientFactory",
    "get_dynamodb_client",
    "get_retrying_client",
]
