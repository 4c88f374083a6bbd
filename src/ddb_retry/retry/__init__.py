"""
Retry-on-throttling for DynamoDB clients.

DynamoDB answers with ProvisionedThroughputExceededException when a table
(or index) is asked for more capacity than it has. This package retries
exactly that condition, with a fixed sleep between attempts:

1. **Finite budget**: retries >= 0 extra attempts, then the throttling
   error is raised unmodified
2. **Unlimited**: retries = -1 retries until the table stops throttling
3. **Misconfigured**: retries <= -2 raises InvalidRetryError on the first
   throttle

Main Components:
    - RetryingDynamoDBClient / AsyncRetryingDynamoDBClient: client decorators
    - execute_with_retry / async_execute_with_retry: shared retry loop
    - RetryPolicy: retries + backoff
    - InvalidRetryError: raised for retries <= -2

Usage:
    >>> from ddb_retry.retry import RetryingDynamoDBClient
    >>> client = RetryingDynamoDBClient(boto3.client("dynamodb"), retries=3, backoff=0.2)
    >>> client.put_item(TableName="users", Item={"pk": {"S": "42"}})
"""

from ddb_retry.retry.async_client import AsyncRetryingDynamoDBClient
from ddb_retry.retry.classifiers import (
    PROVISIONED_THROUGHPUT_EXCEEDED,
    client_error_code,
    is_provisioned_throughput_exceeded,
)
from ddb_retry.retry.client import RetryingDynamoDBClient
from ddb_retry.retry.engine import async_execute_with_retry, execute_with_retry
from ddb_retry.retry.exceptions import InvalidRetryError, is_invalid_retry_error
from ddb_retry.retry.policy import INFINITE_RETRIES, RetryPolicy

__all__ = [
    "AsyncRetryingDynamoDBClient",
    "RetryingDynamoDBClient",
    "execute_with_retry",
    "async_execute_with_retry",
    "RetryPolicy",
    "INFINITE_RETRIES",
    "InvalidRetryError",
    "is_invalid_retry_error",
    "PROVISIONED_THROUGHPUT_EXCEEDED",
    "client_error_code",
    "is_provisioned_throughput_exceeded",
]
