"""
Retrying DynamoDB client.

Wraps a boto3 DynamoDB client (or anything shaped like one) and retries
get_item / delete_item / put_item when the table rejects the request with
ProvisionedThroughputExceededException:
- Fixed backoff between attempts (no jitter, no exponential growth)
- Finite retry budget, or unlimited with retries=-1
- Every other error is raised unmodified on first occurrence

Architecture: boto3 client + retry decorator (sync and asyncio flavours)
"""

from ddb_retry.retry import (
    AsyncRetryingDynamoDBClient,
    InvalidRetryError,
    RetryingDynamoDBClient,
    RetryPolicy,
    is_invalid_retry_error,
    is_provisioned_throughput_exceeded,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncRetryingDynamoDBClient",
    "InvalidRetryError",
    "RetryingDynamoDBClient",
    "RetryPolicy",
    "is_invalid_retry_error",
    "is_provisioned_throughput_exceeded",
]
