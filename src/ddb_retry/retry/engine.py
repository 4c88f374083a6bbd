"""
Retry loop for throttled DynamoDB calls.

One loop serves every operation: callers hand over a zero-argument callable
that performs a single attempt (usually a functools.partial over the
underlying client method) and get back its result.

Retry Policy:
    1. Attempt the call
    2. Success or any non-throttling error: return / re-raise immediately
    3. ProvisionedThroughputExceededException:
       - budget left: spend one retry, sleep backoff, go to 1
       - unlimited (retries=-1): sleep backoff, go to 1
       - budget spent: re-raise the throttling error unmodified
       - budget below -1: raise InvalidRetryError

Usage:
    policy = RetryPolicy(retries=3, backoff=0.1)
    item = execute_with_retry(policy, partial(client.get_item, **kwargs), "get_item")
"""

import asyncio
import time
from typing import Awaitable, Callable, TypeVar

import structlog

from ddb_retry.monitoring.metrics import (
    retries_total,
    retry_failures_total,
    throughput_exceeded_total,
)
from ddb_retry.retry.classifiers import is_provisioned_throughput_exceeded
from ddb_retry.retry.exceptions import InvalidRetryError
from ddb_retry.retry.policy import RetryPolicy

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _spend_retry(policy: RetryPolicy, remaining: int, operation: str) -> int | None:
    """
    Decide what happens after a throttled attempt.
    
    Returns:
        Budget left for the following attempts, or None if the throttling
        error must be re-raised to the caller
    
    Raises:
        InvalidRetryError: Budget is below -1
    """
    throughput_exceeded_total.labels(operation=operation).inc()

    if remaining > 0:
        remaining -= 1
    elif policy.infinite:
        pass
    elif remaining == 0:
        logger.warning(
            "Retry budget exhausted, raising throttling error",
            operation=operation,
            retries=policy.retries,
        )
        retry_failures_total.labels(operation=operation, reason="budget_exhausted").inc()
        return None
    else:
        logger.error("Invalid retry budget", operation=operation, retries=remaining)
        retry_failures_total.labels(operation=operation, reason="invalid_retries").inc()
        raise InvalidRetryError(remaining)

    retries_total.labels(operation=operation).inc()
    logger.warning(
        "Provisioned throughput exceeded, backing off",
        operation=operation,
        retries_remaining="unlimited" if policy.infinite else remaining,
        backoff_seconds=policy.backoff,
    )
    return remaining


def execute_with_retry(
    policy: RetryPolicy,
    attempt: Callable[[], T],
    operation: str = "call",
) -> T:
    """
    Run attempt until it succeeds, fails for good, or the budget is spent.
    
    Args:
        policy: Retry budget and backoff
        attempt: Performs one call against the underlying client
        operation: Operation name for logs and metrics
    
    Returns:
        Whatever attempt returned on its first successful run
    
    Raises:
        ClientError: ProvisionedThroughputExceededException once the budget
            is spent (the original exception, not wrapped)
        InvalidRetryError: Throttled while policy.retries <= -2
        Exception: Any other error from attempt, unmodified
    """
    remaining = policy.retries

    while True:
        try:
            return attempt()
        except Exception as e:
            if not is_provisioned_throughput_exceeded(e):
                raise

            budget = _spend_retry(policy, remaining, operation)
            if budget is None:
                raise
            remaining = budget

        time.sleep(policy.backoff)


async def async_execute_with_retry(
    policy: RetryPolicy,
    attempt: Callable[[], Awaitable[T]],
    operation: str = "call",
) -> T:
    """
    Awaitable counterpart of execute_with_retry.
    
    Backoff uses asyncio.sleep, so a cancelled task stops between attempts
    with CancelledError instead of retrying.
    """
    remaining = policy.retries

    while True:
        try:
            return await attempt()
        except Exception as e:
            if not is_provisioned_throughput_exceeded(e):
                raise

            budget = _spend_retry(policy, remaining, operation)
            if budget is None:
                raise
            remaining = budget

        await asyncio.sleep(policy.backoff)
