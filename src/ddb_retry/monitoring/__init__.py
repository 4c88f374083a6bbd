"""Monitoring and metrics instrumentation for the retrying DynamoDB client.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from ddb_retry.monitoring.metrics import (
    retries_total,
    retry_failures_total,
    throughput_exceeded_total,
)

__all__ = [
    "throughput_exceeded_total",
    "retries_total",
    "retry_failures_total",
]
