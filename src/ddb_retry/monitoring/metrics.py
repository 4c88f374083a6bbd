"""Custom Prometheus metrics for the retrying DynamoDB client.

Alert rules should be configured for:
- dynamodb_throughput_exceeded_total (table under-provisioned for the load)
- dynamodb_retry_failures_total (callers are seeing throttling errors)
"""

from prometheus_client import Counter

# === Throttling Metrics ===

throughput_exceeded_total = Counter(
    "dynamodb_throughput_exceeded_total",
    "Total ProvisionedThroughputExceededException responses by operation",
    ["operation"],
)
"""
Throttled responses seen from DynamoDB, whether or not they were retried.

Labels:
- operation: get_item, delete_item, put_item
"""

# === Retry Metrics ===

retries_total = Counter(
    "dynamodb_retries_total",
    "Total retry attempts scheduled after a throttled response",
    ["operation"],
)
"""
Retries scheduled (one backoff sleep each).

Labels:
- operation: get_item, delete_item, put_item

Alert thresholds:
- WARN: sustained retry rate > 10% of calls
"""

retry_failures_total = Counter(
    "dynamodb_retry_failures_total",
    "Total throttled calls surfaced to the caller by reason",
    ["operation", "reason"],
)
"""
Throttled calls that were given up on.

Labels:
- operation: get_item, delete_item, put_item
- reason: budget_exhausted (throttling error re-raised),
  invalid_retries (InvalidRetryError raised)

Alert thresholds:
- WARN: any invalid_retries (misconfigured client)
- CRITICAL: budget_exhausted rate > 1% of calls
"""
