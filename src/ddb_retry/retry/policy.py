"""
Retry policy.

This module defines the RetryPolicy dataclass: how many times a throttled
DynamoDB call may be retried and how long to wait between attempts.
"""

from dataclasses import dataclass
from datetime import timedelta

# Sentinel for "retry until the call stops being throttled"
INFINITE_RETRIES = -1


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry budget and fixed backoff for throttled calls.
    
    The retries value is deliberately not validated here. Values <= -2 are
    accepted and only rejected (with InvalidRetryError) the first time a
    call is actually throttled, so a misconfigured client keeps working for
    as long as the table never pushes back.
    
    Attributes:
        retries: Extra attempts allowed after a throttled attempt
            (-1 = unlimited, 0 = fail on first throttle)
        backoff: Seconds to sleep before each retry (timedelta accepted,
            negative values are treated as 0)
    """

    retries: int
    backoff: float = 0.0

    def __post_init__(self) -> None:
        """Normalize backoff to non-negative seconds."""
        backoff = self.backoff
        if isinstance(backoff, timedelta):
            backoff = backoff.total_seconds()
        # A negative wait means no wait
        object.__setattr__(self, "backoff", max(0.0, backoff))

    @property
    def infinite(self) -> bool:
        """True when the policy retries without an upper bound."""
        return self.retries == INFINITE_RETRIES
