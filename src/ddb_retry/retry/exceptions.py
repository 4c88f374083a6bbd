"""
Retry configuration exceptions.

This module defines the error raised when a throttled call meets a retry
budget that makes no sense (anything below -1).
"""


class InvalidRetryError(Exception):
    """
    Raised when the retry budget is invalid.
    
    Only surfaced after the underlying client has reported
    ProvisionedThroughputExceededException; a misconfigured client that is
    never throttled never raises it.
    
    Two instances carrying the same retries value compare equal.
    
    Attributes:
        retries: Offending retries value
    """

    def __init__(self, retries: int) -> None:
        self.retries = retries
        super().__init__(f"invalid value for retries: {retries}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidRetryError):
            return NotImplemented
        return self.retries == other.retries

    def __hash__(self) -> int:
        return hash((InvalidRetryError, self.retries))

    def __reduce__(self):
        return (type(self), (self.retries,))


def is_invalid_retry_error(err: BaseException | None) -> bool:
    """
    Check whether err is, or was raised from, an InvalidRetryError.
    
    Follows the explicit ``raise ... from ...`` chain so callers that wrap
    the error still get a positive answer.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, InvalidRetryError):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False
