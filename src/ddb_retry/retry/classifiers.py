"""
Error classification for DynamoDB failures.

botocore raises every service error as ClientError (or a generated subclass
such as ``client.exceptions.ProvisionedThroughputExceededException``), so
classification is done on the error code in the parsed response rather
than on the exception class.
"""

from botocore.exceptions import ClientError

PROVISIONED_THROUGHPUT_EXCEEDED = "ProvisionedThroughputExceededException"


def client_error_code(err: BaseException | None) -> str | None:
    """
    Extract the AWS error code from a ClientError.
    
    Returns:
        Error code (e.g. "ConditionalCheckFailedException"), or None when
        err is not a ClientError or carries no code
    """
    if not isinstance(err, ClientError):
        return None
    return err.response.get("Error", {}).get("Code") or None


def is_provisioned_throughput_exceeded(err: BaseException | None) -> bool:
    """
    Check whether err is DynamoDB's ProvisionedThroughputExceededException.
    
    Looks at err and at every exception in its ``__cause__`` chain, so a
    ClientError re-raised inside a wrapper (``raise X from client_error``)
    still counts. Other throttling codes such as ThrottlingException are
    not matched.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if client_error_code(err) == PROVISIONED_THROUGHPUT_EXCEEDED:
            return True
        seen.add(id(err))
        err = err.__cause__
    return False
