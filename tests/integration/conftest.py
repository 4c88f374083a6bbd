"""Integration test fixtures.

Provides a real botocore DynamoDB client with dummy credentials, activated
under a Stubber for each test.
"""

import boto3
import pytest
from botocore.config import Config
from botocore.stub import Stubber


@pytest.fixture
def dynamodb_client():
    """Real boto3 DynamoDB client; requests never leave the process."""
    client = boto3.client(
        "dynamodb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        config=Config(retries={"max_attempts": 1, "mode": "standard"}),
    )
    yield client
    client.close()


@pytest.fixture
def stubber(dynamodb_client):
    """Activated Stubber; asserts every queued response was consumed."""
    with Stubber(dynamodb_client) as stub:
        yield stub
        stub.assert_no_pending_responses()
