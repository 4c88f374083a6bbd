"""
Integration tests for ddb-retry.

Test the retrying client against a real boto3 DynamoDB client whose HTTP
layer is replaced by botocore's Stubber, so botocore's own parameter
validation and error parsing are exercised without network access.
"""
