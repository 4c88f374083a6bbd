"""
boto3 DynamoDB client with connection pooling.

botocore clients are thread-safe and hold their own urllib3 connection
pool, so callers with the same connection settings share one client.
Settings that change how the client connects (region, endpoint, pool size,
timeouts, botocore attempts) get a client of their own. botocore's
built-in retries are capped by BOTOCORE_MAX_ATTEMPTS (1 by default) so that
throttling is retried by RetryingDynamoDBClient with the configured policy
instead of twice over.
"""

import logging
from typing import Any

import boto3
from botocore.config import Config

from ddb_retry.config import Settings
from ddb_retry.retry.client import RetryingDynamoDBClient

logger = logging.getLogger(__name__)

ClientKey = tuple[str, str | None, int, int, int, int]


def _client_key(settings: Settings) -> ClientKey:
    return (
        settings.AWS_REGION,
        settings.DYNAMODB_ENDPOINT_URL,
        settings.DYNAMODB_MAX_POOL_CONNECTIONS,
        settings.DYNAMODB_CONNECT_TIMEOUT,
        settings.DYNAMODB_READ_TIMEOUT,
        settings.BOTOCORE_MAX_ATTEMPTS,
    )


class DynamoDBClientFactory:
    """
    Process-wide boto3 DynamoDB clients, one per connection settings.
    
    Provides the raw client and a retrying wrapper around it:
    - Raw: for operations this package does not retry (query, scan, ...)
    - Retrying: for GetItem / DeleteItem / PutItem
    
    Retry settings (DDB_RETRIES, DDB_BACKOFF_SECONDS) are not part of the
    cache key: wrappers with different policies share the same raw client.
    """
    
    _clients: dict[ClientKey, Any] = {}
    
    @classmethod
    def get_sync_client(cls, settings: Settings) -> Any:
        """
        Get boto3 DynamoDB client for these settings, creating it on first use.
        
        Args:
            settings: Application settings
        
        Returns:
            botocore DynamoDB client instance
        """
        key = _client_key(settings)
        client = cls._clients.get(key)
        if client is None:
            client = boto3.client(
                "dynamodb",
                region_name=settings.AWS_REGION,
                endpoint_url=settings.DYNAMODB_ENDPOINT_URL,
                config=Config(
                    max_pool_connections=settings.DYNAMODB_MAX_POOL_CONNECTIONS,
                    connect_timeout=settings.DYNAMODB_CONNECT_TIMEOUT,
                    read_timeout=settings.DYNAMODB_READ_TIMEOUT,
                    retries={
                        "max_attempts": settings.BOTOCORE_MAX_ATTEMPTS,
                        "mode": "standard",
                    },
                ),
            )
            cls._clients[key] = client
            logger.info(
                "Initialized DynamoDB client for region %s (endpoint %s)",
                settings.AWS_REGION,
                settings.DYNAMODB_ENDPOINT_URL or "default",
            )
        
        return client
    
    @classmethod
    def get_retrying_client(cls, settings: Settings) -> RetryingDynamoDBClient:
        """
        Get the shared client wrapped with the configured retry policy.
        
        Args:
            settings: Application settings (DDB_RETRIES, DDB_BACKOFF_SECONDS)
        
        Returns:
            RetryingDynamoDBClient around the shared boto3 client
        """
        return RetryingDynamoDBClient(
            cls.get_sync_client(settings),
            retries=settings.DDB_RETRIES,
            backoff=settings.DDB_BACKOFF_SECONDS,
        )
    
    @classmethod
    def close_clients(cls):
        """Close every shared client (cleanup on shutdown)."""
        while cls._clients:
            _, client = cls._clients.popitem()
            client.close()
        logger.info("Closed DynamoDB clients")


def get_dynamodb_client(settings: Settings) -> Any:
    """
    Dependency injection helper for the raw DynamoDB client.
    
    Args:
        settings: Application settings
    
    Returns:
        botocore DynamoDB client instance
    """
    return DynamoDBClientFactory.get_sync_client(settings)


def get_retrying_client(settings: Settings) -> RetryingDynamoDBClient:
    """
    Dependency injection helper for the retrying DynamoDB client.
    
    Args:
        settings: Application settings
    
    Returns:
        RetryingDynamoDBClient instance
    """
    return DynamoDBClientFactory.get_retrying_client(settings)
