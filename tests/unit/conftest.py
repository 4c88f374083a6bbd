"""Unit test fixtures (mocks and stubs).

Provides patched sleeps so retry tests run instantly and can count backoffs,
and a helper to read Prometheus counters.
"""

import pytest
from unittest.mock import AsyncMock, patch

from prometheus_client import REGISTRY


@pytest.fixture
def mock_sleep():
    """Patch time.sleep used by the retry loop; yields the mock."""
    with patch("ddb_retry.retry.engine.time.sleep") as mock:
        yield mock


@pytest.fixture
def mock_async_sleep():
    """Patch asyncio.sleep used by the async retry loop; yields the mock."""
    with patch("ddb_retry.retry.engine.asyncio.sleep", new_callable=AsyncMock) as mock:
        yield mock


@pytest.fixture
def metric_value():
    """Read the current value of a Prometheus sample (0.0 if never set).
    
    Usage:
        before = metric_value("dynamodb_retries_total", operation="get_item")
    """
    def _read(name: str, **labels: str) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0
    
    return _read
