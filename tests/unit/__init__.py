"""
Unit tests for ddb-retry.

Test individual components in isolation:
- Retry loop (budget accounting, backoff, lazy InvalidRetryError)
- Retrying clients (sync and asyncio, attribute forwarding)
- Error classifiers and InvalidRetryError equality
- RetryPolicy and Settings
- DynamoDB client factory
"""
