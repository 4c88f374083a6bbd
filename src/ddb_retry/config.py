"""
Configuration settings for the retrying DynamoDB client.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "ddb-retry"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === AWS / DynamoDB ===
    AWS_REGION: str = "us-east-1"
    DYNAMODB_ENDPOINT_URL: Optional[str] = None  # e.g. http://localhost:8000 for DynamoDB Local
    DYNAMODB_MAX_POOL_CONNECTIONS: int = 10
    DYNAMODB_CONNECT_TIMEOUT: int = 5  # seconds
    DYNAMODB_READ_TIMEOUT: int = 10  # seconds
    BOTOCORE_MAX_ATTEMPTS: int = 1  # 1 = botocore does not retry, throttling is handled here
    
    # === Retry ===
    # -1 retries forever; <= -2 is only rejected once a throttle is hit
    DDB_RETRIES: int = 3
    DDB_BACKOFF_SECONDS: float = Field(default=0.1, ge=0)


# Global settings instance
settings = Settings()
