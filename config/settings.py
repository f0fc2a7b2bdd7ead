# app/config/settings.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    AWS_REGION: str = "us-east-1"
    KNOWLEDGE_BASE_ID: str = "kb-example-123"
    LOG_LEVEL: str = "INFO"

    # HTTP server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 5000
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Data source connector defaults
    CONNECTOR_MAX_RESULTS: int = 50
    CONNECTOR_RETRY_ATTEMPTS: int = 3
    CONNECTOR_RETRY_DELAY_MS: int = 1000
    CONNECTOR_ENABLE_VALIDATION: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
