"""
Configuration value objects for knowledge base data source connectors
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_DOCUMENT_SIZE = 10 * 1024 * 1024  # 10MB

# bedrock-agent clientToken length bounds
CLIENT_TOKEN_MIN_LENGTH = 33
CLIENT_TOKEN_MAX_LENGTH = 256


class ConnectorType(Enum):
    S3 = "S3"
    WEB_CRAWLER = "WEB_CRAWLER"
    SHAREPOINT = "SHAREPOINT"
    CONFLUENCE = "CONFLUENCE"
    KMS_LIGHTHOUSE = "KMS_LIGHTHOUSE"


class DataSourceType(str, Enum):
    """Discriminant values of a bedrock-agent dataSourceConfiguration"""

    S3 = "S3"
    WEB = "WEB"
    SHAREPOINT = "SHAREPOINT"
    CONFLUENCE = "CONFLUENCE"


def _drop_empty(values):
    if values is None:
        return []
    return [value for value in values if value]


class ConnectorConfig(BaseModel):
    """Connector tuning knobs shared by every data source operation"""

    model_config = ConfigDict(frozen=True)

    max_results: int = Field(default=50, ge=1, description="Page size for list operations")
    retry_attempts: int = Field(default=3, ge=0, description="Recorded only, no retry loop reads it")
    retry_delay_ms: int = Field(default=1000, ge=0, description="Recorded only, no retry loop reads it")
    enable_validation: bool = Field(
        default=True, description="Validate configurations before create and update calls"
    )

    @classmethod
    def default(cls) -> "ConnectorConfig":
        return cls()

    @classmethod
    def from_settings(cls, settings) -> "ConnectorConfig":
        return cls(
            max_results=settings.CONNECTOR_MAX_RESULTS,
            retry_attempts=settings.CONNECTOR_RETRY_ATTEMPTS,
            retry_delay_ms=settings.CONNECTOR_RETRY_DELAY_MS,
            enable_validation=settings.CONNECTOR_ENABLE_VALIDATION,
        )


class S3SourceConfig(BaseModel):
    """S3 bucket and key prefixes to ingest"""

    model_config = ConfigDict(frozen=True)

    bucket_name: str = Field(..., min_length=1, description="Name of the source bucket")
    bucket_owner_account_id: Optional[str] = Field(
        default=None, description="Account that owns the bucket, for cross-account access"
    )
    inclusion_prefixes: List[str] = Field(default_factory=list)
    exclusion_prefixes: List[str] = Field(default_factory=list)

    @field_validator("inclusion_prefixes", "exclusion_prefixes", mode="before")
    @classmethod
    def _skip_empty_prefixes(cls, value):
        return _drop_empty(value)

    @property
    def bucket_arn(self) -> str:
        return f"arn:aws:s3:::{self.bucket_name}"


class AuthenticationType(Enum):
    BASIC = "BASIC"
    BEARER_TOKEN = "BEARER_TOKEN"
    OAUTH2 = "OAUTH2"
    CUSTOM_HEADERS = "CUSTOM_HEADERS"
    AWS_SECRETS_MANAGER = "AWS_SECRETS_MANAGER"


class KmsAuthenticationConfig(BaseModel):
    """
    Authentication settings for a KMS Lighthouse repository.

    Only the fields that belong to ``auth_type`` are meaningful; the model does
    not check that they are set. Secrets are excluded from serialization.
    """

    model_config = ConfigDict(frozen=True)

    auth_type: AuthenticationType = AuthenticationType.CUSTOM_HEADERS
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, exclude=True)
    bearer_token: Optional[str] = Field(default=None, exclude=True)
    oauth_client_id: Optional[str] = None
    oauth_client_secret: Optional[str] = Field(default=None, exclude=True)
    oauth_token_url: Optional[str] = None
    custom_headers: Dict[str, str] = Field(default_factory=dict)
    secret_arn: Optional[str] = None

    @classmethod
    def basic(cls, username: str, password: str, custom_headers: Optional[Dict[str, str]] = None):
        return cls(
            auth_type=AuthenticationType.BASIC,
            username=username,
            password=password,
            custom_headers=custom_headers or {},
        )

    @classmethod
    def bearer(cls, token: str, custom_headers: Optional[Dict[str, str]] = None):
        return cls(
            auth_type=AuthenticationType.BEARER_TOKEN,
            bearer_token=token,
            custom_headers=custom_headers or {},
        )

    @classmethod
    def oauth2(
        cls,
        client_id: str,
        client_secret: str,
        token_url: str,
        custom_headers: Optional[Dict[str, str]] = None,
    ):
        return cls(
            auth_type=AuthenticationType.OAUTH2,
            oauth_client_id=client_id,
            oauth_client_secret=client_secret,
            oauth_token_url=token_url,
            custom_headers=custom_headers or {},
        )

    @classmethod
    def headers(cls, custom_headers: Dict[str, str]):
        return cls(auth_type=AuthenticationType.CUSTOM_HEADERS, custom_headers=dict(custom_headers))

    @classmethod
    def secrets_manager(cls, secret_arn: str, custom_headers: Optional[Dict[str, str]] = None):
        return cls(
            auth_type=AuthenticationType.AWS_SECRETS_MANAGER,
            secret_arn=secret_arn,
            custom_headers=custom_headers or {},
        )


class KmsLighthouseConfig(BaseModel):
    """Connection and crawl settings for a KMS Lighthouse document repository"""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="Root URL of the Lighthouse instance")
    api_key: Optional[str] = Field(default=None, exclude=True)
    document_endpoints: List[str] = Field(default_factory=list)
    inclusion_patterns: List[str] = Field(default_factory=list)
    exclusion_patterns: List[str] = Field(default_factory=list)
    rate_limit: int = Field(default=50, ge=1, description="Pages crawled per host per minute")
    authentication_config: Optional[KmsAuthenticationConfig] = None
    enable_metadata_extraction: bool = True
    max_document_size: int = Field(default=DEFAULT_MAX_DOCUMENT_SIZE, ge=1)

    @field_validator("base_url")
    @classmethod
    def _require_base_url(cls, value: str) -> str:
        if not value:
            raise ValueError("Base URL is required for KMS Lighthouse configuration")
        return value


class KmsIngestionOptions(BaseModel):
    """
    Options for a KMS Lighthouse ingestion run.

    Only ``client_token`` and ``monitoring_enabled`` change what happens; the
    remaining fields are carried for callers that record them.
    """

    model_config = ConfigDict(frozen=True)

    client_token: Optional[str] = Field(
        default=None, min_length=CLIENT_TOKEN_MIN_LENGTH, max_length=CLIENT_TOKEN_MAX_LENGTH
    )
    monitoring_enabled: bool = True
    batch_size: int = Field(default=100, ge=1)
    enable_parallel_processing: bool = True
    notification_topic_arn: Optional[str] = None
    extract_metadata: bool = True
    retry_attempts: int = Field(default=3, ge=0)

    @classmethod
    def default(cls) -> "KmsIngestionOptions":
        return cls()
