from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from api.models.connector_models import (
    CLIENT_TOKEN_MAX_LENGTH,
    CLIENT_TOKEN_MIN_LENGTH,
    ConnectorType,
    KmsIngestionOptions,
)


class CrawlScope(Enum):
    HOST_ONLY = "HOST_ONLY"
    SUBDOMAINS = "SUBDOMAINS"


class S3DataSourceRequest(BaseModel):
    bucket_name: str = Field(..., min_length=1, description="Source bucket name")
    inclusion_prefixes: List[str] = Field(default_factory=list)
    exclusion_prefixes: List[str] = Field(default_factory=list)
    bucket_owner_account_id: Optional[str] = None


class WebCrawlerDataSourceRequest(BaseModel):
    start_url: str = Field(..., min_length=1, description="Seed URL for the crawl")
    rate_limit: int = Field(default=100, ge=1, le=300, description="Pages per host per minute")
    inclusion_filters: List[str] = Field(default_factory=list)
    exclusion_filters: List[str] = Field(default_factory=list)
    scope: Optional[CrawlScope] = None


class SharePointDataSourceRequest(BaseModel):
    site_url: str = Field(..., min_length=1)
    tenant_id: str = Field(..., min_length=1)
    secret_arn: str = Field(..., min_length=1, description="Secrets Manager secret with the credentials")
    domain: Optional[str] = None
    auth_type: str = "OAUTH2_CLIENT_CREDENTIALS"


class ConfluenceDataSourceRequest(BaseModel):
    server_url: str = Field(..., min_length=1)
    secret_arn: str = Field(..., min_length=1, description="Secrets Manager secret with the credentials")
    auth_type: str = "BASIC"
    host_type: str = "SAAS"


class KmsLighthouseDataSourceRequest(BaseModel):
    base_url: str = Field(..., min_length=1)
    api_key: Optional[str] = Field(default=None, exclude=True)
    repositories: List[str] = Field(default_factory=list)
    categories: List[str] = Field(
        default_factory=list, description="When set, crawl categories instead of repositories"
    )
    custom_headers: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _require_document_source(self):
        if not any(self.repositories) and not any(self.categories):
            raise ValueError("At least one repository or category is required")
        return self


class DataSourceRequest(BaseModel):
    name: str = Field(..., min_length=1)
    connector_type: ConnectorType
    description: Optional[str] = None
    s3: Optional[S3DataSourceRequest] = None
    web: Optional[WebCrawlerDataSourceRequest] = None
    sharepoint: Optional[SharePointDataSourceRequest] = None
    confluence: Optional[ConfluenceDataSourceRequest] = None
    kms_lighthouse: Optional[KmsLighthouseDataSourceRequest] = None


class UpdateDataSourceRequest(DataSourceRequest):
    name: Optional[str] = None


class IngestionRequest(BaseModel):
    client_token: Optional[str] = Field(
        default=None, min_length=CLIENT_TOKEN_MIN_LENGTH, max_length=CLIENT_TOKEN_MAX_LENGTH
    )
    kms_options: Optional[KmsIngestionOptions] = Field(
        default=None, description="KMS Lighthouse ingestion options; overrides client_token"
    )
