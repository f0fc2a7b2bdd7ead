# app/api/models/__init__.py
from api.models.connector_models import (
    AuthenticationType,
    ConnectorConfig,
    ConnectorType,
    DataSourceType,
    KmsAuthenticationConfig,
    KmsIngestionOptions,
    KmsLighthouseConfig,
    S3SourceConfig,
)

from api.models.ingestion_models import KmsIngestionStats
