# Description: Data source connectors for Bedrock knowledge bases.
from services.connectors.common import ConnectorType, DataSourceType, unique_client_token
from services.connectors.base import CONNECTOR_PROFILES, DataSourceConnector
from services.connectors.factory import create_connector, get_available_types
from services.connectors.s3 import build_s3_configuration, create_s3_configuration
from services.connectors.web_crawler import create_web_crawler_configuration
from services.connectors.sharepoint import create_sharepoint_configuration
from services.connectors.confluence import create_confluence_configuration
from services.connectors.kms_lighthouse import (
    create_category_configuration,
    create_kms_lighthouse_configuration,
    create_repository_configuration,
    start_kms_lighthouse_ingestion,
)

__all__ = [
    'ConnectorType',
    'DataSourceType',
    'CONNECTOR_PROFILES',
    'DataSourceConnector',
    'create_connector',
    'get_available_types',
    'build_s3_configuration',
    'create_s3_configuration',
    'create_web_crawler_configuration',
    'create_sharepoint_configuration',
    'create_confluence_configuration',
    'create_kms_lighthouse_configuration',
    'create_repository_configuration',
    'create_category_configuration',
    'start_kms_lighthouse_ingestion',
    'unique_client_token',
]
