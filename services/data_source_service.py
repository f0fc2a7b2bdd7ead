from typing import Any, Dict

from api.models.connector_models import ConnectorConfig
from api.models.ingestion_models import KmsIngestionStats
from api.models.models import DataSourceRequest, IngestionRequest, UpdateDataSourceRequest
from services.connectors.base import DataSourceConnector, call_bedrock_agent
from services.connectors.common import ConnectorType
from services.connectors.confluence import create_confluence_configuration
from services.connectors.factory import create_connector
from services.connectors.kms_lighthouse import (
    create_category_configuration,
    create_repository_configuration,
    start_kms_lighthouse_ingestion,
)
from services.connectors.s3 import create_s3_configuration
from services.connectors.sharepoint import create_sharepoint_configuration
from services.connectors.web_crawler import create_web_crawler_configuration
from services.exceptions import ConfigurationValidationError

# List, get and ingestion calls are the same for every connector type
GENERIC_CONNECTOR_TYPE = ConnectorType.S3


def strip_metadata(response: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in response.items() if key != "ResponseMetadata"}


def _s3(settings):
    return create_s3_configuration(
        settings.bucket_name,
        inclusion_prefixes=settings.inclusion_prefixes,
        exclusion_prefixes=settings.exclusion_prefixes,
        bucket_owner_account_id=settings.bucket_owner_account_id,
    )


def _web(settings):
    return create_web_crawler_configuration(
        settings.start_url,
        rate_limit=settings.rate_limit,
        inclusion_filters=settings.inclusion_filters,
        exclusion_filters=settings.exclusion_filters,
        scope=settings.scope.value if settings.scope else None,
    )


def _sharepoint(settings):
    return create_sharepoint_configuration(
        settings.site_url,
        settings.tenant_id,
        settings.secret_arn,
        domain=settings.domain,
        auth_type=settings.auth_type,
    )


def _confluence(settings):
    return create_confluence_configuration(
        settings.server_url,
        settings.secret_arn,
        auth_type=settings.auth_type,
        host_type=settings.host_type,
    )


def _kms_lighthouse(settings):
    if settings.categories:
        return create_category_configuration(
            settings.base_url, settings.api_key, settings.categories, settings.custom_headers
        )
    return create_repository_configuration(settings.base_url, settings.api_key, settings.repositories)


# connector type -> (request member, configuration builder)
CONFIGURATION_BUILDERS = {
    ConnectorType.S3: ("s3", _s3),
    ConnectorType.WEB_CRAWLER: ("web", _web),
    ConnectorType.SHAREPOINT: ("sharepoint", _sharepoint),
    ConnectorType.CONFLUENCE: ("confluence", _confluence),
    ConnectorType.KMS_LIGHTHOUSE: ("kms_lighthouse", _kms_lighthouse),
}


class DataSourceService:
    @staticmethod
    def build_configuration(request: DataSourceRequest) -> Dict[str, Any]:
        """Turn the type-specific settings of a request into a dataSourceConfiguration"""
        member, builder = CONFIGURATION_BUILDERS[request.connector_type]
        settings = getattr(request, member)
        if settings is None:
            raise ConfigurationValidationError(
                f"{request.connector_type.value} data sources require '{member}' settings"
            )
        return builder(settings)

    @staticmethod
    def connector(
        client,
        knowledge_base_id: str,
        config: ConnectorConfig,
        connector_type: ConnectorType = GENERIC_CONNECTOR_TYPE,
    ) -> DataSourceConnector:
        return create_connector(connector_type, client, knowledge_base_id, config)

    @staticmethod
    def create_data_source(
        client, knowledge_base_id: str, request: DataSourceRequest, config: ConnectorConfig
    ) -> Dict[str, Any]:
        data_source_configuration = DataSourceService.build_configuration(request)
        connector = DataSourceService.connector(
            client, knowledge_base_id, config, request.connector_type
        )
        response = connector.create_data_source(
            request.name, data_source_configuration, description=request.description
        )
        return strip_metadata(response)

    @staticmethod
    def update_data_source(
        client,
        knowledge_base_id: str,
        data_source_id: str,
        request: UpdateDataSourceRequest,
        config: ConnectorConfig,
    ) -> Dict[str, Any]:
        data_source_configuration = DataSourceService.build_configuration(request)
        connector = DataSourceService.connector(
            client, knowledge_base_id, config, request.connector_type
        )
        response = connector.update_data_source(
            data_source_id,
            data_source_configuration,
            name=request.name,
            description=request.description,
        )
        return strip_metadata(response)

    @staticmethod
    def delete_data_source(client, knowledge_base_id: str, data_source_id: str) -> Dict[str, Any]:
        response = call_bedrock_agent(
            client,
            "delete_data_source",
            f"Failed to delete data source: {data_source_id}",
            knowledgeBaseId=knowledge_base_id,
            dataSourceId=data_source_id,
        )
        return strip_metadata(response)

    @staticmethod
    def start_ingestion(
        client,
        knowledge_base_id: str,
        data_source_id: str,
        request: IngestionRequest,
        config: ConnectorConfig,
    ) -> Dict[str, Any]:
        connector = DataSourceService.connector(client, knowledge_base_id, config)
        if request.kms_options is not None:
            response = start_kms_lighthouse_ingestion(connector, data_source_id, request.kms_options)
        else:
            response = connector.start_ingestion(data_source_id, request.client_token)
        return strip_metadata(response)

    @staticmethod
    def get_ingestion_job(
        client,
        knowledge_base_id: str,
        data_source_id: str,
        ingestion_job_id: str,
        config: ConnectorConfig,
    ) -> Dict[str, Any]:
        connector = DataSourceService.connector(client, knowledge_base_id, config)
        response = connector.get_ingestion_job(data_source_id, ingestion_job_id)
        job = dict(response.get("ingestionJob", {}))
        job.setdefault("ingestionJobId", ingestion_job_id)
        return {
            "ingestionJob": job,
            "stats": KmsIngestionStats.from_ingestion_job(job).to_dict(),
        }
