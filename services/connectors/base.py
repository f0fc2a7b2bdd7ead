"""
Knowledge base data source connector

A DataSourceConnector manages the data sources of one knowledge base through a
bedrock-agent client. The connector type selects a ConnectorProfile, which
supplies the expected configuration tag and the validator; everything else is
shared.
"""

import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from botocore.exceptions import ClientError, ParamValidationError

from api.models.connector_models import ConnectorConfig
from api.models.ingestion_models import KmsIngestionStats
from config.logging_config import logger
from services.connectors.common import ConnectorType, DataSourceType
from services.connectors.confluence import validate_confluence_configuration
from services.connectors.s3 import s3_request_configuration, validate_s3_configuration
from services.connectors.sharepoint import validate_sharepoint_configuration
from services.connectors.web_crawler import validate_web_configuration
from services.exceptions import (
    ConfigurationValidationError,
    RemoteCallError,
    ResourceNotFoundError,
)

NOT_FOUND_ERROR_CODES = ("ResourceNotFoundException",)


def _unchanged(configuration: Dict[str, Any]) -> Dict[str, Any]:
    return configuration


@dataclass(frozen=True)
class ConnectorProfile:
    display_name: str
    data_source_type: DataSourceType
    validator: Callable[[Optional[Dict[str, Any]]], bool]
    # Trims a configuration to the members the service accepts
    request_configuration: Callable[[Dict[str, Any]], Dict[str, Any]] = _unchanged


CONNECTOR_PROFILES: Dict[ConnectorType, ConnectorProfile] = {
    ConnectorType.S3: ConnectorProfile(
        "S3", DataSourceType.S3, validate_s3_configuration, s3_request_configuration
    ),
    ConnectorType.WEB_CRAWLER: ConnectorProfile(
        "Web Crawler", DataSourceType.WEB, validate_web_configuration
    ),
    ConnectorType.SHAREPOINT: ConnectorProfile(
        "SharePoint", DataSourceType.SHAREPOINT, validate_sharepoint_configuration
    ),
    ConnectorType.CONFLUENCE: ConnectorProfile(
        "Confluence", DataSourceType.CONFLUENCE, validate_confluence_configuration
    ),
    ConnectorType.KMS_LIGHTHOUSE: ConnectorProfile(
        "KMS Lighthouse", DataSourceType.WEB, validate_web_configuration
    ),
}


def is_not_found(error: BaseException) -> bool:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code") in NOT_FOUND_ERROR_CODES
    return False


def call_bedrock_agent(client, operation: str, failure_message: str, **params) -> Dict[str, Any]:
    """
    Issue one bedrock-agent call and translate its failure.

    Raises:
        ConfigurationValidationError: botocore rejected the request parameters
            before sending it
        ResourceNotFoundError: The service reported the resource as missing
        RemoteCallError: Any other failure raised by the client
    """
    try:
        return getattr(client, operation)(**params)
    except ParamValidationError as e:
        logger.warning(f"{operation} rejected by parameter validation: {e}")
        raise ConfigurationValidationError(failure_message, e) from e
    except ClientError as e:
        if is_not_found(e):
            raise ResourceNotFoundError(failure_message, e) from e
        logger.error(f"{operation} failed: {e.response.get('Error', {}).get('Code')} - {e}")
        raise RemoteCallError(failure_message, e) from e
    except Exception as e:
        logger.error(f"{operation} failed: {e}")
        raise RemoteCallError(failure_message, e) from e


class DataSourceConnector:
    """Data source operations for one knowledge base."""

    def __init__(
        self,
        connector_type: ConnectorType,
        client,
        knowledge_base_id: str,
        config: Optional[ConnectorConfig] = None,
    ):
        self.connector_type = connector_type
        self.profile = CONNECTOR_PROFILES[connector_type]
        self.client = client
        self.knowledge_base_id = knowledge_base_id
        self.config = config or ConnectorConfig.default()

    def __repr__(self) -> str:
        return (
            f"DataSourceConnector(type={self.connector_type.value}, "
            f"knowledge_base_id={self.knowledge_base_id!r})"
        )

    def _call(self, operation: str, failure_message: str, **params) -> Dict[str, Any]:
        return call_bedrock_agent(self.client, operation, failure_message, **params)

    def _check_configuration(self, data_source_configuration: Optional[Dict[str, Any]]) -> None:
        if self.config.enable_validation and not self.validate_configuration(
            data_source_configuration
        ):
            raise ConfigurationValidationError(
                f"Invalid {self.profile.display_name} data source configuration"
            )

    def validate_configuration(self, data_source_configuration: Optional[Dict[str, Any]]) -> bool:
        """
        Shallow structural check of a dataSourceConfiguration.

        Verifies the type tag matches this connector and that the type's
        required nested members are present. Values themselves (URLs, ARNs,
        patterns) are not checked.
        """
        return self.profile.validator(data_source_configuration)

    def create_data_source(
        self,
        name: str,
        data_source_configuration: Dict[str, Any],
        description: Optional[str] = None,
        vector_ingestion_configuration: Optional[Dict[str, Any]] = None,
        data_deletion_policy: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a data source under a fresh idempotency token."""
        self._check_configuration(data_source_configuration)

        params = {
            "knowledgeBaseId": self.knowledge_base_id,
            "name": name,
            "dataSourceConfiguration": self.profile.request_configuration(data_source_configuration),
            "clientToken": str(uuid.uuid4()),
        }
        if description:
            params["description"] = description
        if vector_ingestion_configuration:
            params["vectorIngestionConfiguration"] = vector_ingestion_configuration
        if data_deletion_policy:
            params["dataDeletionPolicy"] = data_deletion_policy

        response = self._call(
            "create_data_source",
            f"Failed to create {self.profile.display_name} data source: {name}",
            **params,
        )
        logger.info(
            f"Created {self.profile.display_name} data source {name} "
            f"({response.get('dataSource', {}).get('dataSourceId')})"
        )
        return response

    def update_data_source(
        self,
        data_source_id: str,
        data_source_configuration: Dict[str, Any],
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Replace the configuration of an existing data source.

        The service requires the data source name on update; when ``name`` is
        omitted the current name is read first.
        """
        self._check_configuration(data_source_configuration)

        failure_message = (
            f"Failed to update {self.profile.display_name} data source: {data_source_id}"
        )
        if not name:
            current = self._call(
                "get_data_source",
                failure_message,
                knowledgeBaseId=self.knowledge_base_id,
                dataSourceId=data_source_id,
            )
            name = current["dataSource"]["name"]

        params = {
            "knowledgeBaseId": self.knowledge_base_id,
            "dataSourceId": data_source_id,
            "name": name,
            "dataSourceConfiguration": self.profile.request_configuration(data_source_configuration),
        }
        if description:
            params["description"] = description

        return self._call("update_data_source", failure_message, **params)

    def delete_data_source(self, data_source_id: str) -> Dict[str, Any]:
        response = self._call(
            "delete_data_source",
            f"Failed to delete {self.profile.display_name} data source: {data_source_id}",
            knowledgeBaseId=self.knowledge_base_id,
            dataSourceId=data_source_id,
        )
        logger.info(f"Deleted {self.profile.display_name} data source {data_source_id}")
        return response

    def list_data_sources(self) -> Dict[str, Any]:
        return self._call(
            "list_data_sources",
            "Failed to list data sources",
            knowledgeBaseId=self.knowledge_base_id,
            maxResults=self.config.max_results,
        )

    def get_data_source(self, data_source_id: str) -> Dict[str, Any]:
        return self._call(
            "get_data_source",
            f"Failed to get data source: {data_source_id}",
            knowledgeBaseId=self.knowledge_base_id,
            dataSourceId=data_source_id,
        )

    def data_source_exists(self, data_source_id: str) -> bool:
        """
        Check whether a data source exists.

        Only a not-found answer from the service yields False; throttling,
        permission and network failures propagate as RemoteCallError.
        """
        try:
            self.get_data_source(data_source_id)
            return True
        except ResourceNotFoundError:
            return False

    def start_ingestion(self, data_source_id: str, client_token: Optional[str] = None) -> Dict[str, Any]:
        params = {"knowledgeBaseId": self.knowledge_base_id, "dataSourceId": data_source_id}
        if client_token is not None:
            params["clientToken"] = client_token

        response = self._call(
            "start_ingestion_job",
            f"Failed to start ingestion for data source: {data_source_id}",
            **params,
        )
        logger.info(
            f"Started ingestion job {response.get('ingestionJob', {}).get('ingestionJobId')} "
            f"for data source {data_source_id}"
        )
        return response

    def get_ingestion_job(self, data_source_id: str, ingestion_job_id: str) -> Dict[str, Any]:
        return self._call(
            "get_ingestion_job",
            "Failed to get ingestion job status",
            knowledgeBaseId=self.knowledge_base_id,
            dataSourceId=data_source_id,
            ingestionJobId=ingestion_job_id,
        )

    def list_ingestion_jobs(self, data_source_id: str) -> Dict[str, Any]:
        return self._call(
            "list_ingestion_jobs",
            "Failed to list ingestion jobs",
            knowledgeBaseId=self.knowledge_base_id,
            dataSourceId=data_source_id,
            maxResults=self.config.max_results,
        )

    def get_ingestion_stats(self, data_source_id: str, ingestion_job_id: str) -> KmsIngestionStats:
        """Snapshot of an ingestion job; polling is left to the caller."""
        response = self.get_ingestion_job(data_source_id, ingestion_job_id)
        job = dict(response.get("ingestionJob", {}))
        job.setdefault("ingestionJobId", ingestion_job_id)
        return KmsIngestionStats.from_ingestion_job(job)
