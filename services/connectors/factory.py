from typing import List, Optional, Union

from api.models.connector_models import ConnectorConfig
from services.connectors.base import DataSourceConnector
from services.connectors.common import ConnectorType


def create_connector(
    connector_type: Union[ConnectorType, str],
    client,
    knowledge_base_id: str,
    config: Optional[ConnectorConfig] = None,
) -> DataSourceConnector:
    """
    Create a data source connector.

    Args:
        connector_type: ConnectorType member or its value, e.g. "S3"
        client: bedrock-agent client, owned by the caller
        knowledge_base_id: Knowledge base the data sources belong to
        config: Connector settings, defaults to ConnectorConfig.default()

    Raises:
        ValueError: The connector type is not supported
    """
    if not isinstance(connector_type, ConnectorType):
        try:
            connector_type = ConnectorType(connector_type)
        except ValueError:
            raise ValueError(f"Unsupported connector type: {connector_type}") from None

    return DataSourceConnector(
        connector_type, client, knowledge_base_id, config or ConnectorConfig.default()
    )


def get_available_types() -> List[ConnectorType]:
    return list(ConnectorType)
