import pytest

from api.models.connector_models import ConnectorConfig
from services.connectors.base import DataSourceConnector
from services.connectors.common import ConnectorType
from services.connectors.factory import create_connector, get_available_types
from services.exceptions import ConnectorError
from tests.conftest import KNOWLEDGE_BASE_ID


@pytest.mark.parametrize("connector_type", list(ConnectorType))
def test_creates_connector_for_every_type(bedrock_agent_client, connector_type):
    connector = create_connector(connector_type, bedrock_agent_client, KNOWLEDGE_BASE_ID)

    assert isinstance(connector, DataSourceConnector)
    assert connector.connector_type is connector_type
    assert connector.knowledge_base_id == KNOWLEDGE_BASE_ID
    assert connector.client is bedrock_agent_client
    assert connector.config == ConnectorConfig.default()


def test_accepts_string_value(bedrock_agent_client):
    connector = create_connector("WEB_CRAWLER", bedrock_agent_client, KNOWLEDGE_BASE_ID)
    assert connector.connector_type is ConnectorType.WEB_CRAWLER


def test_keeps_supplied_config(bedrock_agent_client):
    config = ConnectorConfig(max_results=25)
    connector = create_connector(ConnectorType.S3, bedrock_agent_client, KNOWLEDGE_BASE_ID, config)
    assert connector.config is config


@pytest.mark.parametrize("connector_type", ["FTP", "s3", None])
def test_unsupported_type_is_fatal(bedrock_agent_client, connector_type):
    with pytest.raises(ValueError, match="Unsupported connector type") as exc_info:
        create_connector(connector_type, bedrock_agent_client, KNOWLEDGE_BASE_ID)
    assert not isinstance(exc_info.value, ConnectorError)


def test_factory_makes_no_remote_calls(bedrock_agent_client):
    create_connector(ConnectorType.SHAREPOINT, bedrock_agent_client, KNOWLEDGE_BASE_ID)
    assert bedrock_agent_client.method_calls == []


def test_available_types():
    assert get_available_types() == [
        ConnectorType.S3,
        ConnectorType.WEB_CRAWLER,
        ConnectorType.SHAREPOINT,
        ConnectorType.CONFLUENCE,
        ConnectorType.KMS_LIGHTHOUSE,
    ]
