from datetime import datetime, timezone
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber
from fastapi.testclient import TestClient

from api.models.connector_models import ConnectorConfig
from api.routes.routes import get_connector_config
from config.aws_config import get_bedrock_agent_client
from main import app

KNOWLEDGE_BASE_ID = "kb-test-123"


def client_error(code, operation="GetDataSource", message="simulated failure"):
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def bedrock_agent_client():
    client = MagicMock()
    client.create_data_source.return_value = {
        "dataSource": {"dataSourceId": "ds-123", "name": "docs", "status": "AVAILABLE"},
        "ResponseMetadata": {"HTTPStatusCode": 200},
    }
    client.update_data_source.return_value = {"dataSource": {"dataSourceId": "ds-123"}}
    client.delete_data_source.return_value = {
        "dataSourceId": "ds-123",
        "status": "DELETING",
        "ResponseMetadata": {"HTTPStatusCode": 202},
    }
    client.get_data_source.return_value = {
        "dataSource": {"dataSourceId": "ds-123", "name": "docs", "status": "AVAILABLE"}
    }
    client.list_data_sources.return_value = {
        "dataSourceSummaries": [{"dataSourceId": "ds-123", "name": "docs", "status": "AVAILABLE"}]
    }
    client.start_ingestion_job.return_value = {
        "ingestionJob": {"ingestionJobId": "job-456", "status": "STARTING"}
    }
    client.get_ingestion_job.return_value = {
        "ingestionJob": {
            "ingestionJobId": "job-456",
            "status": "COMPLETE",
            "startedAt": datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
            "updatedAt": datetime(2024, 1, 1, 12, 1, 40, tzinfo=timezone.utc),
            "statistics": {
                "numberOfDocumentsScanned": 10,
                "numberOfNewDocumentsIndexed": 6,
                "numberOfModifiedDocumentsIndexed": 2,
                "numberOfDocumentsFailed": 2,
            },
        }
    }
    client.list_ingestion_jobs.return_value = {
        "ingestionJobSummaries": [{"ingestionJobId": "job-456", "status": "COMPLETE"}]
    }
    client.list_knowledge_bases.return_value = {
        "knowledgeBaseSummaries": [
            {
                "knowledgeBaseId": KNOWLEDGE_BASE_ID,
                "name": "corporate-docs",
                "description": "Corporate documents",
                "status": "ACTIVE",
                "updatedAt": datetime(2024, 1, 1, tzinfo=timezone.utc),
            }
        ]
    }
    return client


@pytest.fixture
def connector_config():
    return ConnectorConfig.default()


@pytest.fixture
def api_client(bedrock_agent_client, connector_config):
    app.dependency_overrides[get_bedrock_agent_client] = lambda: bedrock_agent_client
    app.dependency_overrides[get_connector_config] = lambda: connector_config
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def real_bedrock_agent_client():
    # Parameter validation runs before signing, so rejected calls never leave the process
    client = boto3.client(
        "bedrock-agent",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    yield client
    client.close()


@pytest.fixture
def stubbed_bedrock_agent_client(real_bedrock_agent_client):
    with Stubber(real_bedrock_agent_client) as stubber:
        yield real_bedrock_agent_client, stubber
        stubber.assert_no_pending_responses()
