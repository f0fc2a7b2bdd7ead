import pytest
from botocore.exceptions import ParamValidationError

from api.models.connector_models import ConnectorConfig
from tests.conftest import KNOWLEDGE_BASE_ID, client_error

DATASOURCES = f"/ai/knowledgebases/{KNOWLEDGE_BASE_ID}/datasources"
SECURE_TOKEN = "secure-ingestion-1700000000123-0123456789abcdef"


def test_health(api_client):
    response = api_client.get("/ai/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_knowledge_bases(api_client):
    response = api_client.get("/ai/knowledgebases")
    assert response.status_code == 200
    body = response.json()
    assert body["total_count"] == 1
    assert body["knowledgebases"][0]["knowledge_base_id"] == KNOWLEDGE_BASE_ID


def test_get_knowledge_base_not_found(api_client, bedrock_agent_client):
    bedrock_agent_client.get_knowledge_base.side_effect = client_error(
        "ResourceNotFoundException", "GetKnowledgeBase"
    )
    response = api_client.get("/ai/knowledgebases/kb-missing")
    assert response.status_code == 404
    assert response.json() == {
        "error": "Failed to get knowledge base: kb-missing",
        "kind": "not_found",
    }


def test_connector_types(api_client):
    response = api_client.get(f"{DATASOURCES}/types")
    assert response.status_code == 200
    assert response.json()["types"] == [
        "S3",
        "WEB_CRAWLER",
        "SHAREPOINT",
        "CONFLUENCE",
        "KMS_LIGHTHOUSE",
    ]


def test_list_data_sources(api_client, bedrock_agent_client):
    response = api_client.get(DATASOURCES)
    assert response.status_code == 200
    assert response.json()["dataSourceSummaries"][0]["dataSourceId"] == "ds-123"
    bedrock_agent_client.list_data_sources.assert_called_once_with(
        knowledgeBaseId=KNOWLEDGE_BASE_ID, maxResults=50
    )


def test_create_s3_data_source(api_client, bedrock_agent_client):
    response = api_client.post(
        DATASOURCES,
        json={
            "name": "Corporate Documents S3 Source",
            "connector_type": "S3",
            "s3": {
                "bucket_name": "my-documents-bucket",
                "inclusion_prefixes": ["documents/", "manuals/"],
                "exclusion_prefixes": ["temp/", "archive/"],
            },
        },
    )

    assert response.status_code == 201
    assert "ResponseMetadata" not in response.json()
    kwargs = bedrock_agent_client.create_data_source.call_args.kwargs
    assert kwargs["dataSourceConfiguration"]["s3Configuration"]["bucketArn"] == (
        "arn:aws:s3:::my-documents-bucket"
    )


def test_create_kms_lighthouse_data_source_from_categories(api_client, bedrock_agent_client):
    response = api_client.post(
        DATASOURCES,
        json={
            "name": "Engineering knowledge",
            "connector_type": "KMS_LIGHTHOUSE",
            "kms_lighthouse": {
                "base_url": "https://lighthouse.example.com",
                "repositories": ["ignored"],
                "categories": ["engineering"],
            },
        },
    )

    assert response.status_code == 201
    configuration = bedrock_agent_client.create_data_source.call_args.kwargs["dataSourceConfiguration"]
    seeds = configuration["webConfiguration"]["sourceConfiguration"]["urlConfiguration"]["seedUrls"]
    assert seeds == [{"url": "https://lighthouse.example.com/api/categories/engineering/documents"}]


def test_create_without_type_settings(api_client, bedrock_agent_client):
    response = api_client.post(DATASOURCES, json={"name": "docs", "connector_type": "CONFLUENCE"})

    assert response.status_code == 400
    assert response.json()["kind"] == "validation_failed"
    bedrock_agent_client.create_data_source.assert_not_called()


def test_create_with_unknown_type(api_client):
    response = api_client.post(DATASOURCES, json={"name": "docs", "connector_type": "FTP"})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "code, status_code",
    [
        ("ResourceNotFoundException", 404),
        ("ThrottlingException", 429),
        ("ValidationException", 400),
        ("AccessDeniedException", 502),
    ],
)
def test_get_data_source_error_mapping(api_client, bedrock_agent_client, code, status_code):
    bedrock_agent_client.get_data_source.side_effect = client_error(code)
    response = api_client.get(f"{DATASOURCES}/ds-123")
    assert response.status_code == status_code


def test_update_data_source_reads_name(api_client, bedrock_agent_client):
    response = api_client.put(
        f"{DATASOURCES}/ds-123",
        json={"connector_type": "WEB_CRAWLER", "web": {"start_url": "https://docs.example.com"}},
    )

    assert response.status_code == 200
    kwargs = bedrock_agent_client.update_data_source.call_args.kwargs
    assert kwargs["name"] == "docs"
    assert kwargs["dataSourceConfiguration"]["type"] == "WEB"


def test_delete_data_source(api_client, bedrock_agent_client):
    response = api_client.delete(f"{DATASOURCES}/ds-123")
    assert response.status_code == 200
    assert response.json() == {"dataSourceId": "ds-123", "status": "DELETING"}


def test_start_ingestion_without_body(api_client, bedrock_agent_client):
    response = api_client.post(f"{DATASOURCES}/ds-123/ingestion-jobs")

    assert response.status_code == 202
    assert response.json()["ingestionJob"]["ingestionJobId"] == "job-456"
    bedrock_agent_client.start_ingestion_job.assert_called_once_with(
        knowledgeBaseId=KNOWLEDGE_BASE_ID, dataSourceId="ds-123"
    )


def test_start_kms_lighthouse_ingestion(api_client, bedrock_agent_client):
    response = api_client.post(
        f"{DATASOURCES}/ds-123/ingestion-jobs",
        json={"kms_options": {"client_token": SECURE_TOKEN, "batch_size": 10}},
    )

    assert response.status_code == 202
    assert bedrock_agent_client.start_ingestion_job.call_args.kwargs["clientToken"] == SECURE_TOKEN


def test_list_ingestion_jobs(api_client, connector_config, bedrock_agent_client):
    response = api_client.get(f"{DATASOURCES}/ds-123/ingestion-jobs")
    assert response.status_code == 200
    assert bedrock_agent_client.list_ingestion_jobs.call_args.kwargs["maxResults"] == (
        connector_config.max_results
    )


def test_get_ingestion_job_with_stats(api_client):
    response = api_client.get(f"{DATASOURCES}/ds-123/ingestion-jobs/job-456")

    assert response.status_code == 200
    stats = response.json()["stats"]
    assert stats["documents_processed"] == 10
    assert stats["documents_successful"] == 8
    assert stats["documents_failed"] == 2
    assert stats["processing_duration_seconds"] == 100
    assert stats["is_complete"] is True


@pytest.mark.parametrize("connector_config", [ConnectorConfig(max_results=5)])
def test_connector_config_dependency(api_client, bedrock_agent_client, connector_config):
    api_client.get(DATASOURCES)
    assert bedrock_agent_client.list_data_sources.call_args.kwargs["maxResults"] == 5


def test_create_kms_lighthouse_without_repositories_or_categories(api_client, bedrock_agent_client):
    response = api_client.post(
        DATASOURCES,
        json={
            "name": "Lighthouse",
            "connector_type": "KMS_LIGHTHOUSE",
            "kms_lighthouse": {"base_url": "https://lighthouse.example.com"},
        },
    )

    assert response.status_code == 422
    bedrock_agent_client.create_data_source.assert_not_called()


@pytest.mark.parametrize("client_token", ["too-short", "x" * 257])
def test_start_ingestion_rejects_client_token_length(api_client, bedrock_agent_client, client_token):
    response = api_client.post(
        f"{DATASOURCES}/ds-123/ingestion-jobs", json={"client_token": client_token}
    )

    assert response.status_code == 422
    bedrock_agent_client.start_ingestion_job.assert_not_called()


def test_parameter_validation_failure_is_bad_request(api_client, bedrock_agent_client):
    bedrock_agent_client.create_data_source.side_effect = ParamValidationError(
        report="Invalid length for parameter seedUrls, value: 0, valid min length: 1"
    )
    response = api_client.post(
        DATASOURCES,
        json={
            "name": "docs",
            "connector_type": "WEB_CRAWLER",
            "web": {"start_url": "https://docs.example.com"},
        },
    )

    assert response.status_code == 400
    body = response.json()
    assert body["kind"] == "validation_failed"
    assert "seedUrls" in body["details"]


def test_app_wiring():
    from config.settings import Settings
    from main import API_VERSION, app

    paths = {route.path for route in app.routes}
    assert "/ai/health" in paths
    assert "/ai/knowledgebases/{knowledge_base_id}/datasources/{data_source_id}/ingestion-jobs" in paths
    assert app.version == API_VERSION

    defaults = Settings()
    assert (defaults.API_HOST, defaults.API_PORT) == ("0.0.0.0", 5000)


def test_cors_origins_from_settings(api_client):
    response = api_client.get("/ai/health", headers={"Origin": "https://portal.example.com"})
    assert response.headers["access-control-allow-origin"] in ("*", "https://portal.example.com")
