#!/usr/bin/env python
"""
KMS Lighthouse Connector Examples

Creates KMS Lighthouse data sources three ways: from repository names, from
document categories with custom headers, and from a full configuration with
bearer token authentication.

Usage:
    python kms_lighthouse_example.py [--knowledge-base-id KB_ID]
"""

import argparse
import os
import sys
import boto3

# Add the project root to path so imports work correctly
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api.models.connector_models import (  # noqa: E402
    ConnectorConfig,
    ConnectorType,
    KmsAuthenticationConfig,
    KmsIngestionOptions,
    KmsLighthouseConfig,
)
from config.aws_config import config  # noqa: E402
from config.logging_config import logger  # noqa: E402
from services.connectors import (  # noqa: E402
    create_category_configuration,
    create_connector,
    create_kms_lighthouse_configuration,
    create_repository_configuration,
    start_kms_lighthouse_ingestion,
    unique_client_token,
)
from services.exceptions import ConnectorError  # noqa: E402

DEFAULT_KNOWLEDGE_BASE_ID = "kb-lighthouse-123"


def basic_integration(client, knowledge_base_id):
    """Repository based data source with default ingestion options"""
    connector = create_connector(ConnectorType.KMS_LIGHTHOUSE, client, knowledge_base_id)

    data_source_configuration = create_repository_configuration(
        "https://lighthouse.company.com",
        "your-api-key",
        ["technical-docs", "procedures", "knowledge-base"],
    )
    created = connector.create_data_source(
        "KMS Lighthouse Technical Documentation", data_source_configuration
    )
    data_source_id = created["dataSource"]["dataSourceId"]

    options = KmsIngestionOptions(monitoring_enabled=True, batch_size=50, extract_metadata=True)
    ingestion = start_kms_lighthouse_ingestion(connector, data_source_id, options)
    job_id = ingestion["ingestionJob"]["ingestionJobId"]

    stats = connector.get_ingestion_stats(data_source_id, job_id)
    return {"data_source_id": data_source_id, "ingestion_job_id": job_id, "stats": str(stats)}


def category_integration(client, knowledge_base_id):
    """Category based data source with custom headers and a tuned connector"""
    connector_config = ConnectorConfig(
        max_results=100, retry_attempts=5, retry_delay_ms=2000, enable_validation=True
    )
    connector = create_connector(
        ConnectorType.KMS_LIGHTHOUSE, client, knowledge_base_id, connector_config
    )

    data_source_configuration = create_category_configuration(
        "https://lighthouse.company.com",
        "advanced-api-key",
        ["engineering", "architecture", "best-practices", "troubleshooting"],
        {"X-Department": "Engineering", "X-Access-Level": "Internal"},
    )
    created = connector.create_data_source(
        "KMS Lighthouse Engineering Knowledge", data_source_configuration
    )
    data_source_id = created["dataSource"]["dataSourceId"]

    options = KmsIngestionOptions(
        client_token=unique_client_token("engineering-docs"),
        monitoring_enabled=True,
        batch_size=25,
        enable_parallel_processing=True,
        extract_metadata=True,
        retry_attempts=5,
    )
    ingestion = start_kms_lighthouse_ingestion(connector, data_source_id, options)
    return {
        "data_source_id": data_source_id,
        "ingestion_job_id": ingestion["ingestionJob"]["ingestionJobId"],
    }


def authenticated_integration(client, knowledge_base_id):
    """Fully specified configuration with bearer token authentication"""
    connector = create_connector(ConnectorType.KMS_LIGHTHOUSE, client, knowledge_base_id)

    authentication_config = KmsAuthenticationConfig.bearer(
        "your-bearer-token",
        custom_headers={"X-API-Version": "v2", "X-Client-ID": "knowledge-base-connector"},
    )
    kms_config = KmsLighthouseConfig(
        base_url="https://secure-lighthouse.company.com",
        api_key="secure-api-key",
        document_endpoints=[
            "https://secure-lighthouse.company.com/api/secure/documents",
            "https://secure-lighthouse.company.com/api/confidential/documents",
        ],
        inclusion_patterns=[r".*\.(pdf|docx|md)$", r".*\/secure\/.*", r".*\/confidential\/.*"],
        exclusion_patterns=[r".*\/draft\/.*", r".*\/personal\/.*"],
        rate_limit=20,
        authentication_config=authentication_config,
        enable_metadata_extraction=True,
        max_document_size=20 * 1024 * 1024,
    )

    created = connector.create_data_source(
        "KMS Lighthouse Secure Documents", create_kms_lighthouse_configuration(kms_config)
    )
    data_source_id = created["dataSource"]["dataSourceId"]

    options = KmsIngestionOptions(
        client_token=unique_client_token("secure-ingestion"),
        monitoring_enabled=True,
        batch_size=10,
        enable_parallel_processing=False,
        extract_metadata=True,
        retry_attempts=3,
    )
    ingestion = start_kms_lighthouse_ingestion(connector, data_source_id, options)

    data_sources = connector.list_data_sources().get("dataSourceSummaries", [])
    return {
        "data_source_id": data_source_id,
        "ingestion_job_id": ingestion["ingestionJob"]["ingestionJobId"],
        "data_sources": [
            {"name": ds.get("name"), "data_source_id": ds.get("dataSourceId"), "status": ds.get("status")}
            for ds in data_sources
        ],
    }


def run_examples(client, knowledge_base_id):
    return {
        "basic": basic_integration(client, knowledge_base_id),
        "categories": category_integration(client, knowledge_base_id),
        "authenticated": authenticated_integration(client, knowledge_base_id),
    }


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="Run the KMS Lighthouse connector examples")
    parser.add_argument("--knowledge-base-id", default=DEFAULT_KNOWLEDGE_BASE_ID)
    return parser.parse_args(argv)


def main(argv=None, client=None):
    """Main entry point"""
    args = parse_arguments(argv)
    client = client or boto3.client("bedrock-agent", config=config)

    try:
        results = run_examples(client, args.knowledge_base_id)
        for name, result in results.items():
            logger.info(f"{name}: {result}")
        return 0
    except ConnectorError as e:
        logger.error(f"KMS Lighthouse connector error: {e}", exc_info=True)
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
