#!/usr/bin/env python
"""
Knowledge Base Connector Examples

Walks through knowledge base listing and the S3, web crawler and KMS
Lighthouse data source connectors against a live account.

Usage:
    python run_examples.py [--knowledge-base-id KB_ID]
"""

import argparse
import os
import sys
import boto3

# Add the project root to path so imports work correctly
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api.models.connector_models import ConnectorConfig, ConnectorType, KmsIngestionOptions  # noqa: E402
from config.aws_config import config  # noqa: E402
from config.logging_config import logger  # noqa: E402
from config.settings import settings  # noqa: E402
from services.connectors import (  # noqa: E402
    create_connector,
    create_repository_configuration,
    create_s3_configuration,
    create_web_crawler_configuration,
    start_kms_lighthouse_ingestion,
    unique_client_token,
)
from services.exceptions import ConnectorError  # noqa: E402
from services.knowledgebase_service import KnowledgeBaseManager  # noqa: E402


def knowledge_base_management_demo(client):
    """List the knowledge bases in the account"""
    response = KnowledgeBaseManager(client).list_knowledge_bases()
    summaries = response.get("knowledgeBaseSummaries", [])
    return {
        "count": len(summaries),
        "knowledge_bases": [
            {"name": kb.get("name"), "knowledge_base_id": kb.get("knowledgeBaseId")}
            for kb in summaries
        ],
    }


def s3_data_source_demo(client, knowledge_base_id):
    """Create an S3 data source, start ingestion and read the job status"""
    connector_config = ConnectorConfig(max_results=25, retry_attempts=3, enable_validation=True)
    connector = create_connector(ConnectorType.S3, client, knowledge_base_id, connector_config)

    s3_configuration = create_s3_configuration(
        "my-documents-bucket",
        inclusion_prefixes=["documents/", "manuals/"],
        exclusion_prefixes=["temp/", "archive/"],
    )

    created = connector.create_data_source("Corporate Documents S3 Source", s3_configuration)
    data_source_id = created["dataSource"]["dataSourceId"]

    ingestion = connector.start_ingestion(data_source_id, unique_client_token("ingestion"))
    job_id = ingestion["ingestionJob"]["ingestionJobId"]

    job = connector.get_ingestion_job(data_source_id, job_id)
    return {
        "data_source_id": data_source_id,
        "ingestion_job_id": job_id,
        "status": job["ingestionJob"]["status"],
    }


def web_crawler_data_source_demo(client, knowledge_base_id):
    """Create a web crawler data source and count the data sources in the knowledge base"""
    connector = create_connector(ConnectorType.WEB_CRAWLER, client, knowledge_base_id)

    web_configuration = create_web_crawler_configuration("https://docs.example.com")
    created = connector.create_data_source("Documentation Web Crawler", web_configuration)

    data_sources = connector.list_data_sources()
    return {
        "data_source_id": created["dataSource"]["dataSourceId"],
        "total_data_sources": len(data_sources.get("dataSourceSummaries", [])),
    }


def kms_lighthouse_data_source_demo(client, knowledge_base_id):
    """Create a KMS Lighthouse data source and start a monitored ingestion"""
    connector = create_connector(ConnectorType.KMS_LIGHTHOUSE, client, knowledge_base_id)

    kms_configuration = create_repository_configuration(
        "https://lighthouse.example.com",
        "api-key-123",
        ["documentation", "procedures", "knowledge"],
    )
    created = connector.create_data_source("KMS Lighthouse Repository", kms_configuration)
    data_source_id = created["dataSource"]["dataSourceId"]

    options = KmsIngestionOptions(monitoring_enabled=True, batch_size=50, extract_metadata=True)
    ingestion = start_kms_lighthouse_ingestion(connector, data_source_id, options)
    return {
        "data_source_id": data_source_id,
        "ingestion_job_id": ingestion["ingestionJob"]["ingestionJobId"],
    }


def run_examples(client, knowledge_base_id):
    """Run every demo in order and collect their results"""
    return {
        "knowledge_bases": knowledge_base_management_demo(client),
        "s3": s3_data_source_demo(client, knowledge_base_id),
        "web_crawler": web_crawler_data_source_demo(client, knowledge_base_id),
        "kms_lighthouse": kms_lighthouse_data_source_demo(client, knowledge_base_id),
    }


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="Run the knowledge base connector examples")
    parser.add_argument(
        "--knowledge-base-id",
        default=settings.KNOWLEDGE_BASE_ID,
        help="Knowledge base to attach the example data sources to",
    )
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
        logger.error(f"Connector error: {e}", exc_info=True)
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
