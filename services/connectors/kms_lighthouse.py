"""
KMS Lighthouse repository data source

Lighthouse repositories are crawled as WEB data sources: each document endpoint
becomes a seed URL and the include/exclude patterns become crawler filters.
"""

from typing import Any, Dict, List, Optional

from api.models.connector_models import (
    KmsAuthenticationConfig,
    KmsIngestionOptions,
    KmsLighthouseConfig,
)
from config.logging_config import logger
from services.connectors.common import unique_client_token
from services.connectors.web_crawler import build_web_configuration

REPOSITORY_RATE_LIMIT = 50
CATEGORY_RATE_LIMIT = 30

REPOSITORY_INCLUSION_PATTERNS = [r".*\.(pdf|doc|docx|txt|md)$", r".*\/documents\/.*"]
REPOSITORY_EXCLUSION_PATTERNS = [r".*\/temp\/.*", r".*\/archive\/.*"]

CATEGORY_INCLUSION_PATTERNS = [r".*\/knowledge\/.*", r".*\/procedures\/.*", r".*\/guidelines\/.*"]
CATEGORY_EXCLUSION_PATTERNS = [r".*\/draft\/.*", r".*\/obsolete\/.*"]


def repository_endpoint(base_url: str, repository: str) -> str:
    return f"{base_url}/api/repositories/{repository}/documents"


def category_endpoint(base_url: str, category: str) -> str:
    return f"{base_url}/api/categories/{category}/documents"


def create_kms_lighthouse_configuration(kms_config: KmsLighthouseConfig) -> Dict[str, Any]:
    """
    Create a WEB dataSourceConfiguration for a Lighthouse repository.

    The web crawler request has no place for credentials, the API key, the
    metadata flag or the size limit, so those settings stay on ``kms_config``.
    """
    if kms_config.authentication_config is not None:
        logger.debug(
            f"KMS Lighthouse {kms_config.base_url}: "
            f"{kms_config.authentication_config.auth_type.value} authentication is not forwarded "
            "to the web crawler configuration"
        )

    return build_web_configuration(
        kms_config.document_endpoints,
        rate_limit=kms_config.rate_limit,
        inclusion_filters=kms_config.inclusion_patterns,
        exclusion_filters=kms_config.exclusion_patterns,
    )


def create_repository_configuration(
    base_url: str, api_key: Optional[str], repositories: List[str]
) -> Dict[str, Any]:
    """Crawl the document listing of each named repository with the common document patterns."""
    kms_config = KmsLighthouseConfig(
        base_url=base_url,
        api_key=api_key,
        rate_limit=REPOSITORY_RATE_LIMIT,
        document_endpoints=[repository_endpoint(base_url, repo) for repo in repositories],
        inclusion_patterns=REPOSITORY_INCLUSION_PATTERNS,
        exclusion_patterns=REPOSITORY_EXCLUSION_PATTERNS,
    )
    return create_kms_lighthouse_configuration(kms_config)


def create_category_configuration(
    base_url: str,
    api_key: Optional[str],
    categories: List[str],
    custom_headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Crawl the document listing of each category at a lower rate limit."""
    authentication_config = None
    if custom_headers:
        authentication_config = KmsAuthenticationConfig.headers(custom_headers)

    kms_config = KmsLighthouseConfig(
        base_url=base_url,
        api_key=api_key,
        rate_limit=CATEGORY_RATE_LIMIT,
        document_endpoints=[category_endpoint(base_url, category) for category in categories],
        authentication_config=authentication_config,
        inclusion_patterns=CATEGORY_INCLUSION_PATTERNS,
        exclusion_patterns=CATEGORY_EXCLUSION_PATTERNS,
    )
    return create_kms_lighthouse_configuration(kms_config)


def start_kms_lighthouse_ingestion(
    connector, data_source_id: str, options: Optional[KmsIngestionOptions] = None
) -> Dict[str, Any]:
    """
    Start ingestion for a Lighthouse data source.

    Uses ``options.client_token`` when set, otherwise a
    ``kms-lighthouse-<millis>-<uuid hex>`` token.
    """
    options = options or KmsIngestionOptions.default()
    client_token = options.client_token or unique_client_token("kms-lighthouse")

    response = connector.start_ingestion(data_source_id, client_token)

    logger.info(
        f"Started KMS Lighthouse ingestion: job={response['ingestionJob']['ingestionJobId']} "
        f"data_source={data_source_id} client_token={client_token}"
    )
    if options.monitoring_enabled:
        logger.info("KMS Lighthouse ingestion monitoring: enabled")

    return response
