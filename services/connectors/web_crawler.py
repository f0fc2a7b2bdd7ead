"""
Web crawler data source configuration
"""

from typing import Any, Dict, List, Optional

from services.connectors.common import DataSourceType, require, typed_configuration

DEFAULT_RATE_LIMIT = 100


def build_web_configuration(
    seed_urls: List[str],
    rate_limit: int = DEFAULT_RATE_LIMIT,
    inclusion_filters: Optional[List[str]] = None,
    exclusion_filters: Optional[List[str]] = None,
    scope: Optional[str] = None,
) -> Dict[str, Any]:
    """Assemble a WEB dataSourceConfiguration from seed URLs and crawler settings."""
    crawler_configuration = {"crawlerLimits": {"rateLimit": rate_limit}}

    if inclusion_filters:
        crawler_configuration["inclusionFilters"] = list(inclusion_filters)

    if exclusion_filters:
        crawler_configuration["exclusionFilters"] = list(exclusion_filters)

    if scope:
        crawler_configuration["scope"] = scope

    return {
        "type": DataSourceType.WEB.value,
        "webConfiguration": {
            "sourceConfiguration": {
                "urlConfiguration": {"seedUrls": [{"url": url} for url in seed_urls]}
            },
            "crawlerConfiguration": crawler_configuration,
        },
    }


def create_web_crawler_configuration(
    start_url: str,
    rate_limit: int = DEFAULT_RATE_LIMIT,
    inclusion_filters: Optional[List[str]] = None,
    exclusion_filters: Optional[List[str]] = None,
    scope: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a web crawler configuration for a single seed URL.

    ``scope`` is passed through as the crawler scope (HOST_ONLY or SUBDOMAINS);
    when omitted the service default applies.
    """
    require(start_url, "start_url")
    return build_web_configuration(
        [start_url],
        rate_limit=rate_limit,
        inclusion_filters=inclusion_filters,
        exclusion_filters=exclusion_filters,
        scope=scope,
    )


def validate_web_configuration(data_source_configuration: Optional[Dict[str, Any]]) -> bool:
    web_configuration = typed_configuration(
        data_source_configuration, DataSourceType.WEB, "webConfiguration"
    )
    if not web_configuration:
        return False
    source_configuration = web_configuration.get("sourceConfiguration") or {}
    url_configuration = source_configuration.get("urlConfiguration") or {}
    return bool(url_configuration.get("seedUrls"))
