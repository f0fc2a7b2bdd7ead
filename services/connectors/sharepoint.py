"""
SharePoint Online data source configuration
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

from services.connectors.common import DataSourceType, require, typed_configuration


def _domain_from_site_url(site_url: str) -> str:
    # https://contoso.sharepoint.com/sites/docs -> contoso
    host = urlparse(site_url).hostname or ""
    return host.split(".")[0]


def create_sharepoint_configuration(
    site_url: str,
    tenant_id: str,
    secret_arn: str,
    domain: Optional[str] = None,
    auth_type: str = "OAUTH2_CLIENT_CREDENTIALS",
) -> Dict[str, Any]:
    """Create a SharePoint Online configuration for one site."""
    require(site_url, "site_url")
    require(tenant_id, "tenant_id")
    require(secret_arn, "secret_arn")

    source_configuration = {
        "siteUrls": [site_url],
        "tenantId": tenant_id,
        "domain": domain or _domain_from_site_url(site_url),
        "hostType": "ONLINE",
        "authType": auth_type,
        "credentialsSecretArn": secret_arn,
    }

    return {
        "type": DataSourceType.SHAREPOINT.value,
        "sharePointConfiguration": {
            "sourceConfiguration": source_configuration,
            "crawlerConfiguration": {"filterConfiguration": {"type": "PATTERN"}},
        },
    }


def validate_sharepoint_configuration(
    data_source_configuration: Optional[Dict[str, Any]],
) -> bool:
    sharepoint_configuration = typed_configuration(
        data_source_configuration, DataSourceType.SHAREPOINT, "sharePointConfiguration"
    )
    return bool(sharepoint_configuration and sharepoint_configuration.get("sourceConfiguration"))
