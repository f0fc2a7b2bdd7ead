"""
Confluence data source configuration
"""

from typing import Any, Dict, Optional

from services.connectors.common import DataSourceType, require, typed_configuration


def create_confluence_configuration(
    server_url: str,
    secret_arn: str,
    auth_type: str = "BASIC",
    host_type: str = "SAAS",
) -> Dict[str, Any]:
    """Create a Confluence configuration authenticated through a Secrets Manager secret."""
    require(server_url, "server_url")
    require(secret_arn, "secret_arn")

    return {
        "type": DataSourceType.CONFLUENCE.value,
        "confluenceConfiguration": {
            "sourceConfiguration": {
                "hostUrl": server_url,
                "hostType": host_type,
                "authType": auth_type,
                "credentialsSecretArn": secret_arn,
            },
            "crawlerConfiguration": {"filterConfiguration": {"type": "PATTERN"}},
        },
    }


def validate_confluence_configuration(
    data_source_configuration: Optional[Dict[str, Any]],
) -> bool:
    confluence_configuration = typed_configuration(
        data_source_configuration, DataSourceType.CONFLUENCE, "confluenceConfiguration"
    )
    return bool(confluence_configuration and confluence_configuration.get("sourceConfiguration"))
