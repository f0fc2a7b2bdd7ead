"""
S3 data source configuration
"""

from typing import Any, Dict, List, Optional

from api.models.connector_models import S3SourceConfig
from config.logging_config import logger
from services.connectors.common import DataSourceType, typed_configuration


def build_s3_configuration(source: S3SourceConfig) -> Dict[str, Any]:
    """Assemble a dataSourceConfiguration for an S3 bucket."""
    s3_configuration = {"bucketArn": source.bucket_arn}

    if source.inclusion_prefixes:
        s3_configuration["inclusionPrefixes"] = list(source.inclusion_prefixes)

    if source.exclusion_prefixes:
        s3_configuration["exclusionPrefixes"] = list(source.exclusion_prefixes)

    if source.bucket_owner_account_id:
        s3_configuration["bucketOwnerAccountId"] = source.bucket_owner_account_id

    return {"type": DataSourceType.S3.value, "s3Configuration": s3_configuration}


def create_s3_configuration(
    bucket_name: str,
    inclusion_prefixes: Optional[List[str]] = None,
    exclusion_prefixes: Optional[List[str]] = None,
    bucket_owner_account_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create an S3 data source configuration.

    Args:
        bucket_name: Source bucket; the configuration carries its ARN
        inclusion_prefixes: Key prefixes to ingest, empty entries are skipped
        exclusion_prefixes: Key prefixes to skip, empty entries are skipped.
            Kept on the configuration only; see s3_request_configuration
        bucket_owner_account_id: Owner account for cross-account buckets

    Returns:
        dict: dataSourceConfiguration of type S3
    """
    if not bucket_name:
        raise ValueError("bucket_name is required")

    return build_s3_configuration(
        S3SourceConfig(
            bucket_name=bucket_name,
            bucket_owner_account_id=bucket_owner_account_id,
            inclusion_prefixes=inclusion_prefixes,
            exclusion_prefixes=exclusion_prefixes,
        )
    )


def validate_s3_configuration(data_source_configuration: Optional[Dict[str, Any]]) -> bool:
    s3_configuration = typed_configuration(
        data_source_configuration, DataSourceType.S3, "s3Configuration"
    )
    return bool(s3_configuration and s3_configuration.get("bucketArn"))


def s3_request_configuration(data_source_configuration: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy of an S3 configuration limited to what bedrock-agent accepts.

    The service's S3 data source has no exclusion prefixes, so they are kept
    on the built configuration and left out of create and update requests.
    """
    s3_configuration = data_source_configuration.get("s3Configuration") or {}
    if "exclusionPrefixes" not in s3_configuration:
        return data_source_configuration

    logger.debug(
        f"Exclusion prefixes {s3_configuration['exclusionPrefixes']} are not sent; "
        "bedrock-agent S3 data sources only support inclusion prefixes"
    )
    trimmed = {key: value for key, value in s3_configuration.items() if key != "exclusionPrefixes"}
    return {**data_source_configuration, "s3Configuration": trimmed}
