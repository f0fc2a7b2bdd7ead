import time
import uuid
from typing import Any, Dict, Optional

from api.models.connector_models import ConnectorType, DataSourceType


def typed_configuration(
    data_source_configuration: Optional[Dict[str, Any]],
    expected_type: DataSourceType,
    member: str,
) -> Optional[Dict[str, Any]]:
    """
    Return the type-specific member of a data source configuration.

    Returns None when the configuration is missing, its ``type`` tag differs
    from ``expected_type`` or the member itself is absent.
    """
    if not data_source_configuration:
        return None
    if data_source_configuration.get("type") != expected_type.value:
        return None
    return data_source_configuration.get(member) or None


def require(value, name: str):
    if value is None or value == "":
        raise ValueError(f"{name} is required")
    return value


def unique_client_token(prefix: str) -> str:
    """
    Idempotency token of the form ``<prefix>-<epoch millis>-<uuid4 hex>``.

    The uuid suffix keeps every token above the service's 33 character minimum.
    """
    return f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex}"
