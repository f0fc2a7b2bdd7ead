# Description: This file initializes the services package.
from services.exceptions import (
    ConfigurationValidationError,
    ConnectorError,
    ErrorKind,
    RemoteCallError,
    ResourceNotFoundError,
)
from services.knowledgebase_service import KnowledgeBaseManager
from services.data_source_service import DataSourceService

__all__ = [
    'ConnectorError',
    'ConfigurationValidationError',
    'ResourceNotFoundError',
    'RemoteCallError',
    'ErrorKind',
    'KnowledgeBaseManager',
    'DataSourceService'
]
