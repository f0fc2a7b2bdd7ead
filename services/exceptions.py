"""
Errors raised by data source connectors and the knowledge base manager.

Every failure surfaced by this package is a ConnectorError. The subclass (and
its ``kind``) tells callers whether the input was rejected locally, the
remote resource does not exist, or the remote call itself failed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    REMOTE_CALL_FAILED = "remote_call_failed"


class ConnectorError(Exception):
    """Base error for connector operations, optionally carrying the original cause."""

    kind = ErrorKind.REMOTE_CALL_FAILED

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigurationValidationError(ConnectorError):
    kind = ErrorKind.VALIDATION_FAILED


class ResourceNotFoundError(ConnectorError):
    kind = ErrorKind.NOT_FOUND


class RemoteCallError(ConnectorError):
    kind = ErrorKind.REMOTE_CALL_FAILED
