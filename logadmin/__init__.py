"""logadmin - Python SDK for administering log-analytics repositories."""

from logadmin.binder import ABSENT, Operation, OperationBinder
from logadmin.client import LogAdminClient
from logadmin.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    DecodeError,
    GraphQLError,
    LogAdminError,
    NotFoundError,
    RateLimitedError,
    RequestError,
    RetentionGuardRejection,
    ServerError,
    TransportError,
    ValidationError,
)
from logadmin.guard import (
    Decision,
    RetentionDimension,
    evaluate_deletion,
    evaluate_retention_change,
)
from logadmin.logging import configure_logging, get_logger
from logadmin.transport import HTTPTransport, RetryConfig, Transport
from logadmin.types import DefaultGroup, Repository, RepositoryListItem, Viewer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "LogAdminClient",
    # Binder
    "ABSENT",
    "Operation",
    "OperationBinder",
    # Guard
    "Decision",
    "RetentionDimension",
    "evaluate_retention_change",
    "evaluate_deletion",
    # Types
    "Repository",
    "RepositoryListItem",
    "DefaultGroup",
    "Viewer",
    # Exceptions
    "LogAdminError",
    "ConfigurationError",
    "ValidationError",
    "RetentionGuardRejection",
    "NotFoundError",
    "TransportError",
    "AuthenticationError",
    "AuthorizationError",
    "RateLimitedError",
    "ServerError",
    "RequestError",
    "DecodeError",
    "GraphQLError",
    "ConflictError",
    # Transport
    "Transport",
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
