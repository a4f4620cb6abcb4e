"""
logadmin SDK main client.

Provides the primary interface for administering a log-analytics platform.
"""

import os
from typing import Any

from logadmin.binder import OperationBinder
from logadmin.clients import RepositoriesClient, ViewerClient
from logadmin.exceptions import ConfigurationError
from logadmin.transport import HTTPTransport, RetryConfig, Transport


class LogAdminClient:
    """
    Main client for the platform's administrative GraphQL API.

    Aggregates all resource clients around a single transport.

    Example:
        ```python
        from logadmin import LogAdminClient

        client = LogAdminClient(
            address="https://logs.example.com",
            token="my-api-token",
        )

        # Or create from environment variables
        client = LogAdminClient.from_env()

        client.repositories.create("web-logs")
        client.repositories.update_time_based_retention("web-logs", 30)
        ```
    """

    DEFAULT_ADDRESS = "http://localhost:8080"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        address: str = DEFAULT_ADDRESS,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            address: Base URL of the platform (default: http://localhost:8080)
            token: API token; required unless ``transport`` is given
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for transport retry behavior (optional)
            transport: Pre-built transport, e.g. a MockTransport in tests

        Raises:
            ConfigurationError: If neither a token nor a transport is given
        """
        self.address = address
        self.timeout = timeout

        if transport is None:
            if not token:
                raise ConfigurationError("An API token is required")
            transport = HTTPTransport(
                address=address,
                token=token,
                timeout=timeout,
                retry_config=retry_config,
            )

        self._transport = transport
        self.binder = OperationBinder(transport)

        # Initialize resource clients
        self.repositories = RepositoriesClient(self.binder)
        self.viewer = ViewerClient(self.binder)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "LogAdminClient":
        """
        Create a client from environment variables.

        Environment variables:
            LOGADMIN_TOKEN: API token (required)
            LOGADMIN_ADDRESS: Base URL of the platform (optional, default: http://localhost:8080)

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        token = os.environ.get("LOGADMIN_TOKEN")
        address = os.environ.get("LOGADMIN_ADDRESS", cls.DEFAULT_ADDRESS)

        if not token:
            raise ConfigurationError("LOGADMIN_TOKEN environment variable not set")

        if not address.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid LOGADMIN_ADDRESS: {address}. Must start with http:// or https://"
            )

        return cls(
            address=address,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> Transport:
        """Get the underlying transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "LogAdminClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
