"""
HTTP Transport for logadmin SDK.

Sends GraphQL documents to the platform's single endpoint with bearer token
authentication, automatic retry of transient failures, and error handling.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from logadmin.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DecodeError,
    GraphQLError,
    LogAdminError,
    RateLimitedError,
    RequestError,
    ServerError,
    TransportError,
)
from logadmin.logging import log_graphql_request, log_graphql_response

GRAPHQL_PATH = "/graphql"


class Transport(Protocol):
    """Anything able to run one GraphQL document and return its ``data``."""

    def execute(self, document: str, variables: dict[str, Any]) -> dict[str, Any]:
        ...


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport for the GraphQL endpoint.

    Handles:
    - Bearer token authentication
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response and GraphQL ``errors`` parsing into typed exceptions
    """

    def __init__(
        self,
        address: str,
        token: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            address: Base URL of the platform (e.g., "https://logs.example.com")
            token: API token sent as a bearer credential
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.address = address.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()
        self.url = f"{self.address}{GRAPHQL_PATH}"

        self._client = httpx.Client(
            base_url=self.address,
            timeout=timeout,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {token}",
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def execute(self, document: str, variables: dict[str, Any]) -> dict[str, Any]:
        """
        Send a GraphQL document with automatic retry.

        Args:
            document: Full GraphQL query or mutation document
            variables: JSON-ready variable values

        Returns:
            The ``data`` member of the GraphQL response

        Raises:
            TransportError: On HTTP, network, or GraphQL errors
        """
        payload = {"query": document, "variables": variables}

        def make_request() -> httpx.Response:
            log_graphql_request(self.url, document, variables)
            return self._client.request("POST", GRAPHQL_PATH, json=payload)

        body, request_id = self._execute_with_retry(make_request)

        errors = body.get("errors")
        if errors:
            raise self._parse_graphql_errors(errors, request_id)

        data = body.get("data")
        if not isinstance(data, dict):
            raise DecodeError("GraphQL response has no data")
        return data

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> tuple[dict[str, Any], str | None]:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            Parsed JSON response body and the X-Request-Id header, if any

        Raises:
            TransportError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                started = time.monotonic()
                response = request_fn()
                elapsed_ms = (time.monotonic() - started) * 1000

                if response.status_code < 400:
                    body = self._decode_body(response)
                    log_graphql_response(
                        response.status_code, self.url, body.get("errors"), elapsed_ms
                    )
                    return body, response.headers.get("X-Request-Id")

                log_graphql_response(response.status_code, self.url, None, elapsed_ms)

                # Parse error response
                error = self._parse_error_response(response)

                # Check if we should retry
                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                # Calculate backoff time
                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        # Should not reach here, but just in case
        if last_error:
            if isinstance(last_error, LogAdminError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        # Exponential backoff: backoff_factor ^ attempt
        base_wait = self.retry_config.backoff_factor ** attempt

        # Apply jitter (±jitter%)
        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    @staticmethod
    def _decode_body(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e
        if not isinstance(body, dict):
            raise DecodeError("Response is not a JSON object")
        return body

    @staticmethod
    def _parse_graphql_errors(
        errors: list[Any], request_id: str | None = None
    ) -> GraphQLError:
        """Join the messages of a GraphQL ``errors`` array into one exception."""
        messages = [
            str(err.get("message", err)) if isinstance(err, dict) else str(err)
            for err in errors
        ]
        raw = [err for err in errors if isinstance(err, dict)]
        return GraphQLError("; ".join(messages), raw, request_id)

    def _parse_error_response(self, response: httpx.Response) -> TransportError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate TransportError subclass
        """
        message = response.text.strip() or f"HTTP {response.status_code}"
        request_id = response.headers.get("X-Request-Id")

        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError("RATE_LIMITED", message, retry_after, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            # GraphQL servers reject invalid operations with 4xx plus an errors array
            errors = self._graphql_errors_in(response)
            if errors:
                return self._parse_graphql_errors(errors, request_id)
            return RequestError("BAD_REQUEST", message, request_id)

    @staticmethod
    def _graphql_errors_in(response: httpx.Response) -> list[Any]:
        try:
            body = response.json()
        except ValueError:
            return []
        if not isinstance(body, dict):
            return []
        errors = body.get("errors")
        return errors if isinstance(errors, list) else []
