"""logadmin SDK exception classes."""


class LogAdminError(Exception):
    """Base exception for all logadmin SDK errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(LogAdminError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(LogAdminError):
    """Raised when a local precondition fails before any remote call."""

    def __init__(self, message: str) -> None:
        super().__init__("VALIDATION_ERROR", message)


class RetentionGuardRejection(LogAdminError):
    """
    Raised when a change would risk deleting data without explicit consent.

    Always raised before the mutation leaves the client. Callers can retry
    with ``allow_data_deletion=True`` or choose a non-narrowing value.
    """

    def __init__(self, repository: str, action: str) -> None:
        super().__init__(
            "DATA_DELETION_NOT_ALLOWED",
            "repository contains data and data deletion not allowed",
        )
        self.repository = repository
        self.action = action


class NotFoundError(LogAdminError, LookupError):
    """Raised when a named repository cannot be resolved."""

    def __init__(
        self,
        message: str,
        repository: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__("NOT_FOUND", message, request_id)
        self.repository = repository


class TransportError(LogAdminError):
    """Base class for failures of a remote round trip."""

    pass


class AuthenticationError(TransportError):
    """Raised when the API token is missing or rejected."""

    pass


class AuthorizationError(TransportError):
    """Raised when the token lacks permission for the operation."""

    pass


class RateLimitedError(TransportError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ServerError(TransportError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class RequestError(TransportError):
    """Raised on other 4xx responses."""

    pass


class DecodeError(TransportError):
    """Raised when a response cannot be decoded into the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__("MALFORMED_RESPONSE", message)


class GraphQLError(TransportError):
    """Raised when the endpoint answers with a GraphQL ``errors`` array."""

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__("GRAPHQL_ERROR", message, request_id)
        self.errors = errors or []


class ConflictError(TransportError):
    """Raised when a repository cannot be created, most likely because the name is taken."""

    def __init__(
        self,
        message: str,
        repository: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__("CONFLICT", message, request_id)
        self.repository = repository
