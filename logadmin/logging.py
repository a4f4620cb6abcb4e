"""
logadmin SDK logging utilities.

Provides configurable logging for GraphQL round trips and retention guard
decisions. Ensures the API token is never written to a log record.
"""

import logging
import re
from typing import Any

# Create SDK-specific loggers
_sdk_logger = logging.getLogger("logadmin")
_http_logger = logging.getLogger("logadmin.http")
_guard_logger = logging.getLogger("logadmin.guard")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"Bearer\s+[A-Za-z0-9._~+/=\-]+", re.IGNORECASE), "Bearer [REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password", "api_key"}

# Longest query document echoed in DEBUG output
_DOCUMENT_PREVIEW_LENGTH = 200


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    guard_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure logadmin SDK logging.

    Args:
        level: Default log level for all SDK loggers (default: INFO)
        http_level: Log level for GraphQL request/response logging (default: same as level)
        guard_level: Log level for retention guard decisions (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from logadmin.logging import configure_logging

        # Trace every GraphQL round trip
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _guard_logger.setLevel(guard_level if guard_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logadmin SDK logger.

    Args:
        name: Logger name suffix (e.g., "http", "guard"). If None, returns main SDK logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"logadmin.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces bearer tokens and other credential patterns with redacted
    placeholders.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, token, secret, password, api_key)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_graphql_request(
    url: str,
    document: str,
    variables: dict[str, Any] | None = None,
) -> None:
    """Log an outgoing GraphQL request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    compact = " ".join(document.split())
    if len(compact) > _DOCUMENT_PREVIEW_LENGTH:
        compact = compact[:_DOCUMENT_PREVIEW_LENGTH] + "..."

    log_parts = [f"POST {url}", f"document={compact}"]

    if variables:
        log_parts.append(f"variables={safe_log_dict(variables)}")

    _http_logger.debug(" | ".join(log_parts))


def log_graphql_response(
    status_code: int,
    url: str,
    errors: list[Any] | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log a GraphQL response at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if errors:
        log_parts.append(f"errors={len(errors)}")

    _http_logger.debug(" | ".join(log_parts))


def log_guard_decision(
    repository: str,
    action: str,
    approved: bool,
    reason: str,
) -> None:
    """
    Log a retention guard decision.

    Rejections are logged at INFO so they show up with default configuration;
    approvals at DEBUG.
    """
    verdict = "approved" if approved else "rejected"
    level = logging.DEBUG if approved else logging.INFO
    if not _guard_logger.isEnabledFor(level):
        return

    _guard_logger.log(level, f"{action} on {repository!r} {verdict}: {reason}")


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_graphql_request",
    "log_graphql_response",
    "log_guard_decision",
]
