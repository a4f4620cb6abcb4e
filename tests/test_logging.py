"""
Property-based tests for logadmin SDK logging.

Feature: logadmin-sdk
"""

import io
import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from logadmin.logging import (
    configure_logging,
    get_logger,
    log_graphql_request,
    log_graphql_response,
    log_guard_decision,
    mask_sensitive_data,
    safe_log_dict,
)

token_strategy = st.text(
    alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789._~+/-"),
    min_size=16,
    max_size=64,
)


@pytest.fixture
def captured_http() -> io.StringIO:
    """Capture DEBUG output of the logadmin.http logger."""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    logger = get_logger("http")
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    yield stream
    logger.removeHandler(handler)
    logger.setLevel(previous)


@given(token=token_strategy)
@settings(max_examples=100)
def test_property_bearer_token_is_masked(token: str) -> None:
    """
    No credentials in logs

    For any bearer token, masked text SHALL NOT contain the token.
    """
    masked = mask_sensitive_data(f"Authorization: Bearer {token}")

    assert token not in masked
    assert "Bearer [REDACTED]" in masked


@given(token=token_strategy)
@settings(max_examples=100)
def test_property_safe_log_dict_masks_token_keys(token: str) -> None:
    """Sensitive keys are redacted at any depth."""
    data = {
        "Authorization": f"Bearer {token}",
        "nested": {"api_token": token, "name": "logs"},
        "items": [{"password": token}],
    }

    safe = safe_log_dict(data)

    assert token not in str(safe)
    assert safe["nested"]["name"] == "logs"


def test_mask_key_value_patterns() -> None:
    masked = mask_sensitive_data("token='abc123' secret: \"xyz\"")

    assert "abc123" not in masked
    assert "xyz" not in masked


def test_get_logger_names() -> None:
    assert get_logger().name == "logadmin"
    assert get_logger("http").name == "logadmin.http"
    assert get_logger("guard").name == "logadmin.guard"


def test_configure_logging_levels() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)

    configure_logging(
        level=logging.WARNING,
        http_level=logging.DEBUG,
        guard_level=logging.INFO,
        handler=handler,
        format_string="%(name)s:%(message)s",
    )
    try:
        assert get_logger().level == logging.WARNING
        assert get_logger("http").level == logging.DEBUG
        assert get_logger("guard").level == logging.INFO

        get_logger().warning("hello")
        assert "logadmin:hello" in stream.getvalue()
    finally:
        get_logger().removeHandler(handler)
        for name in (None, "http", "guard"):
            get_logger(name).setLevel(logging.NOTSET)


def test_graphql_request_logging_redacts_variables(captured_http: io.StringIO) -> None:
    log_graphql_request(
        "https://logs.example.com/graphql",
        "query GetRepository($name: String!) {\n  repository(name: $name) { id }\n}",
        {"name": "logs", "token": "do-not-log"},
    )

    output = captured_http.getvalue()
    assert "POST https://logs.example.com/graphql" in output
    assert "query GetRepository($name: String!) { repository(name: $name) { id } }" in output
    assert "do-not-log" not in output


def test_graphql_response_logging(captured_http: io.StringIO) -> None:
    log_graphql_response(200, "https://logs.example.com/graphql", [{"message": "x"}], 12.5)

    output = captured_http.getvalue()
    assert "Response 200" in output
    assert "elapsed=12.50ms" in output
    assert "errors=1" in output


def test_guard_rejection_logged_at_info(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="logadmin.guard"):
        log_guard_decision("logs", "delete", False, "repository holds 500 bytes")
        log_guard_decision("empty", "delete", True, "repository holds no data")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["delete on 'logs' rejected: repository holds 500 bytes"]
