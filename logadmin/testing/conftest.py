"""
Pytest plugin for logadmin SDK testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["logadmin.testing.conftest"]

Or import the fixtures directly:

    from logadmin.testing.fixtures import mock_transport, sample_repository
"""

# Re-export all fixtures for pytest auto-discovery
from logadmin.testing.fixtures import (
    empty_repository,
    mock_client,
    mock_client_with_repository,
    mock_transport,
    sample_repository,
    sample_repository_list_item,
)

__all__ = [
    "mock_transport",
    "mock_client",
    "mock_client_with_repository",
    "sample_repository",
    "empty_repository",
    "sample_repository_list_item",
]
