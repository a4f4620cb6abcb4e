"""
Pytest fixtures for logadmin SDK testing.

Provides common fixtures for testing applications that use the logadmin SDK.
"""

from typing import Any, Generator

import pytest

from logadmin.client import LogAdminClient
from logadmin.testing.mock import MockTransport
from logadmin.types.repositories import Repository, RepositoryListItem


# ============================================================================
# Mock Transport Fixtures
# ============================================================================


@pytest.fixture
def mock_transport() -> Generator[MockTransport, None, None]:
    """
    Provide an empty MockTransport.

    Example:
        ```python
        def test_my_feature(mock_transport):
            mock_transport.add_repository(create_mock_repository(name="logs"))
            my_function(LogAdminClient(transport=mock_transport))
            assert mock_transport.was_called("GetRepository")
        ```
    """
    transport = MockTransport(username="test-user")
    yield transport
    transport.reset()


@pytest.fixture
def mock_client(mock_transport: MockTransport) -> LogAdminClient:
    """Provide a LogAdminClient wired to ``mock_transport``."""
    return LogAdminClient(transport=mock_transport)


@pytest.fixture
def mock_client_with_repository(
    mock_transport: MockTransport, sample_repository: Repository
) -> LogAdminClient:
    """Provide a LogAdminClient whose transport knows ``sample_repository``."""
    mock_transport.add_repository(sample_repository)
    return LogAdminClient(transport=mock_transport)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository holding data with 30 days of retention."""
    return Repository(
        id="sample-repo-id",
        name="sample-repo",
        description="A sample repository for testing",
        retention_days=30.0,
        ingest_retention_size_gb=0.0,
        storage_retention_size_gb=0.0,
        space_used=500,
    )


@pytest.fixture
def empty_repository() -> Repository:
    """Provide a sample Repository with no stored data and no retention."""
    return create_mock_repository(repo_id="empty-repo-id", name="empty-repo")


@pytest.fixture
def sample_repository_list_item() -> RepositoryListItem:
    """Provide a sample RepositoryListItem object."""
    return RepositoryListItem(
        id="sample-repo-id",
        name="sample-repo",
        space_used=500,
    )


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_repository(
    repo_id: str = "test-repo-id",
    name: str = "test-repo",
    **kwargs: Any,
) -> Repository:
    """
    Create a Repository with customizable fields.

    Unspecified retention fields are unset (0) and the repository is empty.

    Args:
        repo_id: Repository ID
        name: Repository name
        **kwargs: Additional fields to override

    Returns:
        Repository object
    """
    defaults = {
        "description": "",
        "retention_days": 0.0,
        "ingest_retention_size_gb": 0.0,
        "storage_retention_size_gb": 0.0,
        "space_used": 0,
    }
    defaults.update(kwargs)
    return Repository(id=repo_id, name=name, **defaults)
