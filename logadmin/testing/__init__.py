"""logadmin SDK testing utilities.

Provides a mock transport and fixtures for testing applications that use the
logadmin SDK.
"""

from logadmin.testing.fixtures import create_mock_repository
from logadmin.testing.mock import MockCall, MockResponse, MockTransport

__all__ = [
    # Mock transport
    "MockTransport",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
]
