"""logadmin SDK resource clients."""

from logadmin.clients.repositories import RepositoriesClient
from logadmin.clients.viewer import ViewerClient

__all__ = [
    "RepositoriesClient",
    "ViewerClient",
]
