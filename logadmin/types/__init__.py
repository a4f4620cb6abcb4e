"""logadmin SDK type definitions.

This module exports all data model types used by the SDK.
"""

from logadmin.types.repositories import DefaultGroup, Repository, RepositoryListItem
from logadmin.types.viewer import Viewer

__all__ = [
    # Repository types
    "Repository",
    "RepositoryListItem",
    "DefaultGroup",
    # Viewer types
    "Viewer",
]
