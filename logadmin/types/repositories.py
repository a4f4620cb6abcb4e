"""Repository-related data models."""

from dataclasses import dataclass
from enum import Enum


@dataclass
class Repository:
    """
    Snapshot of a repository's state at the time it was read.

    Retention fields use ``0`` for "not configured".
    """

    id: str
    name: str
    description: str
    retention_days: float
    ingest_retention_size_gb: float
    storage_retention_size_gb: float
    space_used: int  # compressed bytes currently stored


@dataclass
class RepositoryListItem:
    """Reduced repository projection returned by list operations."""

    id: str
    name: str
    space_used: int


class DefaultGroup(Enum):
    """Built-in groups a user can be placed in on a repository."""

    MEMBER = "Member"
    ADMIN = "Admin"
    ELIMINATOR = "Eliminator"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "DefaultGroup | None":
        """Resolve a case-insensitive group name, or None if unknown."""
        lowered = text.strip().lower()
        for group in cls:
            if group.value.lower() == lowered:
                return group
        return None
