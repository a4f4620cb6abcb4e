"""Viewer data model."""

from dataclasses import dataclass


@dataclass
class Viewer:
    """The user the API token belongs to."""

    username: str
