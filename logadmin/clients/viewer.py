"""Viewer resource client."""

from typing import TYPE_CHECKING

from logadmin.binder import Operation
from logadmin.types.viewer import Viewer

if TYPE_CHECKING:
    from logadmin.binder import OperationBinder

GET_VIEWER = Operation(
    kind="query",
    name="Viewer",
    selection="viewer { username }",
)


class ViewerClient:
    """Client for information about the token's own user."""

    def __init__(self, binder: "OperationBinder") -> None:
        self.binder = binder

    def get(self) -> Viewer:
        """Fetch the user the API token belongs to."""
        return self.binder.query(
            GET_VIEWER, {}, lambda data: Viewer(username=data["viewer"]["username"])
        )

    def username(self) -> str:
        """Fetch the username associated with the API token in use."""
        return self.get().username
