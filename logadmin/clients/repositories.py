"""Repositories resource client.

Reads repository snapshots and issues lifecycle mutations. Every operation
that can discard stored data reads a fresh snapshot first and runs it past
:mod:`logadmin.guard`. The read and the mutation are separate round trips;
another writer can change the repository in between.
"""

from typing import TYPE_CHECKING, Any

from logadmin.binder import Operation, ignore_result
from logadmin.exceptions import (
    ConflictError,
    GraphQLError,
    NotFoundError,
    ValidationError,
)
from logadmin.guard import (
    RetentionDimension,
    enforce,
    evaluate_deletion,
    evaluate_retention_change,
)
from logadmin.logging import get_logger
from logadmin.types.repositories import DefaultGroup, Repository, RepositoryListItem

if TYPE_CHECKING:
    from logadmin.binder import OperationBinder

logger = get_logger("repositories")

_REPOSITORY_FIELDS = (
    "id name description timeBasedRetention ingestSizeBasedRetention "
    "storageSizeBasedRetention compressedByteSize"
)

GET_REPOSITORY = Operation(
    kind="query",
    name="GetRepository",
    variables={"name": "String!"},
    selection=f"repository(name: $name) {{ {_REPOSITORY_FIELDS} }}",
)

LIST_REPOSITORIES = Operation(
    kind="query",
    name="ListRepositories",
    selection="repositories { id name compressedByteSize }",
)

CREATE_REPOSITORY = Operation(
    kind="mutation",
    name="CreateRepository",
    variables={"name": "String!"},
    selection=f"createRepository(name: $name) {{ repository {{ {_REPOSITORY_FIELDS} }} }}",
)

DELETE_REPOSITORY = Operation(
    kind="mutation",
    name="DeleteSearchDomain",
    variables={"name": "String!", "reason": "String!"},
    selection="deleteSearchDomain(name: $name, deleteMessage: $reason) { clientMutationId }",
)

UPDATE_DESCRIPTION = Operation(
    kind="mutation",
    name="UpdateDescription",
    variables={"name": "String!", "description": "String!"},
    selection=(
        "updateDescriptionForSearchDomain(name: $name, newDescription: $description) "
        "{ __typename }"
    ),
)

UPDATE_USER_GROUP = Operation(
    kind="mutation",
    name="UpdateDefaultGroupMemberships",
    variables={"name": "String!", "username": "String!", "groups": "[DefaultGroupEnum!]!"},
    selection=(
        "updateDefaultGroupMemberships("
        "input: {viewName: $name, userName: $username, groups: $groups}) "
        "{ clientMutationId }"
    ),
)


def _update_retention_operation(dimension: RetentionDimension) -> Operation:
    return Operation(
        kind="mutation",
        name=f"UpdateRetention{dimension.name.title()}",
        variables={"name": "String!", "value": "Float"},
        selection=(
            f"updateRetention(repositoryName: $name, {dimension.argument}: $value) "
            "{ __typename }"
        ),
    )


UPDATE_RETENTION = {
    dimension: _update_retention_operation(dimension) for dimension in RetentionDimension
}


def _float(value: Any) -> float:
    return float(value) if value is not None else 0.0


def _parse_repository(data: dict[str, Any]) -> Repository:
    """Parse repository data, treating null retention as unset."""
    return Repository(
        id=data["id"],
        name=data["name"],
        description=data.get("description") or "",
        retention_days=_float(data.get("timeBasedRetention")),
        ingest_retention_size_gb=_float(data.get("ingestSizeBasedRetention")),
        storage_retention_size_gb=_float(data.get("storageSizeBasedRetention")),
        space_used=int(data.get("compressedByteSize") or 0),
    )


def _parse_list_item(data: dict[str, Any]) -> RepositoryListItem:
    return RepositoryListItem(
        id=data["id"],
        name=data["name"],
        space_used=int(data.get("compressedByteSize") or 0),
    )


def _resolve_groups(groups: tuple[DefaultGroup | str, ...]) -> list[DefaultGroup]:
    resolved: list[DefaultGroup] = []
    for group in groups:
        if isinstance(group, DefaultGroup):
            resolved.append(group)
            continue
        parsed = DefaultGroup.parse(group) if isinstance(group, str) else None
        if parsed is None:
            choices = ", ".join(g.value for g in DefaultGroup)
            raise ValidationError(f"Unknown group {group!r}; expected one of {choices}")
        resolved.append(parsed)
    return resolved


class RepositoriesClient:
    """Client for repository lifecycle and retention operations."""

    def __init__(self, binder: "OperationBinder") -> None:
        """
        Initialize the repositories client.

        Args:
            binder: Binder used for every round trip
        """
        self.binder = binder

    def get(self, name: str) -> Repository:
        """
        Fetch a fresh snapshot of a repository.

        Args:
            name: Exact repository name

        Returns:
            Repository snapshot

        Raises:
            NotFoundError: If the name does not resolve. The remote message for
                a missing repository looks like any other validation failure,
                so every GraphQL-level error is reported this way.
        """
        def decode(data: dict[str, Any]) -> Repository | None:
            repository = data.get("repository")
            return _parse_repository(repository) if repository is not None else None

        try:
            repository = self.binder.query(GET_REPOSITORY, {"name": name}, decode)
        except GraphQLError as e:
            raise NotFoundError(
                f"{e.message}. Does the repository {name!r} exist?",
                repository=name,
                request_id=e.request_id,
            ) from e

        if repository is None:
            raise NotFoundError(f"Repository {name!r} not found", repository=name)
        return repository

    def list(self) -> list[RepositoryListItem]:
        """
        List all repositories visible to the token.

        Returns:
            List of RepositoryListItem objects
        """
        return self.binder.query(
            LIST_REPOSITORIES,
            {},
            lambda data: [_parse_list_item(item) for item in data.get("repositories") or []],
        )

    def create(self, name: str) -> Repository:
        """
        Create a new, empty repository.

        Args:
            name: Repository name, unique across the platform

        Returns:
            The created Repository

        Raises:
            ConflictError: If the platform refuses the name, most likely because
                it is already taken
        """
        try:
            repository = self.binder.mutate(
                CREATE_REPOSITORY,
                {"name": name},
                lambda data: _parse_repository(data["createRepository"]["repository"]),
            )
        except GraphQLError as e:
            raise ConflictError(
                f"{e.message}. Does the repository {name!r} already exist?",
                repository=name,
                request_id=e.request_id,
            ) from e

        logger.info(f"Created repository {name!r}")
        return repository

    def delete(self, name: str, reason: str, allow_data_deletion: bool = False) -> None:
        """
        Delete a repository.

        Args:
            name: Repository name
            reason: Human-readable reason recorded by the platform for auditing
            allow_data_deletion: Permit deleting a repository that holds data

        Raises:
            NotFoundError: If the repository does not exist
            RetentionGuardRejection: If the repository holds data and
                ``allow_data_deletion`` is False
        """
        existing = self.get(name)
        enforce(
            evaluate_deletion(existing.space_used, allow_data_deletion),
            name,
            "delete",
        )

        self.binder.mutate(
            DELETE_REPOSITORY,
            {"name": name, "reason": reason},
            ignore_result,
        )
        logger.info(f"Deleted repository {name!r}: {reason}")

    def update_description(self, name: str, description: str) -> None:
        """Replace a repository's description."""
        self.binder.mutate(
            UPDATE_DESCRIPTION,
            {"name": name, "description": description},
            ignore_result,
        )

    def update_retention(
        self,
        name: str,
        dimension: RetentionDimension,
        value: float,
        allow_data_deletion: bool = False,
    ) -> None:
        """
        Change one retention ceiling of a repository.

        Args:
            name: Repository name
            dimension: Which retention ceiling to change
            value: New ceiling; 0 or less clears the setting
            allow_data_deletion: Permit a narrowing change on a repository
                that holds data

        Raises:
            NotFoundError: If the repository does not exist
            RetentionGuardRejection: If the change narrows retention on a
                repository holding data without ``allow_data_deletion``
            ValidationError: If ``value`` is NaN or infinite
        """
        existing = self.get(name)
        decision = enforce(
            evaluate_retention_change(
                dimension.current(existing),
                value,
                existing.space_used,
                allow_data_deletion,
            ),
            name,
            f"update {dimension.argument}",
        )

        self.binder.mutate(
            UPDATE_RETENTION[dimension],
            {"name": name, "value": decision.value},
            ignore_result,
        )
        logger.info(f"Updated {dimension.argument} of {name!r} to {decision.value!r}")

    def update_time_based_retention(
        self, name: str, retention_in_days: float, allow_data_deletion: bool = False
    ) -> None:
        """Change how many days of data the repository keeps."""
        self.update_retention(name, RetentionDimension.TIME, retention_in_days, allow_data_deletion)

    def update_storage_based_retention(
        self, name: str, storage_in_gb: float, allow_data_deletion: bool = False
    ) -> None:
        """Change the compressed storage ceiling in GB."""
        self.update_retention(name, RetentionDimension.STORAGE, storage_in_gb, allow_data_deletion)

    def update_ingest_based_retention(
        self, name: str, ingest_in_gb: float, allow_data_deletion: bool = False
    ) -> None:
        """Change the ingest volume ceiling in GB."""
        self.update_retention(name, RetentionDimension.INGEST, ingest_in_gb, allow_data_deletion)

    def update_user_group(
        self,
        name: str,
        username: str,
        *groups: DefaultGroup | str,
    ) -> None:
        """
        Set a user's default group memberships on a repository.

        Args:
            name: Repository name
            username: User to update
            *groups: One or more DefaultGroup members or their names

        Raises:
            ValidationError: If no groups, or an unknown group name, is given
        """
        if not groups:
            raise ValidationError("at least one group must be defined")

        self.binder.mutate(
            UPDATE_USER_GROUP,
            {"name": name, "username": username, "groups": _resolve_groups(groups)},
            ignore_result,
        )
