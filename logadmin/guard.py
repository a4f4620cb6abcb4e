"""
Retention policy guard.

Decides whether a retention change or a repository deletion may proceed,
given a fresh snapshot of the repository. The platform itself does not stop a
tightened retention window or a delete from discarding stored data, so the
check happens here before the mutation is sent.

The guard is stateless. Each decision compares only the values passed in;
nothing is remembered between calls.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from logadmin.binder import ABSENT
from logadmin.exceptions import RetentionGuardRejection, ValidationError
from logadmin.logging import log_guard_decision
from logadmin.types.repositories import Repository


class RetentionDimension(Enum):
    """A retention ceiling: (GraphQL argument, snapshot attribute)."""

    TIME = ("timeBasedRetention", "retention_days")
    STORAGE = ("storageSizeBasedRetention", "storage_retention_size_gb")
    INGEST = ("ingestSizeBasedRetention", "ingest_retention_size_gb")

    def __init__(self, argument: str, attribute: str) -> None:
        self.argument = argument
        self.attribute = attribute

    def current(self, repository: Repository) -> float:
        """Current setting for this dimension, 0 meaning unset."""
        return getattr(repository, self.attribute)


@dataclass(frozen=True)
class Decision:
    """Outcome of a guard evaluation."""

    approved: bool
    value: Any  # ABSENT when clearing, else the explicit value to send
    reason: str


def evaluate_retention_change(
    current: float,
    proposed: float,
    space_used: int,
    allow_data_deletion: bool,
) -> Decision:
    """
    Decide whether a retention setting may change from ``current`` to ``proposed``.

    A non-positive ``proposed`` clears the setting and is always approved.
    A positive value narrows the window when it is below ``current`` or when
    ``current`` is 0 (no limit yet); narrowing a repository that holds data
    needs ``allow_data_deletion``.

    Raises:
        ValidationError: If ``proposed`` is NaN or infinite
    """
    if not math.isfinite(proposed):
        raise ValidationError(f"Retention value must be a finite number, got {proposed}")

    if proposed <= 0:
        return Decision(True, ABSENT, "clearing retention never deletes data")

    narrowing = proposed < current or current == 0
    if narrowing and space_used != 0 and not allow_data_deletion:
        return Decision(
            False,
            float(proposed),
            f"{proposed} narrows {current or 'unset'} on a repository holding {space_used} bytes",
        )

    if not narrowing:
        reason = f"{proposed} does not narrow {current}"
    elif space_used == 0:
        reason = "repository holds no data"
    else:
        reason = "data deletion explicitly allowed"
    return Decision(True, float(proposed), reason)


def evaluate_deletion(space_used: int, allow_data_deletion: bool) -> Decision:
    """Decide whether a repository may be deleted."""
    if allow_data_deletion:
        return Decision(True, None, "data deletion explicitly allowed")
    if space_used == 0:
        return Decision(True, None, "repository holds no data")
    return Decision(False, None, f"repository holds {space_used} bytes")


def enforce(decision: Decision, repository: str, action: str) -> Decision:
    """
    Log ``decision`` and return it if approved.

    Raises:
        RetentionGuardRejection: If the decision was a rejection
    """
    log_guard_decision(repository, action, decision.approved, decision.reason)
    if not decision.approved:
        raise RetentionGuardRejection(repository, action)
    return decision
