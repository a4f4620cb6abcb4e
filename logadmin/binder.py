"""
Typed call binder.

Turns an :class:`Operation` plus Python values into one GraphQL round trip and
decodes the returned ``data`` into a typed result.

The binder never interprets or enriches errors, never retries, and never
caches: one call, one ``transport.execute``.
"""

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, TypeVar

from logadmin.exceptions import DecodeError, ValidationError

if TYPE_CHECKING:
    from logadmin.transport import Transport

T = TypeVar("T")

OperationKind = Literal["query", "mutation"]


class _Absent:
    """Marker for an optional parameter that is deliberately not supplied."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


@dataclass(frozen=True)
class Operation:
    """A named GraphQL query or mutation with declared variables."""

    kind: OperationKind
    name: str
    selection: str
    variables: Mapping[str, str] = field(default_factory=dict)

    @property
    def document(self) -> str:
        """Render the full GraphQL document."""
        header = f"{self.kind} {self.name}"
        if self.variables:
            declared = ", ".join(f"${var}: {gql_type}" for var, gql_type in self.variables.items())
            header = f"{header}({declared})"
        return f"{header} {{ {self.selection} }}"


_SCALAR_CHECKS: dict[str, Callable[[Any], bool]] = {
    "String": lambda v: isinstance(v, str),
    "ID": lambda v: isinstance(v, str),
    "Boolean": lambda v: isinstance(v, bool),
    "Int": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "Float": lambda v: (
        isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
    ),
}


def _encode(var: str, gql_type: str, value: Any) -> Any:
    """Check ``value`` against ``gql_type`` and return its JSON-ready form."""
    non_null = gql_type.endswith("!")
    base = gql_type[:-1] if non_null else gql_type

    if value is ABSENT or value is None:
        if non_null:
            raise ValidationError(f"Variable ${var} of type {gql_type} is required")
        return None

    if base.startswith("[") and base.endswith("]"):
        if not isinstance(value, (list, tuple)):
            raise ValidationError(f"Variable ${var} expects a list for {gql_type}")
        item_type = base[1:-1]
        return [_encode(var, item_type, item) for item in value]

    check = _SCALAR_CHECKS.get(base)
    if check is not None:
        if not check(value):
            raise ValidationError(
                f"Variable ${var} expects {gql_type}, got {type(value).__name__}"
            )
        if base == "Float":
            return float(value)
        return value

    # Anything else is an enum type
    if not isinstance(value, Enum):
        raise ValidationError(
            f"Variable ${var} expects enum {gql_type}, got {type(value).__name__}"
        )
    return value.value


def build_variables(operation: Operation, values: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build the JSON variables for ``operation`` from Python values.

    Names must match the declared variables exactly. ``ABSENT`` is accepted
    only for nullable types and is sent as ``null``.

    Raises:
        ValidationError: On unknown, missing, or mistyped variables
    """
    unknown = set(values) - set(operation.variables)
    if unknown:
        raise ValidationError(
            f"{operation.name} does not declare variables: {', '.join(sorted(unknown))}"
        )

    return {
        var: _encode(var, gql_type, values.get(var, ABSENT))
        for var, gql_type in operation.variables.items()
    }


class OperationBinder:
    """Dispatches typed operations through an injected transport."""

    def __init__(self, transport: "Transport") -> None:
        self.transport = transport

    def call(
        self,
        operation: Operation,
        values: Mapping[str, Any],
        decode: Callable[[dict[str, Any]], T],
    ) -> T:
        """
        Perform exactly one round trip for ``operation`` and decode its data.

        Args:
            operation: The query or mutation to run
            values: Variable values keyed by declared variable name
            decode: Converts the response ``data`` mapping into the result

        Returns:
            Whatever ``decode`` returns

        Raises:
            ValidationError: If the variables do not match the declaration
            DecodeError: If ``decode`` cannot read the payload
            TransportError: Propagated unchanged from the transport
        """
        variables = build_variables(operation, values)
        data = self.transport.execute(operation.document, variables)
        try:
            return decode(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodeError(
                f"Unexpected {operation.name} response: {type(e).__name__}: {e}"
            ) from e

    def query(
        self,
        operation: Operation,
        values: Mapping[str, Any],
        decode: Callable[[dict[str, Any]], T],
    ) -> T:
        """Run a read operation."""
        if operation.kind != "query":
            raise ValidationError(f"{operation.name} is a {operation.kind}, not a query")
        return self.call(operation, values, decode)

    def mutate(
        self,
        operation: Operation,
        values: Mapping[str, Any],
        decode: Callable[[dict[str, Any]], T],
    ) -> T:
        """Run a write operation."""
        if operation.kind != "mutation":
            raise ValidationError(f"{operation.name} is a {operation.kind}, not a mutation")
        return self.call(operation, values, decode)


def ignore_result(data: dict[str, Any]) -> None:
    """Decoder for mutations whose payload carries nothing of interest."""
    return None
