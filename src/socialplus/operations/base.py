"""
Declarations of the remote operations.

An Operation records everything the HTTP runtime needs to issue a call:
verb, path template, parameters with their wire types, request body model,
response type and whether a bearer authorization is mandatory. Operation
groups expose one async method per operation and delegate to the client.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from ..mapper import NUMBER, STRING, TypeDescriptor
from ..models import Model

if TYPE_CHECKING:
    from ..client import SocialPlusClient

# Marker response type for endpoints that return a raw byte stream
BINARY = "binary"

CATALOG: dict[str, "Operation"] = {}


@dataclass(frozen=True)
class Parameter:
    """A path or query parameter."""

    name: str
    location: Literal["path", "query"]
    type: TypeDescriptor = STRING
    required: bool = True


@dataclass(frozen=True)
class Operation:
    """Wire contract of a single remote operation."""

    group: str
    name: str
    method: str
    path: str
    summary: str
    parameters: tuple[Parameter, ...] = ()
    body: type[Model] | None = None
    response: Any = None
    auth: Literal["required", "optional"] = "required"
    binary_body: bool = False

    @property
    def qualified_name(self) -> str:
        return f"{self.group}.{self.name}"

    @property
    def accepts_appkey(self) -> bool:
        return self.auth == "optional"

    @property
    def binary_response(self) -> bool:
        return self.response == BINARY


def path(name: str, type: TypeDescriptor = STRING) -> Parameter:
    return Parameter(name, "path", type)


def query(name: str, type: TypeDescriptor = STRING, required: bool = False) -> Parameter:
    return Parameter(name, "query", type, required)


# Every feed operation takes the same paging parameters
PAGING = (query("cursor"), query("limit", NUMBER))


def operation(group: str, name: str, method: str, path_template: str, summary: str, **kwargs: Any) -> Operation:
    """Declare an operation and add it to the catalog."""
    op = Operation(group, name, method, path_template, summary, **kwargs)
    if op.qualified_name in CATALOG:
        raise ValueError(f"Operation declared twice: {op.qualified_name}")
    CATALOG[op.qualified_name] = op
    return op


class OperationGroup:
    """Base class for operation groups; an instance is attached to each client."""

    def __init__(self, client: "SocialPlusClient"):
        self._client = client

    async def _call(self, op: Operation, **arguments: Any) -> Any:
        return await self._client.send(op, **arguments)
