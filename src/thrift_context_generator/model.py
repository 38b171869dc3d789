"""Schema nodes as handed over by the Thrift IDL parser.

These are read-only inputs for the context generator. They carry the names exactly
as written in the IDL; no mangling or type resolution has happened yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Requiredness(Enum):
    """Requiredness qualifier of a Thrift field."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    NONE = "none"


@dataclass(frozen=True)
class ThriftType:
    """A type reference as written in the IDL, e.g. `i32`, `list<string>` or `shared.Thing`."""

    name: str


VOID = ThriftType("void")


@dataclass(frozen=True)
class ThriftField:
    """A struct member, method argument or `throws` entry.

    Attributes:
        name: The field name in snake case.
        type: The declared type.
        identifier: The numeric field id (e.g. the `1` in `1: i32 user_id`).
        default_value: The default value literal, if any.
        required: The requiredness qualifier.
    """

    name: str
    type: ThriftType
    identifier: int | None = None
    default_value: object | None = None
    required: Requiredness = Requiredness.NONE


@dataclass(frozen=True)
class ThriftMethod:
    """A service method."""

    name: str
    return_type: ThriftType = VOID
    arguments: tuple[ThriftField, ...] = ()
    oneway: bool = False
    throws_fields: tuple[ThriftField, ...] = ()


@dataclass(frozen=True)
class Service:
    """A service definition, optionally extending a parent service."""

    name: str
    parent: str | None = None
    methods: tuple[ThriftMethod, ...] = ()


@dataclass(frozen=True)
class AbstractStruct:
    """Common base of all field containers."""

    name: str
    fields: tuple[ThriftField, ...] = ()


@dataclass(frozen=True)
class Struct(AbstractStruct):
    pass


@dataclass(frozen=True)
class Union(AbstractStruct):
    pass


@dataclass(frozen=True)
class ThriftException(AbstractStruct):
    pass


@dataclass(frozen=True)
class IntegerEnumField:
    """A member of an integer enum. The parser always assigns the value."""

    name: str
    value: int | None = None


@dataclass(frozen=True)
class IntegerEnum:
    name: str
    fields: tuple[IntegerEnumField, ...] = ()


@dataclass(frozen=True)
class StringEnum:
    """A senum; its members are bare string literals."""

    name: str
    values: tuple[str, ...] = ()
