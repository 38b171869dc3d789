"""Context records handed to the template renderer.

Every record holds names that are already mangled and types that are already
resolved, so templates can bind against the attributes without further lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, field

CLOSE_METHOD_NAME = "close"
VOID_JAVA_TYPE = "void"


@dataclass(frozen=True)
class MethodContext:
    """A service method.

    Attributes:
        name: The Thrift name; None only for the synthetic `close` method.
        oneway: Whether the method is fire-and-forget.
        java_name: The Java method name (camel case).
        java_type: The Java return type.
    """

    name: str | None
    oneway: bool
    java_name: str
    java_type: str


def close_method_context() -> MethodContext:
    """Create the context of the `void close()` method added for closeable services.

    Returns:
        MethodContext: A new context on each call.
    """
    return MethodContext(None, False, CLOSE_METHOD_NAME, VOID_JAVA_TYPE)


@dataclass(frozen=True)
class ServiceContext:
    """A service interface.

    The parent set is fixed at construction. The method list is filled by the
    generation driver after the context was built.
    """

    name: str
    java_package: str
    java_name: str
    java_parents: frozenset[str] = frozenset()
    methods: list[MethodContext] = field(default_factory=list)

    def add_method(self, method: MethodContext) -> None:
        self.methods.append(method)


@dataclass(frozen=True)
class StructContext:
    name: str
    java_package: str
    java_name: str


@dataclass(frozen=True)
class FieldContext:
    """A struct field or method argument.

    Attributes:
        name: The Thrift name.
        id: The field id, narrowed to the 16 bit range of Thrift field ids.
        java_type: The Java type.
        java_name: The Java field name (camel case).
        java_getter_name: E.g. `getUserId`, or `isActive` for primitive booleans.
        java_setter_name: E.g. `setUserId`.
    """

    name: str
    id: int
    java_type: str
    java_name: str
    java_getter_name: str
    java_setter_name: str


@dataclass(frozen=True)
class ExceptionContext:
    """An entry of a method's `throws` clause; only its type and id matter."""

    type: str
    id: int


@dataclass(frozen=True)
class EnumContext:
    java_package: str
    java_name: str


@dataclass(frozen=True)
class EnumFieldContext:
    """An enum constant. String enum constants carry no value."""

    java_name: str
    value: int | None
