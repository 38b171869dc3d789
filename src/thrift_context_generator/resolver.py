"""Interfaces of the type resolution collaborators used by the context generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from thrift_context_generator.model import ThriftType

BOOLEAN_PRIMITIVE = "boolean"
"""The Java type token of the primitive boolean; getters of such fields start with `is`."""


@dataclass(frozen=True)
class JavaType:
    """Location of a generated Java type."""

    package: str
    simple_name: str

    @property
    def class_name(self) -> str:
        """The fully qualified class name, e.g. `com.example.UserService`."""
        if not self.package:
            return self.simple_name
        return f"{self.package}.{self.simple_name}"


class TypeRegistry(Protocol):
    """Lookup of the Java types known to a generation run."""

    def find_type(self, namespace: str, name: str) -> JavaType | None:
        """Find a type by the namespace it was declared in and its mangled type name."""
        ...

    def find_type_by_name(self, thrift_name: str) -> JavaType | None:
        """Find a type by its (possibly qualified) Thrift name, e.g. `shared.SharedService`."""
        ...


class TypeConverter(Protocol):
    """Conversion of Thrift type references into Java type names."""

    def convert_type(self, thrift_type: ThriftType) -> str:
        """Return the Java type name, e.g. `boolean`, `List<String>` or `void`."""
        ...
