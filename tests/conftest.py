"""Pytest configuration and fixtures for the template context generator tests."""

from __future__ import annotations

import pytest

from thrift_context_generator.config import GeneratorConfig, GeneratorTweak
from thrift_context_generator.generator import TemplateContextGenerator
from thrift_context_generator.model import ThriftType
from thrift_context_generator.resolver import JavaType

DEFAULT_NAMESPACE = "tutorial"
DEFAULT_PACKAGE = "com.example.tutorial"

THRIFT_TO_JAVA = {
    "void": "void",
    "bool": "boolean",
    "byte": "byte",
    "i16": "short",
    "i32": "int",
    "i64": "long",
    "double": "double",
    "string": "String",
    "binary": "byte[]",
    "list<string>": "List<String>",
}


class FakeTypeRegistry:
    """In-memory registry keyed by (namespace, type name) and by qualified Thrift name."""

    def __init__(self) -> None:
        self.types: dict[tuple[str, str], JavaType] = {}
        self.thrift_names: dict[str, JavaType] = {}
        self.lookups: list[str | None] = []

    def add(self, namespace: str, name: str, java_type: JavaType) -> None:
        self.types[(namespace, name)] = java_type
        self.thrift_names[f"{namespace}.{name}"] = java_type

    def find_type(self, namespace: str, name: str) -> JavaType | None:
        return self.types.get((namespace, name))

    def find_type_by_name(self, thrift_name: str) -> JavaType | None:
        self.lookups.append(thrift_name)
        return self.thrift_names.get(thrift_name)


class FakeTypeConverter:
    """Converts the base types; any other type name is passed through unchanged."""

    def convert_type(self, thrift_type: ThriftType) -> str:
        return THRIFT_TO_JAVA.get(thrift_type.name, thrift_type.name)


@pytest.fixture
def type_registry():
    """Registry pre-populated with the types of the tutorial schema."""
    registry = FakeTypeRegistry()
    for name in ["Calculator", "Work", "InvalidOperation", "Operation", "Color", "UserProfile"]:
        registry.add(DEFAULT_NAMESPACE, name, JavaType(DEFAULT_PACKAGE, name))
    registry.add("shared", "SharedService", JavaType("com.example.shared", "SharedService"))
    return registry


@pytest.fixture
def type_converter():
    return FakeTypeConverter()


@pytest.fixture
def generator(type_registry, type_converter):
    """Generator without any tweaks enabled."""
    return TemplateContextGenerator(GeneratorConfig(), type_registry, type_converter, DEFAULT_NAMESPACE)


@pytest.fixture
def closeable_generator(type_registry, type_converter):
    """Generator with the ADD_CLOSEABLE_INTERFACE tweak enabled."""
    config = GeneratorConfig(tweaks=frozenset({GeneratorTweak.ADD_CLOSEABLE_INTERFACE}))
    return TemplateContextGenerator(config, type_registry, type_converter, DEFAULT_NAMESPACE)
