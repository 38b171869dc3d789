"""Construction of template contexts from Thrift schema nodes."""

from __future__ import annotations

import logging

from thrift_context_generator.config import GeneratorConfig, GeneratorTweak
from thrift_context_generator.context import (
    EnumContext,
    EnumFieldContext,
    ExceptionContext,
    FieldContext,
    MethodContext,
    ServiceContext,
    StructContext,
    close_method_context,
)
from thrift_context_generator.errors import MissingRequiredAttributeError
from thrift_context_generator.mangling import to_constant_name, to_member_name, to_type_name
from thrift_context_generator.model import (
    AbstractStruct,
    IntegerEnum,
    IntegerEnumField,
    Service,
    StringEnum,
    ThriftField,
    ThriftMethod,
)
from thrift_context_generator.resolver import BOOLEAN_PRIMITIVE, JavaType, TypeConverter, TypeRegistry

logger = logging.getLogger(__name__)

CLOSEABLE_INTERFACE = "Closeable"


def _to_short(value: int) -> int:
    """Narrow an integer to the signed 16 bit range, wrapping like a cast to `short`."""
    return ((value + 0x8000) & 0xFFFF) - 0x8000


class TemplateContextGenerator:
    """Builds one template context per schema node.

    The generator keeps no state besides its collaborators, so the order of calls does
    not matter and a single instance can serve a whole generation run.
    """

    def __init__(
        self,
        generator_config: GeneratorConfig,
        type_registry: TypeRegistry,
        type_converter: TypeConverter,
        default_namespace: str,
    ) -> None:
        """Initialize the generator.

        Args:
            generator_config (GeneratorConfig): Settings of the run; tweaks are read from it.
            type_registry (TypeRegistry): Lookup of the Java types of the run.
            type_converter (TypeConverter): Conversion of Thrift type references into Java types.
            default_namespace (str): The namespace of the Thrift document being generated.
        """
        self.generator_config = generator_config
        self.type_registry = type_registry
        self.type_converter = type_converter
        self.default_namespace = default_namespace

    def service_from_thrift(self, service: Service) -> ServiceContext:
        """Build the context of a service interface.

        The parent set holds the class name of the parent service, if there is one,
        and `Closeable` if the `ADD_CLOSEABLE_INTERFACE` tweak is enabled. In the latter
        case the context starts out with the `close` method in its method list.

        Args:
            service (Service): The service node.

        Returns:
            ServiceContext: The context; the driver appends the service methods to it.
        """
        name = to_type_name(service.name)
        java_type = self._find_java_type(name)

        java_parents: set[str] = set()
        if service.parent is not None:
            parent_type = self.type_registry.find_type_by_name(service.parent)
            if parent_type is not None:
                java_parents.add(parent_type.class_name)

        add_closeable = self.generator_config.contains_tweak(GeneratorTweak.ADD_CLOSEABLE_INTERFACE)
        if add_closeable:
            logger.info(f"Adding {CLOSEABLE_INTERFACE} interface to service {name}")
            java_parents.add(CLOSEABLE_INTERFACE)

        service_context = ServiceContext(name, java_type.package, java_type.simple_name, frozenset(java_parents))
        if add_closeable:
            service_context.add_method(close_method_context())

        logger.debug(f"Built service context {service_context.java_name} with parents {sorted(java_parents)}")
        return service_context

    def struct_from_thrift(self, struct: AbstractStruct) -> StructContext:
        """Build the context of a struct, union or exception class."""
        name = to_type_name(struct.name)
        java_type = self._find_java_type(name)

        logger.debug(f"Built struct context {name} in package {java_type.package}")
        return StructContext(name, java_type.package, java_type.simple_name)

    def method_from_thrift(self, method: ThriftMethod) -> MethodContext:
        return MethodContext(
            method.name,
            method.oneway,
            to_member_name(method.name),
            self.type_converter.convert_type(method.return_type),
        )

    def field_from_thrift(self, field: ThriftField) -> FieldContext:
        """Build the context of a struct field or method argument.

        Args:
            field (ThriftField): The field node.

        Returns:
            FieldContext: The context with Java name, getter and setter.

        Raises:
            MissingRequiredAttributeError: If the field has no identifier.
        """
        identifier = self._require_identifier(field)
        java_type = self.type_converter.convert_type(field.type)
        type_name = to_type_name(field.name)
        getter_prefix = "is" if java_type == BOOLEAN_PRIMITIVE else "get"

        return FieldContext(
            field.name,
            identifier,
            java_type,
            to_member_name(field.name),
            f"{getter_prefix}{type_name}",
            f"set{type_name}",
        )

    def exception_from_thrift(self, field: ThriftField) -> ExceptionContext:
        """Build the context of a `throws` entry of a method.

        Raises:
            MissingRequiredAttributeError: If the field has no identifier.
        """
        identifier = self._require_identifier(field)
        return ExceptionContext(self.type_converter.convert_type(field.type), identifier)

    def enum_from_thrift(self, enum: IntegerEnum | StringEnum) -> EnumContext:
        java_type = self._find_java_type(to_type_name(enum.name))
        return EnumContext(java_type.package, java_type.simple_name)

    def enum_field_from_thrift(self, field: IntegerEnumField) -> EnumFieldContext:
        """Build the context of an integer enum constant.

        Raises:
            MissingRequiredAttributeError: If the field has no value.
        """
        if field.value is None:
            raise MissingRequiredAttributeError(f"field value for integer field {field.name} is null!")
        return EnumFieldContext(to_constant_name(field.name), field.value)

    def string_enum_field_from_thrift(self, value: str) -> EnumFieldContext:
        """Build the context of a string enum constant; it carries no value."""
        return EnumFieldContext(to_constant_name(value), None)

    def _find_java_type(self, name: str) -> JavaType:
        java_type = self.type_registry.find_type(self.default_namespace, name)
        if java_type is None:
            raise MissingRequiredAttributeError(f"type {self.default_namespace}.{name} is not registered!")
        return java_type

    @staticmethod
    def _require_identifier(field: ThriftField) -> int:
        if field.identifier is None:
            raise MissingRequiredAttributeError(f"field {field.name} has no identifier!")
        return _to_short(field.identifier)
