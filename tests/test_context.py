"""Tests for the context records and the type location helper."""

from __future__ import annotations

import dataclasses

import pytest

from thrift_context_generator.context import FieldContext, MethodContext, ServiceContext, close_method_context
from thrift_context_generator.resolver import JavaType


class TestCloseMethodContext:
    """Tests for the close method factory."""

    def test_shape(self):
        context = close_method_context()

        assert context.name is None
        assert context.oneway is False
        assert context.java_name == "close"
        assert context.java_type == "void"

    def test_fresh_instance_per_call(self):
        assert close_method_context() is not close_method_context()
        assert close_method_context() == close_method_context()


class TestServiceContext:
    """Tests for ServiceContext."""

    def test_add_method(self):
        context = ServiceContext("Calculator", "com.example", "Calculator")
        ping = MethodContext("ping", False, "ping", "void")
        zip_ = MethodContext("zip", True, "zip", "void")

        context.add_method(ping)
        context.add_method(zip_)

        assert context.methods == [ping, zip_]

    def test_method_lists_are_not_shared(self):
        first = ServiceContext("A", "com.example", "A")
        second = ServiceContext("B", "com.example", "B")

        first.add_method(close_method_context())

        assert second.methods == []

    def test_attributes_are_read_only(self):
        context = ServiceContext("Calculator", "com.example", "Calculator")

        with pytest.raises(dataclasses.FrozenInstanceError):
            context.java_parents = frozenset({"Closeable"})


def test_field_context_is_read_only():
    context = FieldContext("user_id", 1, "long", "userId", "getUserId", "setUserId")

    with pytest.raises(dataclasses.FrozenInstanceError):
        context.java_name = "id"


class TestJavaType:
    """Tests for JavaType."""

    def test_class_name(self):
        assert JavaType("com.example.shared", "SharedService").class_name == "com.example.shared.SharedService"

    def test_class_name_without_package(self):
        assert JavaType("", "SharedService").class_name == "SharedService"
