"""Conversion of Thrift identifiers into Java naming conventions."""

from __future__ import annotations

from thrift_context_generator.errors import InvalidArgumentError

SEGMENT_SEPARATOR = "_"


def is_blank(value: str | None) -> bool:
    """Check whether a string is None, empty or only whitespace.

    Args:
        value (str | None): The string to check.

    Returns:
        bool: True if there is nothing but whitespace in the string.
    """
    return value is None or not value.strip()


def _mangle_java_name(src: str, capitalize: bool) -> str:
    if is_blank(src):
        raise InvalidArgumentError("input name must not be blank!")

    chars: list[str] = []
    up_case = capitalize
    for char in src:
        if char == SEGMENT_SEPARATOR:
            up_case = True
            continue

        chars.append(char.upper() if up_case else char)
        up_case = False

    return "".join(chars)


def to_type_name(src: str) -> str:
    """Turn a snake case name into upper camel case for use as a Java type name.

    E.g. `user_id` becomes `UserId`. Characters inside a segment are kept as they are.

    Args:
        src (str): The Thrift name.

    Returns:
        str: The type name.

    Raises:
        InvalidArgumentError: If `src` is blank.
    """
    return _mangle_java_name(src, True)


def to_member_name(src: str) -> str:
    """Turn a snake case name into camel case for use as a Java method or field name.

    E.g. `user_id` becomes `userId`.

    Args:
        src (str): The Thrift name.

    Returns:
        str: The member name.

    Raises:
        InvalidArgumentError: If `src` is blank.
    """
    return _mangle_java_name(src, False)


def to_constant_name(src: str) -> str:
    """Turn a camel case name into upper snake case for use as a Java constant.

    E.g. `userId` becomes `USER_ID`. A separator goes in front of an upper case
    character only when the character before it was not upper case, so runs of
    capitals stay together (`HTTPCode` becomes `HTTPCODE`).

    Unlike the other mangling functions, a blank name yields an empty string.

    Args:
        src (str): The camel or pascal case name.

    Returns:
        str: The constant name.
    """
    if is_blank(src):
        return ""

    chars: list[str] = []
    after_lower = False
    for char in src:
        if char.isupper():
            if after_lower:
                chars.append(SEGMENT_SEPARATOR)
            after_lower = False
        else:
            after_lower = True
        chars.append(char.upper())

    return "".join(chars)
