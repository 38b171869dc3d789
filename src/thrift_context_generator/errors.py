"""Errors raised while building template contexts."""

from __future__ import annotations


class ContextGeneratorError(Exception):
    """Base class for all errors raised by the context generator."""

    pass


class InvalidArgumentError(ContextGeneratorError, ValueError):
    """Raised when a name handed to the mangling functions is blank."""

    pass


class MissingRequiredAttributeError(ContextGeneratorError, RuntimeError):
    """Raised when a schema node lacks an attribute the upstream parser must supply.

    E.g. a field without a numeric identifier or an integer enum field without a value.
    """

    pass
