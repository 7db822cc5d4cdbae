"""
Module: errors

Purpose:
    Exception types raised by Record. Both are programmer-error signals:
    they propagate straight to the caller and are never retried or
    recovered from inside the package.

Key Classes:
    - RecordError: Common base, carries the concrete record type name
    - FieldNotFound: Read of a name that is neither stored nor derived
    - ImmutableViolation: Any write or delete after construction

Dependencies:
    - (none)

Used By:
    - core.models.record.Record
"""

from __future__ import annotations


class RecordError(Exception):
    """Base class for errors raised by records."""

    def __init__(self, message: str, type_name: str = ""):
        super().__init__(message)
        self.type_name = type_name


class FieldNotFound(RecordError, AttributeError):
    """
    Raised when a field name resolves to neither a payload key nor a
    derived computation.

    Also an AttributeError so that ``hasattr()`` and three-argument
    ``getattr()`` behave normally with attribute syntax.

    Attributes:
        field: The name that failed to resolve
        type_name: Name of the concrete record type
    """

    def __init__(self, field: str, type_name: str):
        super().__init__(
            f"Error getting field {field!r}: does not exist on {type_name}",
            type_name=type_name,
        )
        self.field = field


class ImmutableViolation(RecordError, AttributeError):
    """
    Raised on any attempt to modify or remove a field after construction.

    Mirrors ``dataclasses.FrozenInstanceError`` in being an AttributeError.

    Attributes:
        operation: "modify" or "unset"
        field: The field the caller tried to change
        type_name: Name of the concrete record type
    """

    def __init__(self, operation: str, field: str, type_name: str):
        super().__init__(
            f"Cannot {operation} field {field!r} on {type_name} after instantiation",
            type_name=type_name,
        )
        self.operation = operation
        self.field = field
