"""
Simple Record Core Package

The Record abstraction and its errors. Subclass Record to declare a
variant, register computed fields with @derived, and use copy() to get a
changed version.
"""

from .errors import FieldNotFound, ImmutableViolation, RecordError
from .models import Record, RecordOptions, derived

__all__ = [
    "Record",
    "RecordOptions",
    "derived",
    "RecordError",
    "FieldNotFound",
    "ImmutableViolation",
]
