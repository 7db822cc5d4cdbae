"""
Module: options

Purpose:
    Per-variant configuration for Record subclasses. Options are given as a
    class keyword and inherited by further subclasses:

        class Person(Record, options=RecordOptions(deep_export=True)):
            ...

Key Classes:
    - RecordOptions: Frozen configuration dataclass

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.record.Record
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecordOptions:
    """
    Configuration for a record variant (immutable).

    Attributes:
        attribute_access: Resolve ``record.<name>`` through ``get()``.
            When False, only the explicit API exposes fields.
        deep_export: Make ``to_dict()`` return a deep copy so nested
            containers are not shared with the record.

    Example:
        >>> RecordOptions()
        RecordOptions(attribute_access=True, deep_export=False)
    """

    attribute_access: bool = True
    deep_export: bool = False

    def __post_init__(self) -> None:
        """Validate option types on construction."""
        for name in ("attribute_access", "deep_export"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be a bool: {value!r}")


DEFAULT_OPTIONS = RecordOptions()
