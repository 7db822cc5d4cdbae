"""
Module: record

Purpose:
    Provides the Record base class - an immutable wrapper around an arbitrary
    key-value payload. Payload keys read as fields, registered derived
    computations read as fields too, and every write is rejected. A changed
    version is always a new instance built with copy().

Key Functions:
    - Record.get(name): Resolve a stored or derived field
    - Record.has_field(name) / has_derived(name) / has(name): Existence checks
    - Record.is_set(name): Stored and not None
    - Record.to_dict(): Export the raw payload
    - Record.copy(overrides): New record with overrides merged on top

Dependencies:
    - copy (std)
    - logging (std)
    - types (std)
    - .derived.DerivedField, build_derived_table
    - .options.RecordOptions

Used By:
    - simple_record (public API)

Known Limitation:
    Immutability is shallow. The payload mapping is private and read-only,
    but nested containers (lists, dicts) are shared with whoever passed
    them in or received them from to_dict(). Use
    RecordOptions(deep_export=True) to stop exports from aliasing them.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from ..errors import FieldNotFound, ImmutableViolation
from .derived import DerivedField, build_derived_table
from .options import DEFAULT_OPTIONS, RecordOptions

logger = logging.getLogger(__name__)


class Record:
    """
    Immutable record base class (subclass to define a variant).

    Two kinds of data can be read from a record:
    - Raw data: the payload passed to the constructor, looked up by key.
    - Derived data: methods registered with ``@derived``, called with no
      arguments on every access.

    A raw key always wins over a derived field of the same name.

    Attributes:
        payload: Read-only view of the stored data
        type_name: Name of the concrete variant, used in error messages

    Invariants:
        - The payload never changes after construction
        - A missing key is distinct from a key stored as None

    Example:
        >>> class Person(Record):
        ...     @derived("fullName")
        ...     def full_name(self):
        ...         return self.firstName + " " + self.lastName
        >>> me = Person({"firstName": "Bob", "lastName": "Smith"})
        >>> me.get("fullName")
        'Bob Smith'
        >>> me.copy(lastName="Jones").fullName
        'Bob Jones'
    """

    __slots__ = ("_payload",)

    _derived: Mapping[str, Callable[[Any], Any]] = MappingProxyType({})
    _options: RecordOptions = DEFAULT_OPTIONS

    def __init_subclass__(cls, *, options: Optional[RecordOptions] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if options is not None:
            if not isinstance(options, RecordOptions):
                raise TypeError(f"options must be RecordOptions, got {type(options).__name__}")
            cls._options = options
        cls._derived = build_derived_table(cls)
        if cls._derived:
            logger.debug(
                "Registered derived fields on %s: %s",
                cls.__name__, ", ".join(cls._derived),
            )

    def __init__(self, payload: Optional[Mapping[str, Any]] = None, /, **fields: Any):
        """
        Create a record from a payload mapping and/or keyword fields.

        Args:
            payload: Raw data held by the record (shallow-copied)
            **fields: Extra fields, merged on top of payload

        Raises:
            TypeError: If called on Record itself rather than a subclass
        """
        if type(self) is Record:
            raise TypeError("Record cannot be instantiated directly; define a subclass")

        data = dict(payload) if payload is not None else {}
        data.update(fields)
        object.__setattr__(self, "_payload", MappingProxyType(data))

        shadowed = [key for key in data if key in self._derived]
        if shadowed:
            logger.debug("Stored fields shadow derived fields on %s: %s", self.type_name, shadowed)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def payload(self) -> Mapping[str, Any]:
        """Read-only view of the raw data."""
        return self._payload

    @property
    def type_name(self) -> str:
        """Name of the concrete record type."""
        return type(self).__name__

    # ─────────────────────────────────────────────────────────────────────────
    # Field Access
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, name: str) -> Any:
        """
        Resolve a field by name.

        Checks the raw payload first, then the registered derived fields.

        Args:
            name: Field name

        Returns:
            The stored value (possibly None) or the computed value

        Raises:
            FieldNotFound: If name is neither stored nor derived
        """
        payload = self._payload
        if name in payload:
            return payload[name]
        compute = self._derived.get(name)
        if compute is not None:
            return compute(self)
        raise FieldNotFound(name, self.type_name)

    def has_field(self, name: str) -> bool:
        """True if name is a raw payload key, even when its value is None."""
        return name in self._payload

    def has_derived(self, name: str) -> bool:
        """True if the variant registers a derived field called name."""
        return name in self._derived

    def has(self, name: str) -> bool:
        """True if name is stored or derived. Nothing is evaluated."""
        return self.has_field(name) or self.has_derived(name)

    def is_set(self, name: str) -> bool:
        """True if name is stored and its value is not None."""
        return self.has_field(name) and self._payload[name] is not None

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation (always rejected)
    # ─────────────────────────────────────────────────────────────────────────

    def set(self, name: str, value: Any) -> None:
        """Always raises ImmutableViolation. Use copy() instead."""
        raise ImmutableViolation("modify", name, self.type_name)

    def unset(self, name: str) -> None:
        """Always raises ImmutableViolation. Use copy() instead."""
        raise ImmutableViolation("unset", name, self.type_name)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        self.unset(name)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails. Names starting with "_"
        # never resolve as fields.
        if name.startswith("_") or not self._options.attribute_access:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        descriptor = getattr(type(self), name, None)
        if isinstance(descriptor, DerivedField):
            # The computation itself raised AttributeError; surface its error
            # rather than reporting the method name as a missing field.
            return self.get(descriptor.field_name)
        return self.get(name)

    # ─────────────────────────────────────────────────────────────────────────
    # Export and Copy
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Export the raw payload as a new plain dict.

        Derived fields are not included. The dict itself is a fresh copy;
        nested values are shared unless the variant sets deep_export.

        Returns:
            Dict of stored keys and values
        """
        data = dict(self._payload)
        if self._options.deep_export:
            return deepcopy(data)
        return data

    def copy(self, overrides: Optional[Mapping[str, Any]] = None, /, **changes: Any) -> Record:
        """
        Create a new record of the same type with changed data.

        Only the keys that change need to be passed. New keys are added.
        The original record is not affected. Subclasses that override
        __init__ must keep accepting a single payload mapping.

        Args:
            overrides: Mapping of keys to new values
            **changes: Same, as keywords (applied after overrides)

        Returns:
            New instance of type(self)
        """
        data = dict(self._payload)
        if overrides is not None:
            data.update(overrides)
        data.update(changes)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Copying %s with overrides for %s",
                self.type_name, [*(overrides or {}), *changes],
            )
        return type(self)(data)

    # ─────────────────────────────────────────────────────────────────────────
    # Dunder Protocols
    # ─────────────────────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return type(self) is type(other) and dict(self._payload) == dict(other._payload)

    def __hash__(self) -> int:
        # Raises TypeError for unhashable values, like a tuple holding a list.
        return hash((type(self), frozenset(self._payload.items())))

    def __reduce__(self):
        return (type(self), (dict(self._payload),))

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        fields = ", ".join(f"{key}={value!r}" for key, value in self._payload.items())
        return f"{self.type_name}({fields})"
