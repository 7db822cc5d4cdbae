"""
Module: derived

Purpose:
    Registration of derived computations: zero-argument methods on a Record
    subclass that are exposed as if they were fields. A computation is
    called on every access and its result is never cached.

Key Functions:
    - derived: Decorator registering a method as a derived field
    - build_derived_table(cls): Collect registrations along the MRO

Dependencies:
    - inspect (std)
    - types (std)

Used By:
    - core.models.record.Record (table built in __init_subclass__)

Example:
    >>> class Person(Record):
    ...     @derived("fullName")
    ...     def full_name(self):
    ...         return f"{self.get('firstName')} {self.get('lastName')}"
"""

from __future__ import annotations

import inspect
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional


class DerivedField:
    """
    Descriptor wrapping a derived computation.

    Reading the attribute on an instance goes through ``Record.get`` so a
    stored payload key of the same name still wins. On variants with
    attribute access disabled the descriptor hands back the bound method
    instead.

    Attributes:
        func: The computation, called with the record as only argument
        field_name: Field name the computation is registered under
    """

    def __init__(self, func: Callable[[Any], Any], field_name: Optional[str] = None):
        _check_nullary(func)
        self.func = func
        self.field_name = field_name or func.__name__
        self.__doc__ = func.__doc__

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        if not instance._options.attribute_access:
            return self.func.__get__(instance, owner)
        return instance.get(self.field_name)

    def __repr__(self) -> str:
        return f"<derived field {self.field_name!r}>"


def derived(func_or_name=None, *, name: Optional[str] = None):
    """
    Register a method as a derived field.

    Usable bare or with an explicit field name:

        @derived
        def full_name(self): ...          # field "full_name"

        @derived("fullName")
        def full_name(self): ...          # field "fullName"

    Args:
        func_or_name: The method (bare form) or the field name
        name: Field name, keyword form

    Returns:
        DerivedField descriptor, or a decorator producing one

    Raises:
        TypeError: If the method takes required arguments besides self
    """
    if callable(func_or_name):
        return DerivedField(func_or_name, name)

    field_name = func_or_name if func_or_name is not None else name

    def decorator(func: Callable[[Any], Any]) -> DerivedField:
        return DerivedField(func, field_name)

    return decorator


def build_derived_table(cls: type) -> Mapping[str, Callable[[Any], Any]]:
    """
    Collect the derived computations visible on a class.

    Walks the MRO from the root so subclasses override their bases. An
    attribute redefined without ``@derived`` drops the registration it
    shadows.

    Args:
        cls: Record subclass being created

    Returns:
        Read-only mapping of field name to computation
    """
    by_attr: dict[str, DerivedField] = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            if isinstance(value, DerivedField):
                by_attr[attr] = value
            else:
                by_attr.pop(attr, None)
    return MappingProxyType({f.field_name: f.func for f in by_attr.values()})


def _check_nullary(func: Callable[..., Any]) -> None:
    """Reject computations that need arguments besides the record."""
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        # Builtins without a signature are accepted as-is.
        return
    if not params or params[0].kind not in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.VAR_POSITIONAL,
    ):
        raise TypeError(f"Derived field {func.__name__!r} must accept the record as first argument")
    required = [
        p.name for p in params[1:]
        if p.default is inspect.Parameter.empty
        and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
    if required:
        raise TypeError(f"Derived field {func.__name__!r} cannot take required arguments: {required}")
