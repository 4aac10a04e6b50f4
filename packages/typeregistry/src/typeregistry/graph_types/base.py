# typeregistry/graph_types/base.py
"""
Base descriptor classes for schema graph types.

Descriptors are referenced as classes, never instances: the registry maps a
host type to a descriptor class and the schema builder decides what to do
with it.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")

__all__ = ["GraphType", "ObjectGraphType", "ScalarGraphType"]

_SUFFIX = "GraphType"


@lru_cache(maxsize=None)
def _adapter_for(python_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(python_type)


class GraphType:
    """Root of every schema type descriptor."""

    name: ClassVar[str | None] = None
    description: ClassVar[str | None] = None

    @classmethod
    def graph_name(cls) -> str:
        """Schema name: explicit ``name`` or the class name without its ``GraphType`` suffix."""
        if cls.name:
            return cls.name
        base = cls.__name__
        if base.endswith(_SUFFIX) and base != _SUFFIX:
            return base[: -len(_SUFFIX)]
        return base


class ObjectGraphType(GraphType, Generic[T]):
    """Descriptor for an object type whose members are sourced from ``T``."""


class ScalarGraphType(GraphType):
    """
    Descriptor for a leaf value.

    Conversion is delegated to a pydantic ``TypeAdapter`` built for
    ``python_type`` and cached per type.
    """

    python_type: ClassVar[Any] = None

    @classmethod
    def adapter(cls) -> TypeAdapter[Any]:
        if cls.python_type is None:
            raise TypeError(f"{cls.__name__} does not declare a python_type")
        return _adapter_for(cls.python_type)

    @classmethod
    def serialize(cls, value: Any) -> Any:
        """Convert a host value into its wire (JSON-compatible) form."""
        return cls.adapter().dump_python(value, mode="json")

    @classmethod
    def parse_value(cls, value: Any) -> Any:
        """Validate and coerce an incoming wire value into the host type."""
        return cls.adapter().validate_python(value)
