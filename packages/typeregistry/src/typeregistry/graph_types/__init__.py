"""Schema type descriptors."""

from .base import GraphType, ObjectGraphType, ScalarGraphType
from .scalars import (
    BooleanGraphType,
    DateTimeGraphType,
    DateTimeOffsetGraphType,
    DecimalGraphType,
    FloatGraphType,
    GuidGraphType,
    IntGraphType,
    StringGraphType,
    TimeSpanMillisecondsGraphType,
    UriGraphType,
)

__all__ = [
    "GraphType",
    "ObjectGraphType",
    "ScalarGraphType",
    "StringGraphType",
    "IntGraphType",
    "DecimalGraphType",
    "FloatGraphType",
    "BooleanGraphType",
    "GuidGraphType",
    "DateTimeGraphType",
    "DateTimeOffsetGraphType",
    "TimeSpanMillisecondsGraphType",
    "UriGraphType",
]
