# typeregistry/registry/builtins.py
"""Fallback table of primitive host types resolved without registration."""

import ctypes
from datetime import datetime, timedelta
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping
from uuid import UUID

from pydantic import AnyUrl, AwareDatetime, NaiveDatetime

from ..graph_types import (
    BooleanGraphType,
    DateTimeGraphType,
    DateTimeOffsetGraphType,
    DecimalGraphType,
    FloatGraphType,
    GraphType,
    GuidGraphType,
    IntGraphType,
    StringGraphType,
    TimeSpanMillisecondsGraphType,
    UriGraphType,
)

__all__ = ["BUILTIN_TYPES", "INTEGER_TYPES", "FLOAT_TYPES"]

# ctypes aliases (c_int32 is c_int, c_int64 is c_long, ...) collapse to one key.
INTEGER_TYPES: tuple[type, ...] = (
    int,
    ctypes.c_byte,
    ctypes.c_ubyte,
    ctypes.c_short,
    ctypes.c_ushort,
    ctypes.c_int,
    ctypes.c_uint,
    ctypes.c_long,
    ctypes.c_ulong,
    ctypes.c_longlong,
    ctypes.c_ulonglong,
    ctypes.c_int8,
    ctypes.c_uint8,
    ctypes.c_int16,
    ctypes.c_uint16,
    ctypes.c_int32,
    ctypes.c_uint32,
    ctypes.c_int64,
    ctypes.c_uint64,
)

FLOAT_TYPES: tuple[type, ...] = (float, ctypes.c_float, ctypes.c_double)


def _build() -> Mapping[Any, type[GraphType]]:
    table: dict[Any, type[GraphType]] = {
        str: StringGraphType,
        Decimal: DecimalGraphType,
        bool: BooleanGraphType,
        UUID: GuidGraphType,
        datetime: DateTimeGraphType,
        NaiveDatetime: DateTimeGraphType,
        AwareDatetime: DateTimeOffsetGraphType,
        timedelta: TimeSpanMillisecondsGraphType,
        AnyUrl: UriGraphType,
    }
    table.update(dict.fromkeys(INTEGER_TYPES, IntGraphType))
    table.update(dict.fromkeys(FLOAT_TYPES, FloatGraphType))
    return MappingProxyType(table)


BUILTIN_TYPES: Mapping[Any, type[GraphType]] = _build()
