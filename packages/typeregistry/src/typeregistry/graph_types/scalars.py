# typeregistry/graph_types/scalars.py
"""Built-in scalar descriptors."""
from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import AnyUrl, AwareDatetime

from .base import ScalarGraphType

__all__ = [
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


class StringGraphType(ScalarGraphType):
    python_type = str


class IntGraphType(ScalarGraphType):
    python_type = int


class DecimalGraphType(ScalarGraphType):
    python_type = Decimal


class FloatGraphType(ScalarGraphType):
    python_type = float


class BooleanGraphType(ScalarGraphType):
    python_type = bool


class GuidGraphType(ScalarGraphType):
    python_type = UUID


class DateTimeGraphType(ScalarGraphType):
    python_type = datetime


class DateTimeOffsetGraphType(ScalarGraphType):
    python_type = AwareDatetime


class TimeSpanMillisecondsGraphType(ScalarGraphType):
    """Durations travel as a whole number of milliseconds."""

    name = "Milliseconds"
    python_type = timedelta

    @classmethod
    def serialize(cls, value: timedelta) -> int:
        if not isinstance(value, timedelta):
            raise TypeError(f"Milliseconds expects a timedelta, got {type(value).__name__}")
        return int(value / timedelta(milliseconds=1))

    @classmethod
    def parse_value(cls, value: Any) -> timedelta:
        if isinstance(value, timedelta):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Milliseconds expects a number, got {type(value).__name__}")
        return timedelta(milliseconds=value)


class UriGraphType(ScalarGraphType):
    python_type = AnyUrl
