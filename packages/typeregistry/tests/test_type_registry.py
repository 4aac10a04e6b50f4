import ctypes
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Annotated, Optional, Union
from uuid import UUID

import pytest
from pydantic import AnyUrl, AwareDatetime, NaiveDatetime

from typeregistry import BUILTIN_TYPES, DuplicateRegistrationError, TypeRegistry, TypeRegistryProtocol
from typeregistry.graph_types import (
    BooleanGraphType,
    DateTimeGraphType,
    DateTimeOffsetGraphType,
    DecimalGraphType,
    FloatGraphType,
    GuidGraphType,
    IntGraphType,
    ObjectGraphType,
    StringGraphType,
    TimeSpanMillisecondsGraphType,
    UriGraphType,
)


class MyType: ...


class MyGraphType(ObjectGraphType[MyType]): ...


class OtherGraphType(ObjectGraphType[MyType]): ...


def test_add_with_types_does_not_raise(registry):
    registry.add(MyType, MyGraphType)

    assert MyType in registry


def test_add_type_already_added_raises_and_keeps_first(registry):
    registry.add(MyType, MyGraphType)

    with pytest.raises(DuplicateRegistrationError):
        registry.add(MyType, OtherGraphType)

    assert registry.get(MyType) is MyGraphType
    assert registry.count() == 1


def test_add_same_pair_twice_still_raises(registry):
    registry.add(MyType, MyGraphType)

    with pytest.raises(DuplicateRegistrationError):
        registry.add(MyType, MyGraphType)


def test_duplicate_error_is_a_value_error(registry):
    registry.add(MyType, MyGraphType)

    with pytest.raises(ValueError):
        registry.add(MyType, MyGraphType)


def test_add_nullable_form_collides_with_plain_form(registry):
    registry.add(MyType, MyGraphType)

    with pytest.raises(DuplicateRegistrationError):
        registry.add(Optional[MyType], OtherGraphType)


@pytest.mark.parametrize("descriptor", [None, MyGraphType(), "MyGraphType"])
def test_add_rejects_non_class_descriptor(registry, descriptor):
    with pytest.raises(TypeError):
        registry.add(MyType, descriptor)

    assert MyType not in registry
    registry.add(MyType, MyGraphType)
    assert registry.get(MyType) is MyGraphType


def test_add_never_overwrites_falsy_descriptor(registry):
    class FalsyMeta(type):
        def __bool__(cls):
            return False

    class FalsyGraphType(MyGraphType, metaclass=FalsyMeta): ...

    registry.add(MyType, FalsyGraphType)

    with pytest.raises(DuplicateRegistrationError):
        registry.add(MyType, OtherGraphType)

    assert registry.get(MyType) is FalsyGraphType


def test_try_add_reports_duplicates(registry):
    assert registry.try_add(MyType, MyGraphType) is True
    assert registry.try_add(MyType, OtherGraphType) is False
    assert registry.get(MyType) is MyGraphType


def test_get_with_added_type_returns_type(registry):
    registry.add(MyType, MyGraphType)

    assert registry.get(MyType) is MyGraphType


def test_get_type_is_not_added_returns_none(registry):
    assert registry.get(MyType) is None


def test_get_accepts_non_class_identifiers(registry):
    registry.add("Order", MyGraphType)

    assert registry.get("Order") is MyGraphType
    assert registry.get("Invoice") is None


def test_user_registration_takes_precedence_over_builtin(registry):
    registry.add(str, MyGraphType)

    assert registry.get(str) is MyGraphType
    assert registry.get(Optional[str]) is MyGraphType


def test_builtin_types_are_not_user_registrations(registry):
    assert str not in registry
    assert registry.count() == 0
    assert registry.keys() == ()


EXPECTED_BUILTINS = [
    (str, StringGraphType),
    (int, IntGraphType),
    (ctypes.c_byte, IntGraphType),
    (ctypes.c_ubyte, IntGraphType),
    (ctypes.c_short, IntGraphType),
    (ctypes.c_ushort, IntGraphType),
    (ctypes.c_int, IntGraphType),
    (ctypes.c_uint, IntGraphType),
    (ctypes.c_long, IntGraphType),
    (ctypes.c_ulong, IntGraphType),
    (ctypes.c_longlong, IntGraphType),
    (ctypes.c_ulonglong, IntGraphType),
    (ctypes.c_int8, IntGraphType),
    (ctypes.c_uint8, IntGraphType),
    (ctypes.c_int16, IntGraphType),
    (ctypes.c_uint16, IntGraphType),
    (ctypes.c_int32, IntGraphType),
    (ctypes.c_uint32, IntGraphType),
    (ctypes.c_int64, IntGraphType),
    (ctypes.c_uint64, IntGraphType),
    (Decimal, DecimalGraphType),
    (float, FloatGraphType),
    (ctypes.c_float, FloatGraphType),
    (ctypes.c_double, FloatGraphType),
    (bool, BooleanGraphType),
    (UUID, GuidGraphType),
    (datetime, DateTimeGraphType),
    (NaiveDatetime, DateTimeGraphType),
    (AwareDatetime, DateTimeOffsetGraphType),
    (timedelta, TimeSpanMillisecondsGraphType),
    (AnyUrl, UriGraphType),
]


def test_expected_table_covers_every_builtin():
    assert {host for host, _ in EXPECTED_BUILTINS} == set(BUILTIN_TYPES)


@pytest.mark.parametrize("host_type, graph_type", EXPECTED_BUILTINS)
def test_get_builtin_type_returns_registered_type(registry, host_type, graph_type):
    assert registry.get(host_type) is graph_type


@pytest.mark.parametrize("host_type, graph_type", EXPECTED_BUILTINS)
def test_get_optional_builtin_type_returns_same_descriptor(registry, host_type, graph_type):
    assert registry.get(Optional[host_type]) is graph_type
    assert registry.get(host_type | None) is graph_type


@pytest.mark.parametrize(
    "host_type, graph_type",
    [
        (None | bool, BooleanGraphType),
        (Union[Decimal, None], DecimalGraphType),
        (Annotated[int, "positive"], IntGraphType),
        (Optional[Annotated[UUID, "primary key"]], GuidGraphType),
    ],
)
def test_get_wrapped_type_returns_registered_type(registry, host_type, graph_type):
    assert registry.get(host_type) is graph_type


def test_get_multi_member_union_is_not_resolved(registry):
    assert registry.get(Union[int, str, None]) is None


def test_registry_satisfies_protocol():
    assert isinstance(TypeRegistry(), TypeRegistryProtocol)


def test_items_and_keys_snapshot_user_store(registry):
    registry.add(MyType, MyGraphType)

    assert registry.keys() == (MyType,)
    assert registry.items() == ((MyType, MyGraphType),)
