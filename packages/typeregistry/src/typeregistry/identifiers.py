# typeregistry/identifiers.py
"""
Type identifier helpers (framework-agnostic).

Host types are used purely as dictionary keys. Before any lookup the
identifier is normalized so that wrapped forms share an entry with the type
they wrap:

- ``Optional[T]``, ``Union[T, None]`` and ``T | None`` become ``T``
- ``Annotated[T, ...]`` becomes ``T``

Unions of more than one non-None member are left untouched.
"""

from __future__ import annotations

import types
from typing import Annotated, Any, Union, get_args, get_origin

__all__ = [
    "is_nullable",
    "unwrap_nullable",
    "unwrap_annotated",
    "normalize",
    "type_label",
]

_NONE_TYPE = type(None)
_UNION_ORIGINS = (Union, types.UnionType)


def is_nullable(tp: Any) -> bool:
    """Return True when ``tp`` is a union that admits ``None``."""
    return get_origin(tp) in _UNION_ORIGINS and _NONE_TYPE in get_args(tp)


def unwrap_nullable(tp: Any) -> Any:
    if not is_nullable(tp):
        return tp
    members = [arg for arg in get_args(tp) if arg is not _NONE_TYPE]
    if len(members) != 1:
        return tp
    return members[0]


def unwrap_annotated(tp: Any) -> Any:
    if get_origin(tp) is Annotated:
        return get_args(tp)[0]
    return tp


def normalize(tp: Any) -> Any:
    """
    Strip nullable and ``Annotated`` wrappers until nothing changes.

    ``Optional[Annotated[int, ...]]`` and ``Annotated[Optional[int], ...]``
    both normalize to ``int``.
    """
    while True:
        unwrapped = unwrap_annotated(unwrap_nullable(tp))
        if unwrapped is tp:
            return tp
        tp = unwrapped


def type_label(tp: Any) -> str:
    """Readable label for logs and error messages."""
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)
