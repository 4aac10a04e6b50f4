"""Host type to descriptor registry."""

from .base import TypeRegistry
from .builtins import BUILTIN_TYPES
from .protocols import TypeRegistryProtocol

__all__ = [
    "TypeRegistry",
    "TypeRegistryProtocol",
    "BUILTIN_TYPES",
]
