"""Host type to schema descriptor registry."""

from .bootstrap import build_registry
from .decorators import extends, graph_type_for
from .exceptions import (
    DuplicateRegistrationError,
    RegistryConfigurationError,
    RegistryError,
    RegistryFrozenError,
    TypeRegistryError,
)
from .registry import BUILTIN_TYPES, TypeRegistry, TypeRegistryProtocol

__all__ = [
    "TypeRegistry",
    "TypeRegistryProtocol",
    "BUILTIN_TYPES",
    "build_registry",
    "graph_type_for",
    "extends",
    "TypeRegistryError",
    "RegistryError",
    "DuplicateRegistrationError",
    "RegistryFrozenError",
    "RegistryConfigurationError",
]
