# typeregistry/registry/protocols.py
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class TypeRegistryProtocol(Protocol):
    """Operations a schema builder needs from a type registry."""

    def add(self, host_type: Any, graph_type: type) -> None: ...

    def get(self, host_type: Any) -> type | None: ...

    def extend(self, base_type: Any, extending_type: Any) -> None: ...

    def get_extending(self, base_type: Any) -> Sequence[Any]: ...
