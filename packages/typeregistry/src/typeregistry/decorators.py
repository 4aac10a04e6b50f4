# typeregistry/decorators.py
"""
Class decorators that register into an explicit registry.

Usage
-----
    @graph_type_for(registry, Order)
    class OrderGraphType(ObjectGraphType[Order]): ...

    @extends(registry, Order)
    class OrderTotals: ...

Both decorators return the class unchanged. There is no module-level default
registry; the caller owns the instance and hands it to the schema builder.
"""

from typing import Any, Callable, TypeVar

from .registry.protocols import TypeRegistryProtocol

C = TypeVar("C", bound=type)

__all__ = ["graph_type_for", "extends"]


def graph_type_for(registry: TypeRegistryProtocol, host_type: Any) -> Callable[[C], C]:
    """Register the decorated descriptor class as the graph type of ``host_type``."""

    def decorator(cls: C) -> C:
        registry.add(host_type, cls)
        return cls

    return decorator


def extends(registry: TypeRegistryProtocol, base_type: Any) -> Callable[[C], C]:
    """Record the decorated class as extending ``base_type``."""

    def decorator(cls: C) -> C:
        registry.extend(base_type, cls)
        return cls

    return decorator
