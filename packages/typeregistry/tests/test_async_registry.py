import pytest

from typeregistry import DuplicateRegistrationError
from typeregistry.graph_types import IntGraphType, ObjectGraphType


class Order: ...


class OrderGraphType(ObjectGraphType[Order]): ...


class OrderTotals: ...


@pytest.mark.asyncio
async def test_async_wrappers_round_trip(registry):
    await registry.aadd(Order, OrderGraphType)
    await registry.aextend(Order, OrderTotals)

    assert await registry.aget(Order) is OrderGraphType
    assert await registry.aget(int) is IntGraphType
    assert await registry.aget_extending(Order) == (OrderTotals,)


@pytest.mark.asyncio
async def test_async_add_propagates_duplicate_error(registry):
    await registry.aadd(Order, OrderGraphType)

    with pytest.raises(DuplicateRegistrationError):
        await registry.aadd(Order, OrderGraphType)
