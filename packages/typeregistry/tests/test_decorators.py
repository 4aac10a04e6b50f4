import pytest

from typeregistry import DuplicateRegistrationError, extends, graph_type_for
from typeregistry.graph_types import ObjectGraphType


class Order: ...


def test_graph_type_for_registers_and_returns_class(registry):
    @graph_type_for(registry, Order)
    class OrderGraphType(ObjectGraphType[Order]): ...

    assert registry.get(Order) is OrderGraphType
    assert OrderGraphType.graph_name() == "Order"


def test_graph_type_for_twice_raises(registry):
    @graph_type_for(registry, Order)
    class OrderGraphType(ObjectGraphType[Order]): ...

    with pytest.raises(DuplicateRegistrationError):

        @graph_type_for(registry, Order)
        class OtherOrderGraphType(ObjectGraphType[Order]): ...


def test_extends_records_extension(registry):
    @extends(registry, Order)
    class OrderTotals: ...

    @extends(registry, Order)
    class OrderShipping: ...

    assert registry.get_extending(Order) == (OrderTotals, OrderShipping)
    assert registry.get(Order) is None
