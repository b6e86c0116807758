import pytest

from src.vrp_annealing.models.domain import Customer, Instance


def test_customers_compare_by_index_only():
    first = Customer(index=2, x=1, y=0, service=3)
    moved = Customer(index=2, x=9, y=9, service=7)
    other = Customer(index=3, x=1, y=0, service=3)

    assert first == moved
    assert hash(first) == hash(moved)
    assert first != other
    assert len({first, moved, other}) == 2


def test_customer_is_immutable():
    customer = Customer(index=2, x=1, y=0, service=3)

    with pytest.raises(AttributeError):
        customer.service = 4


@pytest.mark.parametrize("index,service", [(0, 0), (2, -1)])
def test_customer_rejects_invalid_fields(index: int, service: int):
    with pytest.raises(ValueError):
        Customer(index=index, x=0, y=0, service=service)


def test_instance_exposes_depot_and_ordered_customers():
    customers = {
        index: Customer(index=index, x=index, y=0, service=0)
        for index in (4, 1, 3, 2)
    }
    instance = Instance(customers=customers, depot_index=1)

    assert instance.depot.index == 1
    assert [c.index for c in instance.non_depot_customers()] == [2, 3, 4]
    assert instance.customer_count == 3


def test_instance_requires_depot():
    with pytest.raises(ValueError):
        Instance(customers={2: Customer(index=2, x=0, y=0, service=0)}, depot_index=1)
