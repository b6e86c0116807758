"""Naive initial partition of customers into vehicle routes."""

from __future__ import annotations

import math

from ...models.domain import Instance
from .models import Solution


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def build_initial_solution(instance: Instance, vehicle_count: int) -> Solution:
    """Split customers in index order into near-equal consecutive routes.

    Vehicle ``i`` takes ``round(remaining / (K - i))`` of the next customers.
    The instance must have more customers than vehicles: the relocation
    operator only terminates while some route holds at least two customers.
    """
    if vehicle_count < 1:
        raise ValueError(f"vehicle_count must be >= 1, got {vehicle_count}")
    pending = instance.non_depot_customers()
    if len(pending) <= vehicle_count:
        raise ValueError(
            f"Instance has {len(pending)} customers for {vehicle_count} vehicles; "
            "at least one more customer than vehicles is required."
        )

    routes = []
    remaining = len(pending)
    cursor = 0
    for vehicle in range(vehicle_count):
        take = round_half_up(remaining / (vehicle_count - vehicle))
        remaining -= take
        routes.append(pending[cursor:cursor + take])
        cursor += take
    return Solution(routes=routes)
