"""Tour cost evaluation for route partitions."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from ...models.domain import Customer
from .models import Solution
from .partition import round_half_up


def edge_distance(first: Customer, second: Customer, round_distances: bool = False) -> float:
    """Euclidean distance between two customers, optionally rounded half-up."""

    distance = math.sqrt((first.x - second.x) ** 2 + (first.y - second.y) ** 2)
    return float(round_half_up(distance)) if round_distances else distance


def route_cost(
    depot: Customer,
    route: Sequence[Customer],
    *,
    include_service: bool = False,
    round_distances: bool = False,
) -> float:
    # The depot service is charged on departure and again on return.
    cost = float(depot.service) if include_service else 0.0
    previous = depot
    for customer in route:
        if include_service:
            cost += customer.service
        cost += edge_distance(previous, customer, round_distances)
        previous = customer
    if include_service:
        cost += depot.service
    cost += edge_distance(previous, depot, round_distances)
    return cost


def solution_cost(
    depot: Customer,
    solution: Solution,
    *,
    include_service: bool = False,
    round_distances: bool = False,
) -> float:
    return sum(
        route_cost(depot, route, include_service=include_service, round_distances=round_distances)
        for route in solution.routes
    )


class CostEvaluator:
    """Cost function bound to one instance and one scenario.

    Edge lengths are computed once up front so the annealing loop only does
    lookups; totals are identical to :func:`solution_cost`.
    """

    def __init__(
        self,
        depot: Customer,
        customers: Sequence[Customer],
        *,
        include_service: bool = False,
        round_distances: bool = False,
    ) -> None:
        self.depot = depot
        self.include_service = include_service
        self.round_distances = round_distances
        nodes = {customer.index: customer for customer in customers}
        nodes[depot.index] = depot
        self._distances: Mapping[int, Mapping[int, float]] = {
            a.index: {b.index: edge_distance(a, b, round_distances) for b in nodes.values()}
            for a in nodes.values()
        }
        self._depot_service = float(depot.service) if include_service else 0.0

    def route(self, route: Sequence[Customer]) -> float:
        distances = self._distances
        cost = self._depot_service
        previous = self.depot.index
        for customer in route:
            if self.include_service:
                cost += customer.service
            cost += distances[previous][customer.index]
            previous = customer.index
        cost += self._depot_service
        cost += distances[previous][self.depot.index]
        return cost

    def __call__(self, solution: Solution) -> float:
        return sum(self.route(route) for route in solution.routes)
