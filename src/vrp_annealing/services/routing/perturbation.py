"""Relocate-one neighbourhood operator."""

from __future__ import annotations

import random

from ...exceptions import RouteInvariantError
from .models import Solution


def relocate_one(solution: Solution, rng: random.Random) -> Solution:
    """Return a copy of ``solution`` with one customer moved to a random position.

    The source route is redrawn while it holds a single customer, so the loop
    only ends if some route has two or more customers (more customers than
    vehicles). The destination may be the source route itself.
    """
    routes = [list(route) for route in solution.routes]
    vehicle_count = len(routes)
    while True:
        source = routes[int(vehicle_count * rng.random())]
        if not source:
            raise RouteInvariantError("Route can never be empty")
        if len(source) == 1:
            continue
        customer = source.pop(int(len(source) * rng.random()))
        target = routes[int(vehicle_count * rng.random())]
        target.insert(int((len(target) + 1) * rng.random()), customer)
        return Solution(routes=routes)
