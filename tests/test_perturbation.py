import random

import pytest

from src.vrp_annealing.exceptions import RouteInvariantError
from src.vrp_annealing.models.domain import Customer
from src.vrp_annealing.services.routing.models import Solution
from src.vrp_annealing.services.routing.perturbation import relocate_one


class ScriptedRandom:
    """Returns the queued draws in order."""

    def __init__(self, draws):
        self.draws = list(draws)

    def random(self) -> float:
        return self.draws.pop(0)


def _customers(*indices: int) -> list[Customer]:
    return [Customer(index=index, x=index, y=0, service=0) for index in indices]


def test_relocate_redraws_singleton_source_routes():
    c2, c3, c4 = _customers(2, 3, 4)
    solution = Solution(routes=[[c2], [c3, c4]])
    # source 0 (singleton, redraw), source 1, pop position 0, target 0, insert at end
    rng = ScriptedRandom([0.1, 0.9, 0.0, 0.0, 0.99])

    moved = relocate_one(solution, rng)

    assert moved.as_indices() == [[2, 3], [4]]
    assert solution.as_indices() == [[2], [3, 4]]
    assert rng.draws == []


def test_relocate_within_the_same_route():
    c2, c3, c4 = _customers(2, 3, 4)
    solution = Solution(routes=[[c2, c3, c4]])
    # source 0, pop position 0, target 0, insert at position 2 of 3
    rng = ScriptedRandom([0.5, 0.0, 0.5, 0.99])

    assert relocate_one(solution, rng).as_indices() == [[3, 4, 2]]


def test_relocate_fails_loudly_on_empty_route():
    c2, c3 = _customers(2, 3)
    solution = Solution(routes=[[], [c2, c3]])

    with pytest.raises(RouteInvariantError):
        relocate_one(solution, ScriptedRandom([0.0]))


def test_relocate_preserves_partition_over_many_steps():
    customers = _customers(*range(2, 14))
    solution = Solution(routes=[customers[:4], customers[4:8], customers[8:]])
    rng = random.Random(7)

    for _ in range(500):
        previous = solution
        solution = relocate_one(solution, rng)
        assert solution.vehicle_count == 3
        assert solution.customer_count == len(customers)
        assert all(solution.routes)
        solution.validate(customers)
        assert solution is not previous
        assert all(new is not old for new, old in zip(solution.routes, previous.routes))
