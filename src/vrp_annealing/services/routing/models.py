"""Routing domain models."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List

from ...exceptions import RouteInvariantError
from ...models.domain import Customer


@dataclass(slots=True)
class Solution:
    """Ordered partition of the non-depot customers into one route per vehicle."""

    routes: List[List[Customer]]

    def clone(self) -> "Solution":
        return Solution(routes=[list(route) for route in self.routes])

    @property
    def vehicle_count(self) -> int:
        return len(self.routes)

    @property
    def customer_count(self) -> int:
        return sum(len(route) for route in self.routes)

    def as_indices(self) -> list[list[int]]:
        return [[customer.index for customer in route] for route in self.routes]

    def validate(self, expected: Iterable[Customer]) -> None:
        """Raise if any route is empty or the customers are not covered exactly once."""
        if any(not route for route in self.routes):
            raise RouteInvariantError("Route can never be empty")
        seen = Counter(customer.index for route in self.routes for customer in route)
        wanted = Counter(customer.index for customer in expected)
        if seen != wanted:
            raise RouteInvariantError(
                f"Partition mismatch: missing={sorted(wanted - seen)}, extra={sorted(seen - wanted)}"
            )


@dataclass(frozen=True, slots=True)
class AnnealingSchedule:
    """Linear cooling from initial_temperature down to final_temperature."""

    initial_temperature: float = 500.0
    final_temperature: float = 0.0
    cooling_rate: float = 0.0001

    def __post_init__(self) -> None:
        if self.cooling_rate <= 0:
            raise ValueError("cooling_rate must be > 0")
        if self.final_temperature < 0:
            raise ValueError("final_temperature must be >= 0")
        if self.initial_temperature < self.final_temperature:
            raise ValueError("initial_temperature must be >= final_temperature")

    @property
    def expected_iterations(self) -> int:
        return round((self.initial_temperature - self.final_temperature) / self.cooling_rate)


@dataclass(frozen=True, slots=True)
class Scenario:
    include_service: bool
    round_distances: bool

    @property
    def label(self) -> str:
        return f"service={str(self.include_service).lower()}_rounding={str(self.round_distances).lower()}"


ALL_SCENARIOS: tuple[Scenario, ...] = (
    Scenario(include_service=False, round_distances=False),
    Scenario(include_service=False, round_distances=True),
    Scenario(include_service=True, round_distances=False),
    Scenario(include_service=True, round_distances=True),
)


@dataclass(slots=True)
class RunResult:
    cost: float
    solution: Solution
    iterations: int
    accepted: int


@dataclass(slots=True)
class BestResult:
    """Lowest-cost outcome across a set of runs; replaced only on strict improvement."""

    cost: float = math.inf
    solution: Solution | None = None

    def offer(self, cost: float, solution: Solution) -> bool:
        if cost < self.cost:
            self.cost = cost
            self.solution = solution
            return True
        return False


@dataclass(slots=True)
class ScenarioResult:
    scenario: Scenario
    runs: int
    best_cost: float
    routes: List[List[int]]
    run_costs: List[float] = field(default_factory=list)
