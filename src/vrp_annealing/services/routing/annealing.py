"""Simulated annealing engine."""

from __future__ import annotations

import math
import random
from typing import Callable, Optional

from .models import AnnealingSchedule, RunResult, Solution
from .perturbation import relocate_one


def metropolis_accept(delta: float, temperature: float, draw: float) -> bool:
    """Accept improvements outright, worse moves when ``draw < exp(-delta / T)``."""

    if delta < 0:
        return True
    return draw < math.exp(-delta / temperature)


def anneal(
    initial: Solution,
    evaluate: Callable[[Solution], float],
    *,
    schedule: AnnealingSchedule | None = None,
    rng: Optional[random.Random] = None,
) -> RunResult:
    """Cool linearly from the initial temperature and return the final state.

    ``initial`` is never mutated. The result is the solution held when the
    temperature reaches the floor, not the best one seen along the way.
    """
    schedule = schedule or AnnealingSchedule()
    rng = rng or random.Random()

    current = initial.clone()
    cost = evaluate(current)
    temperature = schedule.initial_temperature
    iterations = 0
    accepted = 0
    while temperature > schedule.final_temperature:
        candidate = relocate_one(current, rng)
        candidate_cost = evaluate(candidate)
        delta = candidate_cost - cost
        # A draw is only consumed for non-improving moves.
        if delta < 0 or metropolis_accept(delta, temperature, rng.random()):
            current = candidate
            cost = candidate_cost
            accepted += 1
        temperature -= schedule.cooling_rate
        iterations += 1

    return RunResult(cost=cost, solution=current, iterations=iterations, accepted=accepted)
