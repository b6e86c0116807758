"""Simulated annealing core for vehicle routing."""

from .annealing import anneal, metropolis_accept
from .cost import CostEvaluator, solution_cost
from .models import ALL_SCENARIOS, AnnealingSchedule, BestResult, Scenario, ScenarioResult, Solution
from .partition import build_initial_solution
from .perturbation import relocate_one
from .runner import run_all_scenarios, run_scenario

__all__ = [
    "anneal",
    "metropolis_accept",
    "CostEvaluator",
    "solution_cost",
    "ALL_SCENARIOS",
    "AnnealingSchedule",
    "BestResult",
    "Scenario",
    "ScenarioResult",
    "Solution",
    "build_initial_solution",
    "relocate_one",
    "run_all_scenarios",
    "run_scenario",
]
