"""Best-of-N driver over independent annealing runs."""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import Optional, Sequence

import numpy as np

from ...models.domain import Instance
from .annealing import anneal
from .cost import CostEvaluator
from .models import (
    ALL_SCENARIOS,
    AnnealingSchedule,
    BestResult,
    RunResult,
    Scenario,
    ScenarioResult,
    Solution,
)
from .partition import build_initial_solution


def _seed_from(sequence: np.random.SeedSequence) -> int:
    return int(sequence.generate_state(1, dtype=np.uint64)[0])


def _single_run(initial: Solution, evaluator: CostEvaluator, schedule: AnnealingSchedule, seed: int) -> RunResult:
    return anneal(initial, evaluator, schedule=schedule, rng=random.Random(seed))


def run_scenario(
    instance: Instance,
    initial: Solution,
    scenario: Scenario,
    *,
    runs: int = 1,
    schedule: AnnealingSchedule | None = None,
    seed_sequence: Optional[np.random.SeedSequence] = None,
    max_workers: int = 1,
) -> ScenarioResult:
    """Anneal ``runs`` times from the same seed partition and keep the cheapest result.

    Run ``i`` draws from child ``i`` of ``seed_sequence``; children do not depend
    on how many siblings are spawned, so more runs never return a worse cost.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")
    schedule = schedule or AnnealingSchedule()
    seed_sequence = seed_sequence or np.random.SeedSequence()
    initial.validate(instance.non_depot_customers())

    evaluator = CostEvaluator(
        instance.depot,
        instance.non_depot_customers(),
        include_service=scenario.include_service,
        round_distances=scenario.round_distances,
    )
    seeds = [_seed_from(child) for child in seed_sequence.spawn(runs)]

    logging.info(
        f"Annealing scenario {scenario.label}: {runs} run(s), "
        f"~{schedule.expected_iterations} iterations each"
    )
    if max_workers > 1 and runs > 1:
        with ProcessPoolExecutor(max_workers=min(max_workers, runs)) as executor:
            results = list(
                executor.map(
                    _single_run,
                    [initial] * runs,
                    [evaluator] * runs,
                    [schedule] * runs,
                    seeds,
                )
            )
    else:
        results = [_single_run(initial, evaluator, schedule, seed) for seed in seeds]

    best = BestResult()
    for number, result in enumerate(results, start=1):
        logging.debug(f"Scenario {scenario.label} run {number}: cost={result.cost:.4f}, accepted={result.accepted}")
        best.offer(result.cost, result.solution)

    logging.info(f"Scenario {scenario.label} best cost {best.cost:.4f}")
    return ScenarioResult(
        scenario=scenario,
        runs=runs,
        best_cost=best.cost,
        routes=best.solution.as_indices(),
        run_costs=[result.cost for result in results],
    )


def run_all_scenarios(
    instance: Instance,
    vehicle_count: int,
    *,
    runs: int = 1,
    schedule: AnnealingSchedule | None = None,
    scenarios: Sequence[Scenario] = ALL_SCENARIOS,
    seed: Optional[int] = None,
    max_workers: int = 1,
) -> list[ScenarioResult]:
    """Run the best-of-N driver independently for each scenario."""

    initial = build_initial_solution(instance, vehicle_count)
    scenario_sequences = np.random.SeedSequence(seed).spawn(len(scenarios))
    return [
        run_scenario(
            instance,
            initial,
            scenario,
            runs=runs,
            schedule=schedule,
            seed_sequence=sequence,
            max_workers=max_workers,
        )
        for scenario, sequence in zip(scenarios, scenario_sequences)
    ]
