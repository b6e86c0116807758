"""Annealing orchestration service."""

from __future__ import annotations

import logging
from pathlib import Path

from ...config import settings
from ...data.instance_repository import load_instance, parse_instance
from ...models.domain import Instance
from ...persistence.filesystem import FileStorage
from ...schemas.routing import AnnealingRequest, AnnealingResponse, ScenarioResultModel
from ..outputs.routing_formatter import (
    scenario_results_to_csv,
    scenario_results_to_json,
    scenario_results_to_text,
)
from .models import ALL_SCENARIOS, AnnealingSchedule, Scenario
from .runner import run_all_scenarios


def _resolve_instance(payload: AnnealingRequest) -> Instance:
    if payload.instance_text is not None:
        return parse_instance(payload.instance_text.splitlines())
    return load_instance(Path(payload.instance_path))


def _build_schedule(payload: AnnealingRequest) -> AnnealingSchedule:
    overrides = payload.schedule
    return AnnealingSchedule(
        initial_temperature=overrides.initial_temperature
        if overrides and overrides.initial_temperature is not None
        else settings.initial_temperature,
        final_temperature=overrides.final_temperature
        if overrides and overrides.final_temperature is not None
        else settings.final_temperature,
        cooling_rate=overrides.cooling_rate
        if overrides and overrides.cooling_rate is not None
        else settings.cooling_rate,
    )


def _build_scenarios(payload: AnnealingRequest) -> tuple[Scenario, ...]:
    if not payload.scenarios:
        return ALL_SCENARIOS
    return tuple(
        Scenario(include_service=item.include_service, round_distances=item.round_distances)
        for item in payload.scenarios
    )


def solve_instance(payload: AnnealingRequest) -> AnnealingResponse:
    instance = _resolve_instance(payload)
    schedule = _build_schedule(payload)
    scenarios = _build_scenarios(payload)
    seed = payload.seed if payload.seed is not None else settings.random_seed

    logging.info(
        f"Solving '{instance.name}' ({instance.customer_count} customers) with {payload.vehicles} vehicles, "
        f"{payload.runs} run(s) per scenario"
    )
    results = run_all_scenarios(
        instance,
        payload.vehicles,
        runs=payload.runs,
        schedule=schedule,
        scenarios=scenarios,
        seed=seed,
        max_workers=settings.max_workers,
    )

    metadata = {
        "depot_index": instance.depot_index,
        "schedule": {
            "initial_temperature": schedule.initial_temperature,
            "final_temperature": schedule.final_temperature,
            "cooling_rate": schedule.cooling_rate,
        },
        "seed": seed,
    }
    if payload.run_label:
        metadata["run_label"] = payload.run_label

    if payload.persist:
        try:
            storage = FileStorage()
            run_dir = storage.make_run_directory(prefix=f"anneal_{instance.name or 'instance'}")
            storage.write_json(run_dir / "summary.json", scenario_results_to_json(results, metadata))
            storage.write_text(run_dir / "routes.csv", scenario_results_to_csv(results))
            storage.write_text(run_dir / "report.txt", scenario_results_to_text(results))
            metadata["output_dir"] = str(run_dir)
        except OSError as exc:
            # Results are still valid without the artifacts.
            logging.warning(f"Failed to persist annealing outputs: {exc}")

    return AnnealingResponse(
        instance=instance.name,
        vehicles=payload.vehicles,
        customers=instance.customer_count,
        metadata=metadata,
        results=[
            ScenarioResultModel(
                include_service=result.scenario.include_service,
                round_distances=result.scenario.round_distances,
                runs=result.runs,
                best_cost=result.best_cost,
                routes=result.routes,
                run_costs=result.run_costs,
            )
            for result in results
        ],
    )
