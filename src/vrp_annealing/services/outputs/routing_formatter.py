"""Serializers for annealing outputs."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from ...schemas.routing import AnnealingResponse
from ..routing.models import ScenarioResult


def _report_block(include_service: bool, round_distances: bool, best_cost: float, routes: Sequence[Sequence[int]]) -> str:
    lines = [
        f"With service = {str(include_service).lower()}, "
        f"with rounding = {str(round_distances).lower()}; "
        f"best Cost = {best_cost}, with these truck routes:"
    ]
    for truck, route in enumerate(routes, start=1):
        lines.append(f"Truck {truck}:" + "".join(f" {index}" for index in route))
    return "\n".join(lines) + "\n"


def scenario_result_to_text(result: ScenarioResult) -> str:
    return _report_block(
        result.scenario.include_service,
        result.scenario.round_distances,
        result.best_cost,
        result.routes,
    )


def scenario_results_to_text(results: Sequence[ScenarioResult]) -> str:
    return "\n".join(scenario_result_to_text(result) for result in results)


def annealing_response_to_text(response: AnnealingResponse) -> str:
    return "\n".join(
        _report_block(item.include_service, item.round_distances, item.best_cost, item.routes)
        for item in response.results
    )


def scenario_results_to_json(results: Sequence[ScenarioResult], metadata: dict | None = None) -> dict:
    return {
        "metadata": metadata or {},
        "results": [
            {
                "include_service": result.scenario.include_service,
                "round_distances": result.scenario.round_distances,
                "runs": result.runs,
                "best_cost": result.best_cost,
                "run_costs": result.run_costs,
                "routes": result.routes,
            }
            for result in results
        ],
    }


def scenario_results_to_csv(results: Sequence[ScenarioResult]) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "include_service",
        "round_distances",
        "truck",
        "sequence",
        "customer_index",
        "best_cost",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for result in results:
        for truck, route in enumerate(result.routes, start=1):
            for sequence, index in enumerate(route, start=1):
                writer.writerow(
                    {
                        "include_service": result.scenario.include_service,
                        "round_distances": result.scenario.round_distances,
                        "truck": truck,
                        "sequence": sequence,
                        "customer_index": index,
                        "best_cost": result.best_cost,
                    }
                )
    return buffer.getvalue()
