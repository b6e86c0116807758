"""Annealing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from ..config import settings


class ScheduleOverrides(BaseModel):
    initial_temperature: Optional[float] = Field(None, ge=0)
    final_temperature: Optional[float] = Field(None, ge=0)
    cooling_rate: Optional[float] = Field(None, gt=0)


class ScenarioModel(BaseModel):
    include_service: bool
    round_distances: bool


class AnnealingRequest(BaseModel):
    instance_path: Optional[str] = Field(default=None, description="Path to a .vrp instance readable by the server.")
    instance_text: Optional[str] = Field(default=None, description="Inline .vrp instance contents.")
    vehicles: int = Field(..., ge=1, le=settings.max_vehicles)
    runs: int = Field(default=settings.default_runs, ge=1, le=settings.max_runs)
    schedule: Optional[ScheduleOverrides] = None
    scenarios: Optional[List[ScenarioModel]] = Field(
        default=None,
        description="Service/rounding combinations to solve. Defaults to all four.",
    )
    seed: Optional[int] = Field(default=None, ge=0, description="Root seed for reproducible runs.")
    persist: bool = False
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")

    @model_validator(mode="after")
    def _require_single_source(self) -> "AnnealingRequest":
        if (self.instance_path is None) == (self.instance_text is None):
            raise ValueError("Provide exactly one of instance_path or instance_text.")
        return self

    @model_validator(mode="after")
    def _cap_iterations(self) -> "AnnealingRequest":
        overrides = self.schedule or ScheduleOverrides()
        initial = overrides.initial_temperature if overrides.initial_temperature is not None else settings.initial_temperature
        final = overrides.final_temperature if overrides.final_temperature is not None else settings.final_temperature
        cooling = overrides.cooling_rate if overrides.cooling_rate is not None else settings.cooling_rate
        iterations = (initial - final) / cooling
        if iterations > settings.max_iterations:
            raise ValueError(
                f"Schedule would run ~{iterations:.0f} iterations per anneal; "
                f"the limit is {settings.max_iterations}."
            )
        return self


class ScenarioResultModel(BaseModel):
    include_service: bool
    round_distances: bool
    runs: int
    best_cost: float
    routes: List[List[int]]
    run_costs: List[float]


class AnnealingResponse(BaseModel):
    instance: Optional[str]
    vehicles: int
    customers: int
    metadata: dict
    results: List[ScenarioResultModel]
