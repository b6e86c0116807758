"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the annealing defaults the server is running with."""
    return {
        "depot_index": settings.depot_index,
        "initial_temperature": settings.initial_temperature,
        "final_temperature": settings.final_temperature,
        "cooling_rate": settings.cooling_rate,
        "default_runs": settings.default_runs,
        "max_workers": settings.max_workers,
    }
