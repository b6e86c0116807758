"""Annealing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import AnnealingRequest, AnnealingResponse
from ...services.routing.service import solve_instance

router = APIRouter(prefix="/anneal", tags=["anneal"])


@router.post("/solve", response_model=AnnealingResponse, status_code=status.HTTP_200_OK)
def solve(payload: AnnealingRequest) -> AnnealingResponse:
    try:
        return solve_instance(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error solving instance: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to solve instance: {str(exc)}"
        ) from exc
