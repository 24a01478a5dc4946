"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from fukuda.engine.registry import get_registry
from fukuda.engine.sweep import SWEEPS
from fukuda.models.responses import HealthResponse, SchemeInfo, SchemesResponse, SweepInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        schemes_registered=get_registry().count,
    )


@router.get("/schemes", response_model=SchemesResponse)
async def schemes() -> SchemesResponse:
    return SchemesResponse(
        schemes=[SchemeInfo(id=s.id, description=s.description) for s in get_registry().all()],
        sweeps=[
            SweepInfo(name=s.name, parameter=s.attr, step=s.step, description=s.description)
            for s in SWEEPS.values()
        ],
    )
