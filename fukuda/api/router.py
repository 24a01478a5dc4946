"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from fukuda.api import animate, health, tile

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(tile.router)
api_router.include_router(animate.router)
