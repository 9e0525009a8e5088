"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ..schemas import HealthResponse

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    from ..main import app_state

    pipeline = app_state.get("pipeline")
    cache_entries = len(pipeline.cache) if pipeline is not None else 0
    return HealthResponse(status="ok", cache_entries=cache_entries)
