"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(request: Request) -> dict[str, str]:
    store = getattr(request.app.state, "store", None)
    if store is None or not store.job_titles():
        return {"status": "not ready"}
    return {"status": "ready"}
