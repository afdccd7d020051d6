"""Job title and schedule listings for populating selection widgets."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from wageproj.models.reference import JobTitle
from wageproj.models.schedule import AdjustmentEvent

router = APIRouter(tags=["reference"])


@router.get("/jobs", response_model=list[JobTitle])
async def list_jobs(request: Request) -> list[JobTitle]:
    """Return current-table job titles in display order."""
    store = request.app.state.store
    return [store.lookup_job(title) for title in store.job_titles()]


@router.get("/jobs/{job_title}", response_model=JobTitle)
async def get_job(job_title: str, request: Request) -> JobTitle:
    job = request.app.state.store.lookup_job(job_title)
    if job is None:
        raise HTTPException(status_code=404, detail=f"Unknown job title {job_title!r}")
    return job


@router.get("/schedule", response_model=list[AdjustmentEvent])
async def get_schedule(request: Request) -> list[AdjustmentEvent]:
    return list(request.app.state.calculator.engine.schedule)
