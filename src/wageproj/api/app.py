"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from wageproj.api.routes import health, jobs, projections
from wageproj.core.config import AppSettings
from wageproj.core.logging_config import configure_logging
from wageproj.engine.calculator import WageCalculator
from wageproj.engine.schedule import DEFAULT_SCHEDULE, load_schedule
from wageproj.reference import create_reference_store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load reference data and the schedule once for the process lifetime."""
    settings = AppSettings()
    configure_logging(settings.log_level)

    store = create_reference_store(settings)
    schedule = DEFAULT_SCHEDULE
    if settings.data.schedule_path is not None:
        schedule = load_schedule(settings.data.schedule_path)

    app.state.settings = settings
    app.state.store = store
    app.state.calculator = WageCalculator(store, schedule, settings)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Hourly Wage Projection",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(jobs.router)
    app.include_router(projections.router)
    return app
