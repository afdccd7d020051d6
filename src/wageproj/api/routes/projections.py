"""Projection endpoint: one call per selection change."""

from __future__ import annotations

from fastapi import APIRouter, Request

from wageproj.models.projection import ProjectionReport
from wageproj.models.selection import Selection

router = APIRouter(tags=["projections"])


@router.post("/projections", response_model=ProjectionReport)
async def create_projection(selection: Selection, request: Request) -> ProjectionReport:
    """Project every scheduled event for the submitted selection.

    Incomplete selections are not an error; their rows come back as "N/A".
    """
    return request.app.state.calculator.report(selection)
