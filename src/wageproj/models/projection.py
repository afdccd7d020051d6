"""Projection output models. Produced on demand, never stored."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from wageproj.core.types import NOT_AVAILABLE


class ProjectionResult(BaseModel):
    """Display values for one adjustment event.

    Each field is a formatted number or the ``"N/A"`` sentinel.
    """

    model_config = {"frozen": True}

    final_amount: str = NOT_AVAILABLE
    step_percentage: str = NOT_AVAILABLE
    cumulative_percentage: str = NOT_AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.final_amount != NOT_AVAILABLE


UNAVAILABLE = ProjectionResult()


class ProjectionRow(BaseModel):
    """An event paired with its projection."""

    model_config = {"frozen": True}

    event: str
    group: str = ""
    result: ProjectionResult = UNAVAILABLE


class ProjectionTable(BaseModel):
    """Rows rendered together, e.g. one contract year."""

    title: str
    rows: list[ProjectionRow] = Field(default_factory=list)


class ProjectionReport(BaseModel):
    """Everything the presentation layer renders for one selection."""

    job_title: Optional[str] = None
    min_wage: Optional[Decimal] = None
    max_wage: Optional[Decimal] = None
    steps: list[int] = Field(default_factory=list)
    advisory: str = ""
    tables: list[ProjectionTable] = Field(default_factory=list)
