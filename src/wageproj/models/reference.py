"""Reference-data models: job titles, pay steps and the cap table."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Step(BaseModel):
    """A discrete pay step within a job title."""

    model_config = {"frozen": True}

    number: int = Field(ge=1)
    hourly: Decimal


class JobTitle(BaseModel):
    """A job title with either a wage range or an ordered list of steps."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    job_title: str
    min: Optional[Decimal] = None
    max: Optional[Decimal] = None
    steps: tuple[Step, ...] = ()

    @model_validator(mode="after")
    def _check_shape(self) -> JobTitle:
        if self.steps:
            numbers = [s.number for s in self.steps]
            if numbers != sorted(set(numbers)):
                raise ValueError(f"steps for {self.job_title!r} must be unique and increasing")
        elif self.min is None or self.max is None:
            raise ValueError(f"{self.job_title!r} needs either min/max or steps")
        elif self.min > self.max:
            raise ValueError(f"{self.job_title!r} has min greater than max")
        return self

    @property
    def is_step_based(self) -> bool:
        return bool(self.steps)

    def step(self, number: int | None) -> Step | None:
        """Return the step with the given number, or None."""
        for s in self.steps:
            if s.number == number:
                return s
        return None

    def clamp(self, wage: Decimal) -> Decimal:
        """Bound an entered wage into this job's [min, max] range."""
        return min(max(self.min, wage), self.max)


class CapRow(BaseModel):
    """Maximum-salary caps for one job title, keyed by adjustment-event name.

    Values that are not finite numbers in the source document (e.g. "N/A",
    NaN) are dropped, which the engine treats as "no cap".
    """

    model_config = {"frozen": True}

    job_title: str
    caps: dict[str, Decimal] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, row: dict) -> CapRow:
        """Build from the flat ``{"job_title": ..., "<event>": <number>}`` shape."""
        caps: dict[str, Decimal] = {}
        for key, value in row.items():
            if key == "job_title" or isinstance(value, bool):
                continue
            if not isinstance(value, (int, float, Decimal)):
                continue
            cap = Decimal(str(value))
            if cap.is_finite():
                caps[key] = cap
        return cls(job_title=row["job_title"], caps=caps)
