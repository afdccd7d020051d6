"""The user's current selection, threaded by the presentation layer."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel


class Selection(BaseModel):
    """Immutable snapshot of job title, step and entered wage.

    Each ``select_*``/``enter_*`` call returns a new Selection; the core never
    keeps one between calls.
    """

    model_config = {"frozen": True}

    job_title: Optional[str] = None
    step: Optional[int] = None
    wage: Optional[Decimal] = None

    def select_job_title(self, name: str | None) -> Selection:
        # Step numbers are per job, so a new job invalidates the step
        return self.model_copy(update={"job_title": name or None, "step": None})

    def select_step(self, number: int | None) -> Selection:
        return self.model_copy(update={"step": number})

    def enter_wage(self, value: Decimal | int | str | None) -> Selection:
        """Record typed wage text.

        A cleared field is zero. Text that is not a finite number is treated
        as no wage at all, so the projection reads "N/A".
        """
        text = "" if value is None else str(value).strip()
        if value is None:
            wage = None
        elif not text:
            wage = Decimal(0)
        else:
            try:
                wage = Decimal(text)
            except InvalidOperation:
                wage = None
            if wage is not None and not wage.is_finite():
                wage = None
        return self.model_copy(update={"wage": wage})
