"""Adjustment event models."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field


class SalaryEvent(StrEnum):
    """Events of the 2024 bargaining agreement."""

    DEC_2024_RANGE_INCREASE = "December 2024 Range Increase"
    DEC_2024_9PERCENT_COLA = "December 2024 9% COLA"
    NEXT_ANNIVERSARY_2024 = "Next Anniversary 2024"
    DEC_2025_5PERCENT_COLA = "December 2025 5% COLA"
    NEXT_ANNIVERSARY_2025 = "Next Anniversary 2025"
    DEC_2026_5PERCENT_COLA = "December 2026 5% COLA"
    NEXT_ANNIVERSARY_2026 = "Next Anniversary 2026"


class AdjustmentEvent(BaseModel):
    """A scheduled multiplicative wage adjustment."""

    model_config = {"frozen": True}

    name: str
    factor: Decimal = Field(ge=0)
    cap_column: str  # cap-table column bounding the result after this event
    group: str = ""  # display table the event belongs to
