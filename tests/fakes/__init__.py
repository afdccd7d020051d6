"""Shared test doubles — a small in-memory reference store and schedule."""

from __future__ import annotations

from decimal import Decimal

from wageproj.engine.schedule import AdjustmentSchedule
from wageproj.models.reference import CapRow, JobTitle, Step
from wageproj.models.schedule import AdjustmentEvent
from wageproj.reference.store import ReferenceDataStore

RANGE_INCREASE = "Range Increase"
COLA = "COLA"
ANNIVERSARY = "Anniversary"


def make_schedule() -> AdjustmentSchedule:
    return AdjustmentSchedule([
        AdjustmentEvent(name=RANGE_INCREASE, factor=Decimal("1.00"), cap_column=RANGE_INCREASE,
                        group="Immediate"),
        AdjustmentEvent(name=COLA, factor=Decimal("1.09"), cap_column=COLA, group="Year 1"),
        AdjustmentEvent(name=ANNIVERSARY, factor=Decimal("1.04"), cap_column=COLA, group="Year 1"),
    ])


def make_store() -> ReferenceDataStore:
    """Deputy I (range), Jailer (steps, raised in the baseline table) and Clerk (no caps)."""
    current = [
        JobTitle(job_title="Deputy I", min=Decimal("30"), max=Decimal("45")),
        JobTitle(job_title="Jailer", steps=(
            Step(number=1, hourly=Decimal("20.00")),
            Step(number=2, hourly=Decimal("25.00")),
        )),
        JobTitle(job_title="Clerk", min=Decimal("20"), max=Decimal("25")),
    ]
    baseline = [
        JobTitle(job_title="Deputy I", min=Decimal("30"), max=Decimal("45")),
        JobTitle(job_title="Jailer", steps=(
            Step(number=1, hourly=Decimal("21.00")),
            Step(number=2, hourly=Decimal("26.00")),
        )),
        JobTitle(job_title="Clerk", min=Decimal("20"), max=Decimal("25")),
    ]
    caps = [
        CapRow(job_title="Deputy I", caps={RANGE_INCREASE: Decimal("32"), COLA: Decimal("40")}),
        CapRow(job_title="Jailer", caps={COLA: Decimal("30")}),
    ]
    return ReferenceDataStore(current=current, caps=caps, baseline=baseline)
