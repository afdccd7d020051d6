"""Projection engine: compounded, capped wages and their percentage changes."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from wageproj.core.config import ProjectionPolicy
from wageproj.core.protocols import IReferenceDataStore
from wageproj.core.types import NOT_AVAILABLE
from wageproj.engine.rounding import (
    format_amount,
    format_percentage,
    percentage_change,
    round_cents,
)
from wageproj.engine.schedule import AdjustmentSchedule
from wageproj.models.projection import UNAVAILABLE, ProjectionResult, ProjectionRow
from wageproj.models.schedule import AdjustmentEvent

logger = logging.getLogger(__name__)


class ProjectionEngine:
    """Pure projection over an immutable store and schedule.

    Holds no per-selection state; every call is a function of its arguments.
    """

    def __init__(
        self,
        store: IReferenceDataStore,
        schedule: AdjustmentSchedule,
        policy: ProjectionPolicy | None = None,
    ) -> None:
        self._store = store
        self._schedule = schedule
        self._policy = policy or ProjectionPolicy()

    @property
    def schedule(self) -> AdjustmentSchedule:
        return self._schedule

    def project(
        self,
        starting_wage: Decimal | None,
        target_event_name: str,
        job_title: str | None,
        step: int | None = None,
    ) -> ProjectionResult:
        """Project the wage after ``target_event_name`` and everything before it."""
        index = self._schedule.index_of(target_event_name)
        if index is None:
            logger.debug("Unknown adjustment event %r", target_event_name)
            return UNAVAILABLE
        events = self._schedule.events_up_to(index)
        return self._project_events(starting_wage, job_title, step, events)[-1].result

    def project_schedule(
        self,
        starting_wage: Decimal | None,
        job_title: str | None,
        step: int | None = None,
    ) -> list[ProjectionRow]:
        """Project every event of the schedule in one ordered pass."""
        return self._project_events(starting_wage, job_title, step, tuple(self._schedule))

    def base_wage(
        self, starting_wage: Decimal, job_title: str | None, step: int | None,
    ) -> Decimal | None:
        """Wage the first adjustment applies to, or None if the selection is incomplete.

        Range jobs clamp the entered wage into the baseline table's range.
        Step jobs take the selected step's hourly wage from the baseline table
        (or the current table, depending on policy).
        """
        job = self._store.lookup_job(job_title)
        if job is None:
            return None
        if job.is_step_based:
            table = job
            if self._policy.use_new_baseline_for_steps:
                table = self._store.lookup_baseline(job_title)
            selected = table.step(step) if table is not None else None
            return selected.hourly if selected is not None else None

        baseline = self._store.lookup_baseline(job_title)
        if baseline is None or baseline.is_step_based:
            return None
        return baseline.clamp(starting_wage)

    def _project_events(
        self,
        starting_wage: Decimal | None,
        job_title: str | None,
        step: int | None,
        events: Sequence[AdjustmentEvent],
    ) -> list[ProjectionRow]:
        unavailable = [ProjectionRow(event=e.name, group=e.group) for e in events]
        if not starting_wage:
            logger.debug("No starting wage for %r; projection unavailable", job_title)
            return unavailable
        starting_wage = Decimal(str(starting_wage))
        if not starting_wage.is_finite():
            logger.debug("Non-finite starting wage for %r; projection unavailable", job_title)
            return unavailable
        base = self.base_wage(starting_wage, job_title, step)
        if not base:
            logger.debug("No base wage for job=%r step=%r", job_title, step)
            return unavailable

        tolerance = self._policy.snap_tolerance
        cumulative_tolerance = tolerance if self._policy.snap_cumulative else None

        rows: list[ProjectionRow] = []
        multiplier = Decimal(1)
        previous: Decimal | None = None
        for position, event in enumerate(events):
            # Literal compounding: every earlier factor is re-applied to the base
            multiplier *= event.factor
            amount = base * multiplier
            cap = self._store.lookup_cap(job_title, event.cap_column)
            if cap is not None:
                amount = min(amount, cap)

            cumulative_raw = percentage_change(amount, starting_wage)
            cumulative = format_percentage(cumulative_raw, cumulative_tolerance)
            if position == 0:
                step_pct = NOT_AVAILABLE
                if self._policy.range_increase_reports_own_percentage:
                    step_pct = cumulative = format_percentage(cumulative_raw, tolerance)
            elif previous:
                step_pct = format_percentage(
                    percentage_change(amount, previous), tolerance, round_first=False,
                )
            else:
                step_pct = NOT_AVAILABLE

            # Step percentages compare against the amount as displayed
            previous = round_cents(amount)
            rows.append(ProjectionRow(
                event=event.name,
                group=event.group,
                result=ProjectionResult(
                    final_amount=format_amount(amount),
                    step_percentage=step_pct,
                    cumulative_percentage=cumulative,
                ),
            ))
        return rows
