"""Facade the presentation layer calls once per selection change."""

from __future__ import annotations

from decimal import Decimal

from wageproj.core.config import AppSettings
from wageproj.core.protocols import IReferenceDataStore
from wageproj.engine.projection import ProjectionEngine
from wageproj.engine.schedule import DEFAULT_SCHEDULE, AdjustmentSchedule
from wageproj.models.projection import ProjectionReport, ProjectionTable
from wageproj.models.selection import Selection


def starting_wage(selection: Selection, store: IReferenceDataStore) -> Decimal | None:
    """The unadjusted wage the selection describes.

    Range jobs use the entered wage; step jobs use the selected step's current
    hourly wage.
    """
    job = store.lookup_job(selection.job_title)
    if job is None:
        return None
    if job.is_step_based:
        selected = job.step(selection.step)
        return selected.hourly if selected is not None else None
    return selection.wage


def wage_advisory(
    selection: Selection,
    store: IReferenceDataStore,
    fallback_min: Decimal = Decimal("30"),
    fallback_max: Decimal = Decimal("80"),
) -> str:
    """Advisory text for an entered wage; empty when nothing to report.

    Out-of-range wages are not rejected, the engine clamps them.
    """
    job = store.lookup_job(selection.job_title)
    if job is not None and job.is_step_based:
        return ""
    wage = selection.wage
    if wage is None or not wage.is_finite():
        return ""
    if wage == 0:
        return "Please enter a value"

    low = job.min if job is not None else fallback_min
    high = job.max if job is not None else fallback_max
    if wage < low:
        return f"Salary must be at least ${low}. We've used the min amount known for this job title."
    if wage > high:
        return f"Salary must not exceed ${high}. We've used the max amount known for this job title."
    return ""


class WageCalculator:
    """Builds the grouped projection report for a selection."""

    def __init__(
        self,
        store: IReferenceDataStore,
        schedule: AdjustmentSchedule = DEFAULT_SCHEDULE,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._store = store
        self._engine = ProjectionEngine(store, schedule, self._settings.policy)

    @property
    def engine(self) -> ProjectionEngine:
        return self._engine

    def report(self, selection: Selection) -> ProjectionReport:
        job = self._store.lookup_job(selection.job_title)
        rows = self._engine.project_schedule(
            starting_wage(selection, self._store), selection.job_title, selection.step,
        )

        tables: list[ProjectionTable] = []
        for row in rows:
            if not tables or tables[-1].title != row.group:
                tables.append(ProjectionTable(title=row.group))
            tables[-1].rows.append(row)

        return ProjectionReport(
            job_title=job.job_title if job is not None else None,
            min_wage=job.min if job is not None else None,
            max_wage=job.max if job is not None else None,
            steps=[s.number for s in job.steps] if job is not None else [],
            advisory=wage_advisory(
                selection, self._store,
                self._settings.fallback_min_wage, self._settings.fallback_max_wage,
            ),
            tables=tables,
        )
