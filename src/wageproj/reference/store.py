"""In-memory reference data store implementing IReferenceDataStore."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from wageproj.models.reference import CapRow, JobTitle


class ReferenceDataStore:
    """Immutable current, baseline and cap tables held in dicts.

    Lookups for unknown job titles return None rather than raising.
    """

    def __init__(
        self,
        current: Iterable[JobTitle],
        caps: Iterable[CapRow],
        baseline: Iterable[JobTitle] | None = None,
    ) -> None:
        self._current: dict[str, JobTitle] = {job.job_title: job for job in current}
        self._baseline: dict[str, JobTitle] = (
            dict(self._current) if baseline is None
            else {job.job_title: job for job in baseline}
        )
        self._caps: dict[str, dict[str, Decimal]] = {row.job_title: dict(row.caps) for row in caps}

    def job_titles(self) -> list[str]:
        return list(self._current)

    def lookup_job(self, job_title: str | None) -> JobTitle | None:
        if job_title is None:
            return None
        return self._current.get(job_title)

    def lookup_baseline(self, job_title: str | None) -> JobTitle | None:
        if job_title is None:
            return None
        return self._baseline.get(job_title)

    def lookup_cap(self, job_title: str | None, event_name: str) -> Decimal | None:
        if job_title is None:
            return None
        return self._caps.get(job_title, {}).get(event_name)

    def __len__(self) -> int:
        return len(self._current)
