"""Protocol interfaces for the wage projection core.

Structural typing keeps the engine independent of where reference data
comes from; tests and the API can hand in any conforming store.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wageproj.models.reference import JobTitle


# ---------------------------------------------------------------------------
# Reference Data Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IReferenceDataStore(Protocol):
    """Read-only current, baseline and cap tables keyed by job title."""

    def job_titles(self) -> list[str]: ...

    def lookup_job(self, job_title: str | None) -> JobTitle | None: ...

    def lookup_baseline(self, job_title: str | None) -> JobTitle | None: ...

    def lookup_cap(self, job_title: str | None, event_name: str) -> Decimal | None: ...
