"""Tests for JobTitle, Step and CapRow models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from wageproj.models.reference import CapRow, JobTitle, Step


class TestJobTitle:
    def test_range_job(self):
        job = JobTitle(job_title="Deputy I", min=Decimal("30"), max=Decimal("45"))
        assert not job.is_step_based
        assert job.clamp(Decimal("20")) == Decimal("30")
        assert job.clamp(Decimal("50")) == Decimal("45")
        assert job.clamp(Decimal("33.3")) == Decimal("33.3")

    def test_step_job_lookup(self):
        job = JobTitle(job_title="Jailer", steps=[{"number": 1, "hourly": 20}, {"number": 2, "hourly": 25}])
        assert job.is_step_based
        assert job.step(2) == Step(number=2, hourly=Decimal("25"))
        assert job.step(3) is None
        assert job.step(None) is None

    def test_requires_range_or_steps(self):
        with pytest.raises(ValidationError):
            JobTitle(job_title="Nothing")

    def test_rejects_min_above_max(self):
        with pytest.raises(ValidationError):
            JobTitle(job_title="Backwards", min=Decimal("50"), max=Decimal("40"))

    def test_rejects_duplicate_steps(self):
        with pytest.raises(ValidationError):
            JobTitle(job_title="Dup", steps=[{"number": 1, "hourly": 20}, {"number": 1, "hourly": 21}])

    def test_rejects_step_zero(self):
        with pytest.raises(ValidationError):
            Step(number=0, hourly=Decimal("20"))

    def test_is_immutable(self):
        job = JobTitle(job_title="Deputy I", min=Decimal("30"), max=Decimal("45"))
        with pytest.raises(ValidationError):
            job.min = Decimal("1")


class TestCapRow:
    def test_keeps_numeric_caps(self):
        row = CapRow.from_document({"job_title": "Deputy I", "COLA": Decimal("40.5"), "Range": 32})
        assert row.caps == {"COLA": Decimal("40.5"), "Range": Decimal("32")}

    def test_drops_non_numeric_caps(self):
        row = CapRow.from_document({"job_title": "Deputy I", "COLA": "N/A", "Flag": True, "Range": None})
        assert row.caps == {}

    def test_drops_non_finite_caps(self):
        row = CapRow.from_document({
            "job_title": "Deputy I", "COLA": float("nan"), "Range": float("inf"), "Later": Decimal("NaN"),
        })
        assert row.caps == {}
