"""Tests for the WageCalculator facade, advisory text and starting wage."""

from __future__ import annotations

from decimal import Decimal

import pytest

from tests.fakes import make_schedule, make_store
from wageproj.core.config import AppSettings
from wageproj.engine.calculator import WageCalculator, starting_wage, wage_advisory
from wageproj.engine.schedule import DEFAULT_SCHEDULE
from wageproj.models.selection import Selection
from wageproj.reference import create_reference_store


@pytest.fixture
def calculator():
    return WageCalculator(make_store(), make_schedule(), AppSettings())


class TestWageAdvisory:
    def test_in_range_is_silent(self):
        selection = Selection(job_title="Deputy I", wage=Decimal("35"))
        assert wage_advisory(selection, make_store()) == ""

    def test_below_min_names_min(self):
        selection = Selection(job_title="Deputy I", wage=Decimal("20"))
        assert wage_advisory(selection, make_store()) == (
            "Salary must be at least $30. We've used the min amount known for this job title."
        )

    def test_above_max_names_max(self):
        selection = Selection(job_title="Deputy I", wage=Decimal("50"))
        assert wage_advisory(selection, make_store()) == (
            "Salary must not exceed $45. We've used the max amount known for this job title."
        )

    def test_cleared_wage(self):
        selection = Selection(job_title="Deputy I").enter_wage("")
        assert wage_advisory(selection, make_store()) == "Please enter a value"

    def test_nothing_entered_yet(self):
        assert wage_advisory(Selection(job_title="Deputy I"), make_store()) == ""

    def test_fallback_bounds_without_job(self):
        selection = Selection(wage=Decimal("90"))
        assert wage_advisory(selection, make_store()) == (
            "Salary must not exceed $80. We've used the max amount known for this job title."
        )

    def test_non_finite_wage_is_silent(self):
        selection = Selection(job_title="Deputy I").model_copy(update={"wage": Decimal("NaN")})
        assert wage_advisory(selection, make_store()) == ""

    def test_step_job_never_advises(self):
        selection = Selection(job_title="Jailer", wage=Decimal("500"))
        assert wage_advisory(selection, make_store()) == ""


class TestStartingWage:
    def test_range_job_uses_entered_wage(self):
        assert starting_wage(Selection(job_title="Deputy I", wage=Decimal("31")), make_store()) == Decimal("31")

    def test_step_job_uses_current_step_wage(self):
        assert starting_wage(Selection(job_title="Jailer", step=2), make_store()) == Decimal("25.00")

    def test_incomplete(self):
        assert starting_wage(Selection(job_title="Jailer"), make_store()) is None
        assert starting_wage(Selection(wage=Decimal("31")), make_store()) is None


class TestReport:
    def test_groups_rows_into_tables(self, calculator):
        report = calculator.report(Selection(job_title="Deputy I", wage=Decimal("30")))
        assert [table.title for table in report.tables] == ["Immediate", "Year 1"]
        assert [len(table.rows) for table in report.tables] == [1, 2]
        assert report.tables[1].rows[0].result.final_amount == "32.70"

    def test_reports_range_and_advisory(self, calculator):
        report = calculator.report(Selection(job_title="Deputy I", wage=Decimal("20")))
        assert report.job_title == "Deputy I"
        assert report.min_wage == Decimal("30")
        assert report.max_wage == Decimal("45")
        assert report.advisory.startswith("Salary must be at least $30.")
        assert report.tables[0].rows[0].result.final_amount == "30.00"

    def test_step_job_report(self, calculator):
        report = calculator.report(Selection(job_title="Jailer", step=2))
        assert report.steps == [1, 2]
        assert report.min_wage is None
        assert report.tables[0].rows[0].result.final_amount == "26.00"

    @pytest.mark.parametrize("text", ["abc", "NaN"])
    def test_unparseable_wage_is_all_unavailable(self, calculator, text):
        report = calculator.report(Selection(job_title="Deputy I").enter_wage(text))
        assert report.advisory == ""
        assert all(
            row.result.final_amount == "N/A" for table in report.tables for row in table.rows
        )

    def test_empty_selection_is_all_unavailable(self, calculator):
        report = calculator.report(Selection())
        assert report.job_title is None
        assert all(
            row.result.final_amount == "N/A" for table in report.tables for row in table.rows
        )


class TestBundledData:
    def test_deputy_sheriff_first_contract_year(self):
        calculator = WageCalculator(create_reference_store(), DEFAULT_SCHEDULE)
        report = calculator.report(Selection(job_title="Deputy Sheriff I", wage=Decimal("40")))
        immediate, year1, year2, _ = report.tables
        assert immediate.rows[0].result.final_amount == "40.00"
        assert [row.result.final_amount for row in year1.rows] == ["43.60", "45.34"]
        assert [row.result.step_percentage for row in year1.rows] == ["9", "4"]
        assert year2.rows[0].result.final_amount == "47.61"
        assert year2.rows[0].result.step_percentage == "5"
