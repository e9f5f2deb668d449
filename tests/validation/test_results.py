"""Tests for validation result types."""

import dataclasses

import pytest

from business_id.validation.reasons import FailReason, ReasonCatalog
from business_id.validation.results import ReportBuilder, ValidationReport


class TestValidationReport:
    """Tests for ValidationReport."""

    def test_frozen(self):
        report = ValidationReport("0357502-9", True)

        with pytest.raises(dataclasses.FrozenInstanceError):
            report.satisfied = False

    def test_format_reasons(self):
        report = ValidationReport(
            "357502-9",
            False,
            (FailReason.INPUT_TOO_SHORT, FailReason.PREFIX_TOO_SHORT),
            ("first", "second"),
        )

        assert report.failed
        assert report.format_reasons() == "  1: first\n  2: second"

    def test_format_reasons_on_success(self):
        assert ValidationReport("0357502-9", True).format_reasons() == ""


class TestReportBuilder:
    """Tests for ReportBuilder."""

    def test_build_success(self):
        report = ReportBuilder("0357502-9").build(True, ReasonCatalog())

        assert report.satisfied
        assert report.reasons == ()

    def test_build_keeps_order(self):
        builder = ReportBuilder("x")
        builder.report(FailReason.DELIMITER_MISSING)
        builder.report(FailReason.CONTAINS_INVALID_CHARACTERS)

        report = builder.build(False, ReasonCatalog())

        assert report.reasons == (
            FailReason.DELIMITER_MISSING,
            FailReason.CONTAINS_INVALID_CHARACTERS,
        )
        assert report.messages == (
            "Does not contain the required verification number delimiter: '-'",
            "Contains incorrect character(s)",
        )

    def test_reported_reason_forces_failure(self):
        builder = ReportBuilder("x")
        builder.report(FailReason.INPUT_TOO_LONG)

        assert not builder.build(True, ReasonCatalog()).satisfied

    def test_report_detached_from_builder(self):
        builder = ReportBuilder("x")
        builder.report(FailReason.INPUT_TOO_LONG)
        report = builder.build(False, ReasonCatalog())

        builder.report(FailReason.INPUT_TOO_SHORT)

        assert report.reasons == (FailReason.INPUT_TOO_LONG,)
