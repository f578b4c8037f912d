"""Tests for Citation updates, summaries and the markdown report."""

import dataclasses

import pytest

from citecheck.models.citation import (
    CaseNameStatus,
    Citation,
    CitationStatus,
    ValidationResult,
    ValidationSummary,
)
from citecheck.output.report import render_report


# ---------------------------------------------------------------------------
# Citation
# ---------------------------------------------------------------------------

class TestCitation:
    def test_defaults_pending(self):
        citation = Citation(original_text="347 U.S. 483")
        assert citation.citation_status is CitationStatus.PENDING
        assert citation.case_name_status is CaseNameStatus.PENDING
        assert citation.notes is None

    def test_updated_returns_new_value(self):
        original = Citation(original_text="347 U.S. 483")
        changed = original.updated(citation_status=CitationStatus.VALID, case_name="Brown")
        assert changed is not original
        assert original.citation_status is CitationStatus.PENDING
        assert changed.citation_status is CitationStatus.VALID
        assert changed.case_name == "Brown"

    def test_updated_keeps_identity_and_timestamp(self):
        original = Citation(original_text="347 U.S. 483")
        changed = original.updated(notes="checked")
        assert changed.id == original.id
        assert changed.timestamp == original.timestamp
        assert changed.original_text == original.original_text

    def test_none_keeps_previous_value(self):
        original = Citation(original_text="347 U.S. 483", case_name="Brown")
        assert original.updated(case_name=None).case_name == "Brown"

    def test_original_text_cannot_change(self):
        with pytest.raises(TypeError):
            Citation(original_text="a").updated(original_text="b")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Citation(original_text="a").notes = "x"

    def test_ids_unique(self):
        assert Citation(original_text="a").id != Citation(original_text="a").id


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def _result(*statuses, errors=()):
    citations = tuple(Citation(original_text=f"{i} U.S. {i}", citation_status=s) for i, s in enumerate(statuses))
    return ValidationResult(citations=citations, processing_time=1.5, errors=errors)


class TestSummary:
    def test_counts(self):
        summary = ValidationSummary.from_result(_result(
            CitationStatus.VALID, CitationStatus.VALID, CitationStatus.INVALID, CitationStatus.ERROR,
        ))
        assert summary.total_citations == 4
        assert summary.valid_citations == 2
        assert summary.invalid_citations == 1
        assert summary.error_citations == 1
        assert summary.pending_citations == 0
        assert summary.validation_rate == 0.5
        assert not summary.has_errors

    def test_empty_rate(self):
        assert ValidationSummary.from_result(ValidationResult()).validation_rate == 0.0

    def test_describe(self):
        text = ValidationSummary.from_result(_result(CitationStatus.VALID, errors=("boom",))).describe()
        assert "- Success Rate: 100.0%" in text
        assert "- Processing Time: 1.50s" in text


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

class TestReport:
    def test_table_rows(self):
        result = ValidationResult(citations=(
            Citation(
                original_text="347 U.S. 483",
                case_name="Brown v. Board of Education",
                citation_status=CitationStatus.VALID,
                case_name_status=CaseNameStatus.VALID,
                court_listener_url="https://www.courtlistener.com/opinion/103/brown/",
                notes="Case: Brown v. Board of Education",
            ),
            Citation(
                original_text="999 F.3d 1",
                case_name="Smith v. Jones",
                citation_status=CitationStatus.INVALID,
                case_name_status=CaseNameStatus.PARTIALLY_VALID,
            ),
        ))
        report = render_report(result)
        assert "## Citation Verification" in report
        assert "| 1 | 347 U.S. 483 | Verified | Brown v. Board of Education | Verified |" in report
        assert "[CourtListener](https://www.courtlistener.com/opinion/103/brown/)" in report
        assert "| 2 | 999 F.3d 1 | Not found | Smith v. Jones | Found by name |  |" in report
        assert "**1. 347 U.S. 483**" in report
        assert "**2. 999 F.3d 1**" not in report

    def test_empty_with_errors(self):
        report = render_report(ValidationResult(errors=("Citation validation error: boom",)))
        assert "No citations were recognized." in report
        assert "- Citation validation error: boom" in report
