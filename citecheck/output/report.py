"""Render a validation result as a markdown report."""

from citecheck.models.citation import CaseNameStatus, CitationStatus, ValidationResult, ValidationSummary

_CITATION_LABELS = {
    CitationStatus.PENDING: "Pending",
    CitationStatus.VALID: "Verified",
    CitationStatus.INVALID: "Not found",
    CitationStatus.ERROR: "Error",
}

_CASE_NAME_LABELS = {
    CaseNameStatus.PENDING: "Pending",
    CaseNameStatus.VALID: "Verified",
    CaseNameStatus.PARTIALLY_VALID: "Found by name",
    CaseNameStatus.INVALID: "Not found",
    CaseNameStatus.ERROR: "Error",
}


def _cell(value: str | None) -> str:
    return (value or "").replace("|", "\\|").replace("\n", " ")


def render_report(result: ValidationResult) -> str:
    summary = ValidationSummary.from_result(result)
    lines = [
        "",
        "## Citation Verification",
        "",
        (
            f"Verified: {summary.valid_citations} | Not found: {summary.invalid_citations} | "
            f"Errors: {summary.error_citations} | Total: {summary.total_citations} | "
            f"Time: {summary.processing_time:.2f}s"
        ),
        "",
    ]

    if result.citations:
        lines.append("| # | Citation | Citation status | Case name | Case name status | Link |")
        lines.append("|---|----------|-----------------|-----------|------------------|------|")
        for i, c in enumerate(result.citations, 1):
            link = f"[CourtListener]({c.court_listener_url})" if c.court_listener_url else ""
            lines.append(
                f"| {i} | {_cell(c.original_text)} | {_CITATION_LABELS[c.citation_status]} | "
                f"{_cell(c.case_name)} | {_CASE_NAME_LABELS[c.case_name_status]} | {link} |"
            )
    else:
        lines.append("No citations were recognized.")

    noted = [(i, c) for i, c in enumerate(result.citations, 1) if c.notes]
    if noted:
        lines += ["", "### Notes"]
        for i, c in noted:
            lines += ["", f"**{i}. {c.original_text}**", "", c.notes]

    if result.errors:
        lines += ["", "### Errors", ""]
        lines += [f"- {error}" for error in result.errors]

    return "\n".join(lines) + "\n"
