"""Human-readable diagnostic notes attached to each classified citation."""

from citecheck.models.api import CaseSearchHit, LookupResponse

MAX_EXTRA_MATCHES = 3


def _normalized(response: LookupResponse) -> str | None:
    if response.normalized_citations and response.normalized_citations[0] != response.citation:
        return response.normalized_citations[0]
    return None


def valid_citation_notes(response: LookupResponse) -> str | None:
    notes = []
    normalized = _normalized(response)
    if normalized:
        notes.append(f"Normalized: {normalized}")
    if response.clusters:
        cluster = response.clusters[0]
        notes.append(f"Case: {cluster.case_name}")
        notes.append(f"CourtListener ID: {cluster.id}")
    if len(response.clusters) > 1:
        notes.append("")
        notes.append("Additional matches found:")
        for cluster in response.clusters[1:1 + MAX_EXTRA_MATCHES]:
            notes.append(f"- {cluster.case_name}")
    return "\n".join(notes) if notes else None


def invalid_citation_notes(response: LookupResponse) -> str:
    notes = ["Citation not found in CourtListener database"]
    if response.error_message:
        notes.append(f"Error: {response.error_message}")
    normalized = _normalized(response)
    if normalized:
        notes.append(f"Normalized format: {normalized}")
    notes += [
        "",
        "This citation may be:",
        "- From a jurisdiction not covered by CourtListener",
        "- A recent case not yet indexed",
        "- Incorrectly formatted",
        "- A non-case citation (statute, regulation, etc.)",
    ]
    return "\n".join(notes)


def case_name_found_notes(case_name: str, hits: list[CaseSearchHit]) -> str:
    notes = [
        "Citation format invalid, but case found by name",
        f"Case: {case_name}",
    ]
    if hits:
        first = hits[0]
        notes.append(f"Found: {first.case_name}")
        notes.append(f"Court: {first.court}")
        notes.append(f"Date: {first.date_filed}")
        if first.citation:
            notes.append(f"Proper citation: {', '.join(first.citation)}")
    if len(hits) > 1:
        notes.append("")
        notes.append("Additional matches found:")
        for hit in hits[1:1 + MAX_EXTRA_MATCHES]:
            notes.append(f"- {hit.case_name} ({hit.court})")
    return "\n".join(notes)


def case_name_not_found_notes(case_name: str) -> str:
    return "\n".join([
        "Citation and case name not found",
        f"Searched for: {case_name}",
        "",
        "This may be:",
        "- A hallucinated or fictional case",
        "- From a jurisdiction not in CourtListener",
        "- A very recent case not yet indexed",
        "- Incorrectly spelled or formatted",
    ])


def search_failed_notes(case_name: str, error: Exception) -> str:
    return f"Error searching case name {case_name!r}: {error}"
