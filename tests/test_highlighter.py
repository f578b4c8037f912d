"""Tests for status-keyed citation markup."""

from citecheck.models.citation import Citation, CitationStatus
from citecheck.output import highlighter
from citecheck.output.highlighter import highlight_citations, match_citation

BROWN = "Brown v. Board of Education, 347 U.S. 483 (1954)"


def cite(text, status, **kwargs):
    return Citation(original_text=text, citation_status=status, **kwargs)


# ---------------------------------------------------------------------------
# Markup by status
# ---------------------------------------------------------------------------

class TestMarkup:
    def test_no_ranges_unchanged(self):
        text = "Nothing to see here, Smith v. Jones."
        assert highlight_citations(text, [cite("347 U.S. 483", CitationStatus.VALID)]) == text

    def test_valid_is_bold(self):
        result = highlight_citations(BROWN, [cite("347 U.S. 483", CitationStatus.VALID)])
        assert result == "Brown v. Board of Education, **347 U.S. 483** (1954)"

    def test_invalid_is_italic(self):
        result = highlight_citations("See 999 F.3d 1.", [cite("999 F.3d 1", CitationStatus.INVALID)])
        assert result == "See *999 F.3d 1*."

    def test_error_is_struck(self):
        result = highlight_citations("See 999 F.3d 1.", [cite("999 F.3d 1", CitationStatus.ERROR)])
        assert result == "See ~~999 F.3d 1~~."

    def test_pending_is_code(self):
        result = highlight_citations("See 999 F.3d 1.", [cite("999 F.3d 1", CitationStatus.PENDING)])
        assert result == "See `999 F.3d 1`."

    def test_unmatched_is_code(self):
        assert highlight_citations("See 999 F.3d 1.") == "See `999 F.3d 1`."

    def test_html_style_escapes(self):
        text = "A & B, 347 U.S. 483 <here>"
        result = highlight_citations(text, [cite("347 U.S. 483", CitationStatus.VALID)], style="html")
        assert result == "A &amp; B, <strong>347 U.S. 483</strong> &lt;here&gt;"


# ---------------------------------------------------------------------------
# Multiple ranges
# ---------------------------------------------------------------------------

class TestMultipleRanges:
    def test_offsets_survive_earlier_substitutions(self):
        text = "First 347 U.S. 483, then 999 F.3d 1, finally 2020 WL 123456."
        citations = [
            cite("347 U.S. 483", CitationStatus.VALID),
            cite("999 F.3d 1", CitationStatus.INVALID),
            cite("2020 WL 123456", CitationStatus.ERROR),
        ]
        assert highlight_citations(text, citations) == (
            "First **347 U.S. 483**, then *999 F.3d 1*, finally ~~2020 WL 123456~~."
        )

    def test_repeated_citation_correlated_by_offsets(self):
        text = "First 999 F.3d 1 then 999 F.3d 1 again"
        citations = [
            cite("999 F.3d 1", CitationStatus.INVALID, start_index=22, end_index=32),
            cite("999 F.3d 1", CitationStatus.VALID, start_index=6, end_index=16),
        ]
        assert highlight_citations(text, citations) == "First **999 F.3d 1** then *999 F.3d 1* again"

    def test_overlapping_ranges_do_not_corrupt_text(self, monkeypatch):
        monkeypatch.setattr(highlighter, "find_citation_ranges", lambda text: [(0, 12), (4, 12)])
        result = highlight_citations("347 U.S. 483 rest")
        assert result == "347 `U.S. 483` rest"

    def test_highlighting_is_content_stable(self):
        citations = [cite("347 U.S. 483", CitationStatus.VALID)]
        assert highlight_citations(BROWN, citations) == highlight_citations(BROWN, citations)


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------

class TestMatchCitation:
    def test_citation_text_contains_range(self):
        longer = cite("Brown v. Board of Education, 347 U.S. 483", CitationStatus.VALID)
        assert match_citation((29, 41), "347 U.S. 483", [longer]) is longer

    def test_range_contains_citation_text(self):
        shorter = cite("U.S. 483", CitationStatus.VALID)
        assert match_citation((0, 12), "347 U.S. 483", [shorter]) is shorter

    def test_normalized_form_matches(self):
        normalized = cite("347 U. S. 483", CitationStatus.VALID, normalized_citation="347 U.S. 483")
        assert match_citation((0, 12), "347 U.S. 483", [normalized]) is normalized

    def test_no_match(self):
        assert match_citation((0, 10), "999 F.3d 1", [cite("347 U.S. 483", CitationStatus.VALID)]) is None

    def test_offsets_alone_do_not_match(self):
        other = cite("347 U.S. 483", CitationStatus.VALID, start_index=0, end_index=10)
        assert match_citation((0, 10), "999 F.3d 1", [other]) is None
