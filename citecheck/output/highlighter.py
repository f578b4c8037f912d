"""Mark validated citations in the original text.

Ranges are recomputed with the regex extractor and rewritten from the last
one backwards, so a substitution never shifts the offsets of a range that
has not been processed yet.
"""

import html
import logging

from citecheck.extractor.citation_patterns import Span, find_citation_ranges
from citecheck.models.citation import Citation, CitationStatus

logger = logging.getLogger(__name__)

# Status -> template; None covers pending and unmatched ranges
MARKDOWN = {
    CitationStatus.VALID: "**{}**",
    CitationStatus.INVALID: "*{}*",
    CitationStatus.ERROR: "~~{}~~",
    None: "`{}`",
}

HTML = {
    CitationStatus.VALID: "<strong>{}</strong>",
    CitationStatus.INVALID: "<em>{}</em>",
    CitationStatus.ERROR: "<del>{}</del>",
    None: "<code>{}</code>",
}

STYLES = {"markdown": MARKDOWN, "html": HTML}


def highlight_citations(
    text: str,
    citations: list[Citation] | tuple[Citation, ...] | None = None,
    style: str = "markdown",
) -> str:
    templates = STYLES[style]
    escape = html.escape if style == "html" else _identity

    pieces = []
    cursor = len(text)
    for start, end in sorted(find_citation_ranges(text), key=lambda s: s[0], reverse=True):
        if end > cursor:
            # Overlaps a range that is already marked
            logger.debug("Skipping overlapping citation range %d-%d", start, end)
            continue
        fragment = text[start:end]
        match = match_citation((start, end), fragment, citations or ())
        status = match.citation_status if match else None
        template = templates.get(status, templates[None])
        pieces.append(escape(text[end:cursor]))
        pieces.append(template.format(escape(fragment)))
        cursor = start
    pieces.append(escape(text[:cursor]))
    return "".join(reversed(pieces))


def match_citation(
    span: Span, fragment: str, citations: list[Citation] | tuple[Citation, ...]
) -> Citation | None:
    """Pick the validated citation for an extracted range.

    Candidates must agree on text (either side containing the other). Among
    those, one whose lookup offsets overlap the range wins, which keeps
    repeated or similar citations in one document apart.
    """
    candidates = [c for c in citations if _text_matches(c, fragment)]
    for citation in candidates:
        if _overlaps(citation, span):
            return citation
    return candidates[0] if candidates else None


def _text_matches(citation: Citation, fragment: str) -> bool:
    if not fragment:
        return False
    for known in (citation.original_text, citation.normalized_citation):
        if known and (fragment in known or known in fragment):
            return True
    return False


def _overlaps(citation: Citation, span: Span) -> bool:
    if citation.start_index is None or citation.end_index is None:
        return False
    start, end = span
    return citation.start_index < end and start < citation.end_index


def _identity(value: str) -> str:
    return value
