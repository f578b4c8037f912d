"""Find the case name that belongs to a citation.

Looks around the citation's first occurrence in the document and picks the
"X v. Y" candidate whose end lies closest to where the citation starts.
"""

import logging
import re

from citecheck.extractor.citation_patterns import ABBREVIATION, CASE_NAME_PATTERN, INITIALS

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 200
MIN_NAME_LENGTH = 5

_RE_PARENTHETICAL = re.compile(r"\([^)]*\)")
_RE_WHITESPACE = re.compile(r"\s+")
_RE_DIGIT = re.compile(r"\d")
# Citation signals that precede a case name but are not part of it
_RE_LEADING_SIGNAL = re.compile(
    r"^(?:See\s+also|See|But\s+see|Cf\.|Accord|Compare|In|E\.g\.,?)\s+(?=\S)"
)
_RE_ELLIPSIS = re.compile(r"\s*\.{2,}$")
# A trailing period that belongs to the name ("Widget Inc.", "U.S.")
_RE_ABBREVIATED_END = re.compile(rf"\b(?:{ABBREVIATION}|{INITIALS})$")


def clean_case_name(raw: str) -> str:
    """Normalize spacing and strip parentheticals and stray punctuation."""
    name = _RE_PARENTHETICAL.sub("", raw)
    name = _RE_WHITESPACE.sub(" ", name).replace(" ,", ",").replace(" :", "")
    name = _RE_LEADING_SIGNAL.sub("", name.strip())
    name = name.lstrip(" ,;:.").rstrip(" ,;:")
    name = _RE_ELLIPSIS.sub("", name).rstrip(" ,;:")
    if name.endswith(".") and not _RE_ABBREVIATED_END.search(name):
        name = name.rstrip(".").rstrip(" ,;:")
    return name


class CaseNameResolver:
    def __init__(self, window: int = DEFAULT_WINDOW):
        self.window = window

    def resolve(self, citation: str, document: str) -> str | None:
        """Case name near ``citation`` in ``document``, else from the citation itself."""
        return self.from_context(citation, document) or self.from_citation(citation)

    def from_context(self, citation: str, document: str) -> str | None:
        if not citation:
            return None
        position = document.find(citation)
        if position < 0:
            return None

        window_start = max(0, position - self.window)
        window_end = min(len(document), position + len(citation) + self.window)
        context = document[window_start:window_end]
        citation_offset = position - window_start

        best_name = None
        best_distance = None
        for match in CASE_NAME_PATTERN.finditer(context):
            name = clean_case_name(match.group(0))
            if len(name) < MIN_NAME_LENGTH or _RE_DIGIT.search(name):
                continue
            distance = abs(citation_offset - match.end())
            if best_distance is None or distance < best_distance:
                best_name, best_distance = name, distance

        if best_name:
            logger.debug("Resolved %r to %r (distance %d)", citation, best_name, best_distance)
        return best_name or None

    def from_citation(self, citation: str) -> str | None:
        """First "X v. Y" inside the citation text; no distance scoring."""
        match = CASE_NAME_PATTERN.search(citation)
        if not match:
            return None
        return clean_case_name(match.group(0)) or None
