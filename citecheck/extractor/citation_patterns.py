"""Locate reporter citations and case names in raw text.

Each rule in CITATION_RULES is applied on its own and the matches are
concatenated, then sorted by start offset. Matches from different rules are
not merged, so two rules may report overlapping spans for the same text.
"""

import re
from dataclasses import dataclass

Span = tuple[int, int]


@dataclass(frozen=True)
class PatternRule:
    name: str
    pattern: re.Pattern


# Ordered rule table; extend by appending rules
CITATION_RULES: list[PatternRule] = [
    PatternRule("f3d", re.compile(r"\d+\s+F\.\s*3d\s+\d+")),
    PatternRule("f2d", re.compile(r"\d+\s+F\.\s*2d\s+\d+")),
    PatternRule("f", re.compile(r"\d+\s+F\.\s+\d+")),
    PatternRule("f_supp", re.compile(r"\d+\s+F\.\s*Supp\.(?:\s*[23]d)?\s+\d+")),
    PatternRule("us", re.compile(r"\d+\s+U\.S\.\s+\d+")),
    PatternRule("s_ct", re.compile(r"\d+\s+S\.\s*Ct\.\s+\d+")),
    PatternRule("westlaw", re.compile(r"\d{4}\s+WL\s+\d+")),
]

# "Party v. Party" where each party is a run of capitalized words, allowing
# short lowercase connectors ("Board of Education", "Department of the Navy").
# A period ends a word unless it closes an abbreviation or a run of initials,
# so "Smith v. Jones. See" stops at "Jones".
ABBREVIATION = (
    r"(?:Co|Corp|Inc|Ltd|Bros|Dept|Dist|Bd|Educ|Hosp|Ins|Mfg|Univ|"
    r"Ass'n|Nat'l|Int'l|Comm'n|Gov't|Sec'y|Jr|Sr|St|Mt)\."
)
INITIALS = r"(?:[A-Z]\.)+"
_NAME_WORD = rf"(?:{ABBREVIATION}|{INITIALS}|[A-Z][A-Za-z'&\-]*)"
# Capitalized words that open a new sentence or clause rather than extend a party
_SENTENCE_START = r"(?:See|Cf|But|Accord|Compare|Id|In|The|This|That|Here|Although)\b"
_CONNECTOR = r"(?:of|the|and|for|de|ex\s+rel\.)"
_PARTY = rf"{_NAME_WORD}(?:,?\s+(?:{_CONNECTOR}\s+)*(?!{_SENTENCE_START}){_NAME_WORD})*"
CASE_NAME_PATTERN = re.compile(rf"{_PARTY}\s+(?:v\.|vs\.|versus)\s+{_PARTY}")

# Docket and caption noise stripped by clean_legal_text
_ARTIFACTS = [
    r"FILED",
    r"Page \d+",
    r"Case No\.",
    r"IT IS ORDERED",
    r"ORDER",
    r"UNITED STATES DISTRICT COURT",
    r"DISTRICT COURT",
    r"SUPERIOR COURT",
    r"SUPREME COURT",
]
_RE_ARTIFACTS = re.compile("|".join(_ARTIFACTS))
_RE_WHITESPACE = re.compile(r"\s+")


def find_citation_ranges(text: str, rules: list[PatternRule] | None = None) -> list[Span]:
    """Return (start, end) offsets of citation matches, ascending by start."""
    spans: list[Span] = []
    for rule in rules if rules is not None else CITATION_RULES:
        spans.extend(m.span() for m in rule.pattern.finditer(text))
    # Stable sort keeps rule order for spans sharing a start offset
    return sorted(spans, key=lambda span: span[0])


def find_case_name_ranges(text: str) -> list[Span]:
    """Return offsets of "X v. Y" case names in regex match order."""
    return [m.span() for m in CASE_NAME_PATTERN.finditer(text)]


def extract_citations(text: str) -> list[str]:
    return [text[start:end] for start, end in find_citation_ranges(text)]


def extract_case_names(text: str) -> list[str]:
    return [text[start:end] for start, end in find_case_name_ranges(text)]


def contains_citations(text: str) -> bool:
    return any(rule.pattern.search(text) for rule in CITATION_RULES)


def contains_case_names(text: str) -> bool:
    return CASE_NAME_PATTERN.search(text) is not None


def clean_legal_text(text: str) -> str:
    """Remove docket/caption artifacts and collapse whitespace."""
    cleaned = _RE_ARTIFACTS.sub("", text)
    return _RE_WHITESPACE.sub(" ", cleaned).strip()
