"""Citation records produced by validation."""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum


class CitationStatus(Enum):
    PENDING = "pending"
    VALID = "valid"
    INVALID = "invalid"
    ERROR = "error"


class CaseNameStatus(Enum):
    PENDING = "pending"
    VALID = "valid"
    PARTIALLY_VALID = "partiallyValid"
    INVALID = "invalid"
    ERROR = "error"


@dataclass(frozen=True)
class Citation:
    original_text: str
    normalized_citation: str | None = None
    case_name: str | None = None
    citation_status: CitationStatus = CitationStatus.PENDING
    case_name_status: CaseNameStatus = CaseNameStatus.PENDING
    cluster_id: str | None = None
    court_listener_url: str | None = None
    opinion_text: str | None = None
    notes: str | None = None
    start_index: int | None = None  # offsets reported by citation-lookup
    end_index: int | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    def updated(self, **changes) -> "Citation":
        """Return a copy with the given fields replaced.

        Arguments passed as None keep the current value, so callers can
        forward optional values without clobbering what is already known.
        Identity, original text and timestamp never change.
        """
        for frozen_field in ("id", "original_text", "timestamp"):
            if frozen_field in changes:
                raise TypeError(f"{frozen_field} cannot be changed")
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


@dataclass(frozen=True)
class ValidationResult:
    citations: tuple[Citation, ...] = ()
    processing_time: float = 0.0
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationSummary:
    total_citations: int
    valid_citations: int
    invalid_citations: int
    error_citations: int
    pending_citations: int
    processing_time: float
    has_errors: bool

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationSummary":
        def count(status: CitationStatus) -> int:
            return sum(1 for c in result.citations if c.citation_status is status)

        return cls(
            total_citations=len(result.citations),
            valid_citations=count(CitationStatus.VALID),
            invalid_citations=count(CitationStatus.INVALID),
            error_citations=count(CitationStatus.ERROR),
            pending_citations=count(CitationStatus.PENDING),
            processing_time=result.processing_time,
            has_errors=bool(result.errors),
        )

    @property
    def validation_rate(self) -> float:
        if self.total_citations == 0:
            return 0.0
        return self.valid_citations / self.total_citations

    def describe(self) -> str:
        return "\n".join([
            "Citation Validation Summary:",
            f"- Total: {self.total_citations}",
            f"- Valid: {self.valid_citations}",
            f"- Invalid: {self.invalid_citations}",
            f"- Errors: {self.error_citations}",
            f"- Pending: {self.pending_citations}",
            f"- Success Rate: {self.validation_rate * 100:.1f}%",
            f"- Processing Time: {self.processing_time:.2f}s",
        ])
